from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from model.school import School
from schemas.school_schema import SchoolCreate, SchoolUpdate
from schemas.user_schema import Identity
from utils.authz import require_admin


def _normalize(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_schools_by_name(db: Session, name_query: str = "") -> list[School]:
    query = db.query(School)
    name_query = name_query.strip()
    if name_query:
        query = query.filter(School.name.ilike(f"%{_escape_like(name_query)}%", escape="\\"))
    return query.order_by(School.name, School.id).all()


def get_schools_by_location(
    db: Session,
    country: str | None = None,
    state: str | None = None,
    city: str | None = None,
) -> list[School]:
    """Omitted components match anything."""
    query = db.query(School)
    for column, value in ((School.country, country), (School.state, state), (School.city, city)):
        value = _normalize(value)
        if value is not None:
            query = query.filter(func.lower(column) == value.lower())
    return query.order_by(School.name, School.id).all()


def get_school_by_id(db: Session, school_id: str) -> School:
    school = db.get(School, school_id)
    if not school:
        raise HTTPException(status_code=404, detail=f"School {school_id} does not exist")

    return school


def create_school(db: Session, identity: Identity, payload: SchoolCreate) -> School:
    require_admin(identity, "create schools")
    if db.get(School, payload.id):
        raise HTTPException(status_code=409, detail=f"School {payload.id} already exists")

    school = School(
        id=payload.id,
        name=payload.name.strip(),
        location=payload.location.strip(),
        country=_normalize(payload.country),
        state=_normalize(payload.state),
        city=_normalize(payload.city),
        video_url=_normalize(payload.video_url),
    )
    db.add(school)
    db.commit()
    db.refresh(school)
    return school


def update_school(db: Session, identity: Identity, school_id: str, payload: SchoolUpdate) -> School:
    require_admin(identity, "update schools")
    school = get_school_by_id(db, school_id)

    school.name = payload.name.strip()
    school.location = payload.location.strip()
    school.country = _normalize(payload.country)
    school.state = _normalize(payload.state)
    school.city = _normalize(payload.city)
    school.video_url = _normalize(payload.video_url)

    db.commit()
    db.refresh(school)
    return school


def delete_school(db: Session, identity: Identity, school_id: str) -> None:
    require_admin(identity, "delete schools")
    school = get_school_by_id(db, school_id)
    # teachers, trainings and reviews go with it (delete-orphan cascade)
    db.delete(school)
    db.commit()

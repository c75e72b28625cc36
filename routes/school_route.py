from fastapi import APIRouter, Depends, Query, status
from redis import Redis
from sqlalchemy.orm import Session

from crud.school import (
    create_school,
    delete_school,
    get_school_by_id,
    get_schools_by_location,
    search_schools_by_name,
    update_school,
)
from crud.teacher import get_teachers_by_school
from crud.training import get_trainings_by_school
from schemas.school_schema import SchoolCreate, SchoolSchema, SchoolUpdate
from schemas.teacher_schema import TeacherSchema
from schemas.training_schema import TrainingSchema
from schemas.user_schema import Identity
from utils.database import get_db
from utils.jwt_utils import get_identity
from utils.redis_utils import get_redis_client, invalidate_directory

school_router = APIRouter()


@school_router.get("", response_model=list[SchoolSchema])
def search_schools(q: str = Query("", description="이름 부분 검색, 비우면 전체"), db: Session = Depends(get_db)):
    return search_schools_by_name(db, q)


# /location 을 /{school_id} 보다 먼저 등록해야 한다
@school_router.get("/location", response_model=list[SchoolSchema])
def schools_by_location(
    country: str | None = None,
    state: str | None = None,
    city: str | None = None,
    db: Session = Depends(get_db),
):
    return get_schools_by_location(db, country, state, city)


@school_router.get("/{school_id}", response_model=SchoolSchema)
def get_school(school_id: str, db: Session = Depends(get_db)):
    return get_school_by_id(db, school_id)


@school_router.post("", response_model=SchoolSchema, status_code=status.HTTP_201_CREATED)
def create(
    body: SchoolCreate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    cache: Redis | None = Depends(get_redis_client),
):
    school = create_school(db, identity, body)
    invalidate_directory(cache)
    return school


@school_router.put("/{school_id}", response_model=SchoolSchema)
def update(
    school_id: str,
    body: SchoolUpdate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    cache: Redis | None = Depends(get_redis_client),
):
    school = update_school(db, identity, school_id, body)
    invalidate_directory(cache)
    return school


@school_router.delete("/{school_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    school_id: str,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    cache: Redis | None = Depends(get_redis_client),
):
    delete_school(db, identity, school_id)
    invalidate_directory(cache)


@school_router.get("/{school_id}/teachers", response_model=list[TeacherSchema])
def school_teachers(school_id: str, db: Session = Depends(get_db)):
    return get_teachers_by_school(db, school_id)


@school_router.get("/{school_id}/trainings", response_model=list[TrainingSchema])
def school_trainings(school_id: str, db: Session = Depends(get_db)):
    return get_trainings_by_school(db, school_id)

from fastapi import HTTPException
from sqlalchemy.orm import Session

from crud.school import get_school_by_id
from model.teacher import Teacher
from schemas.teacher_schema import TeacherCreate, TeacherUpdate
from schemas.user_schema import Identity
from utils.authz import require_admin


def get_teacher_by_id(db: Session, teacher_id: str) -> Teacher:
    teacher = db.get(Teacher, teacher_id)
    if not teacher:
        raise HTTPException(status_code=404, detail=f"Teacher {teacher_id} does not exist")

    return teacher


def get_teachers_by_school(db: Session, school_id: str) -> list[Teacher]:
    return db.query(Teacher).filter_by(school_id=school_id).order_by(Teacher.name, Teacher.id).all()


def add_teacher(db: Session, identity: Identity, payload: TeacherCreate) -> Teacher:
    require_admin(identity, "add teachers")
    if db.get(Teacher, payload.id):
        raise HTTPException(status_code=409, detail=f"Teacher {payload.id} already exists")
    get_school_by_id(db, payload.school_id)

    teacher = Teacher(
        id=payload.id,
        name=payload.name.strip(),
        specialization=payload.specialization.strip(),
        school_id=payload.school_id,
    )
    db.add(teacher)
    db.commit()
    db.refresh(teacher)
    return teacher


def update_teacher(db: Session, identity: Identity, teacher_id: str, payload: TeacherUpdate) -> Teacher:
    require_admin(identity, "update teachers")
    teacher = get_teacher_by_id(db, teacher_id)
    get_school_by_id(db, payload.school_id)

    teacher.name = payload.name.strip()
    teacher.specialization = payload.specialization.strip()
    teacher.school_id = payload.school_id

    db.commit()
    db.refresh(teacher)
    return teacher


def delete_teacher(db: Session, identity: Identity, teacher_id: str) -> None:
    require_admin(identity, "delete teachers")
    teacher = get_teacher_by_id(db, teacher_id)
    db.delete(teacher)
    db.commit()

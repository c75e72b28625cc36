from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from crud.teacher import add_teacher, delete_teacher, get_teacher_by_id, update_teacher
from schemas.teacher_schema import TeacherCreate, TeacherSchema, TeacherUpdate
from schemas.user_schema import Identity
from utils.database import get_db
from utils.jwt_utils import get_identity

teacher_router = APIRouter()


@teacher_router.get("/{teacher_id}", response_model=TeacherSchema)
def get_teacher(teacher_id: str, db: Session = Depends(get_db)):
    return get_teacher_by_id(db, teacher_id)


@teacher_router.post("", response_model=TeacherSchema, status_code=status.HTTP_201_CREATED)
def create(body: TeacherCreate, identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    return add_teacher(db, identity, body)


@teacher_router.put("/{teacher_id}", response_model=TeacherSchema)
def update(
    teacher_id: str,
    body: TeacherUpdate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    return update_teacher(db, identity, teacher_id, body)


@teacher_router.delete("/{teacher_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(teacher_id: str, identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    delete_teacher(db, identity, teacher_id)

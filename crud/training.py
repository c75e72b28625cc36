from fastapi import HTTPException
from sqlalchemy.orm import Session

from crud.school import get_school_by_id
from model.training import Training
from schemas.training_schema import TrainingCreate, TrainingUpdate
from schemas.user_schema import Identity
from utils.authz import require_admin


def get_training_by_id(db: Session, training_id: str) -> Training:
    training = db.get(Training, training_id)
    if not training:
        raise HTTPException(status_code=404, detail=f"Training {training_id} does not exist")

    return training


def get_trainings_by_school(db: Session, school_id: str) -> list[Training]:
    return db.query(Training).filter_by(school_id=school_id).order_by(Training.hours, Training.id).all()


def add_training(db: Session, identity: Identity, payload: TrainingCreate) -> Training:
    require_admin(identity, "add trainings")
    if db.get(Training, payload.id):
        raise HTTPException(status_code=409, detail=f"Training {payload.id} already exists")
    get_school_by_id(db, payload.school_id)

    training = Training(
        id=payload.id,
        hours=payload.hours,
        description=payload.description.strip(),
        school_id=payload.school_id,
    )
    db.add(training)
    db.commit()
    db.refresh(training)
    return training


def update_training(db: Session, identity: Identity, training_id: str, payload: TrainingUpdate) -> Training:
    require_admin(identity, "update trainings")
    training = get_training_by_id(db, training_id)
    get_school_by_id(db, payload.school_id)

    training.hours = payload.hours
    training.description = payload.description.strip()
    training.school_id = payload.school_id

    db.commit()
    db.refresh(training)
    return training


def delete_training(db: Session, identity: Identity, training_id: str) -> None:
    require_admin(identity, "delete trainings")
    training = get_training_by_id(db, training_id)
    db.delete(training)
    db.commit()

from fastapi import APIRouter, Depends, status
from redis import Redis
from sqlalchemy.orm import Session

from crud.training import add_training, delete_training, get_training_by_id, update_training
from schemas.training_schema import TrainingCreate, TrainingSchema, TrainingUpdate
from schemas.user_schema import Identity
from utils.database import get_db
from utils.jwt_utils import get_identity
from utils.redis_utils import get_redis_client, invalidate_directory

training_router = APIRouter()


@training_router.get("/{training_id}", response_model=TrainingSchema)
def get_training(training_id: str, db: Session = Depends(get_db)):
    return get_training_by_id(db, training_id)


# hours 가 바뀌면 시간 필터/유사 학교 결과도 바뀌므로 캐시를 비운다
@training_router.post("", response_model=TrainingSchema, status_code=status.HTTP_201_CREATED)
def create(
    body: TrainingCreate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    cache: Redis | None = Depends(get_redis_client),
):
    training = add_training(db, identity, body)
    invalidate_directory(cache)
    return training


@training_router.put("/{training_id}", response_model=TrainingSchema)
def update(
    training_id: str,
    body: TrainingUpdate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    cache: Redis | None = Depends(get_redis_client),
):
    training = update_training(db, identity, training_id, body)
    invalidate_directory(cache)
    return training


@training_router.delete("/{training_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    training_id: str,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    cache: Redis | None = Depends(get_redis_client),
):
    delete_training(db, identity, training_id)
    invalidate_directory(cache)

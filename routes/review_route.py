from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from crud.review import add_review, delete_review, get_reviews_for_school
from schemas.review_schema import ReviewCreate, ReviewSchema
from schemas.user_schema import Identity
from utils.database import get_db
from utils.jwt_utils import get_identity

review_router = APIRouter()


@review_router.get("/{school_id}/reviews", response_model=list[ReviewSchema])
def school_reviews(school_id: str, db: Session = Depends(get_db)):
    return get_reviews_for_school(db, school_id)


@review_router.post("/{school_id}/reviews", response_model=ReviewSchema, status_code=status.HTTP_201_CREATED)
def create(
    school_id: str,
    body: ReviewCreate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    """
    리뷰 작성. 로그인한 사용자라면 누구나 가능 (관리자 권한 불필요)
    """
    return add_review(db, identity, school_id, body)


@review_router.delete("/{school_id}/reviews/{index}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    school_id: str,
    index: int,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    """
    Reviews have no identifier; ``index`` is the position in
    ``GET /schools/{school_id}/reviews`` at the time it was read.
    """
    delete_review(db, identity, school_id, index)

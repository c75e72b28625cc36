from fastapi import HTTPException
from sqlalchemy.orm import Session

from crud.school import get_school_by_id
from model.review import Review
from schemas.review_schema import ReviewCreate
from schemas.user_schema import Identity
from utils.authz import require_admin, require_user


def get_reviews_for_school(db: Session, school_id: str) -> list[Review]:
    return db.query(Review).filter_by(school_id=school_id).order_by(Review.id).all()


def add_review(db: Session, identity: Identity, school_id: str, payload: ReviewCreate) -> Review:
    require_user(identity)
    get_school_by_id(db, school_id)

    review = Review(
        reviewer_name=payload.reviewer_name.strip(),
        rating=payload.rating,
        comment=payload.comment.strip(),
        school_id=school_id,
    )
    db.add(review)
    db.commit()
    db.refresh(review)
    return review


def delete_review(db: Session, identity: Identity, school_id: str, index: int) -> None:
    """
    Delete the review at ``index`` in the school's list.

    Positions shift after every insert or delete, so a stale index can hit a
    different review than the one the caller saw.
    """
    require_admin(identity, "delete reviews")
    get_school_by_id(db, school_id)

    reviews = get_reviews_for_school(db, school_id)
    if index < 0 or index >= len(reviews):
        raise HTTPException(status_code=404, detail=f"Review {index} does not exist for school {school_id}")

    db.delete(reviews[index])
    db.commit()

from sqlalchemy import String, ForeignKey, SmallInteger, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from model.base import BaseLongIdEntity

if TYPE_CHECKING:
    from model.school import School

class Review(BaseLongIdEntity):
    """
    The surrogate ``id`` only fixes insertion order. Clients address a review
    by its position in the school's list, never by this key.
    """
    __tablename__ = "review"

    reviewer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    rating: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False, default="")

    school_id: Mapped[str] = mapped_column(ForeignKey("school.id", ondelete="CASCADE"), nullable=False, index=True)
    school: Mapped["School"] = relationship(back_populates="reviews")

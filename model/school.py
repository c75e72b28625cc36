from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from model.base import TimestampedEntity

if TYPE_CHECKING:
    from model.teacher import Teacher
    from model.training import Training
    from model.review import Review

class School(TimestampedEntity):
    __tablename__ = "school"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # legacy free-text location, shown only when no structured field is set
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    country: Mapped[str | None] = mapped_column(String(100), index=True)
    state: Mapped[str | None] = mapped_column(String(100))
    city: Mapped[str | None] = mapped_column(String(100))
    video_url: Mapped[str | None] = mapped_column(String(500))

    teachers: Mapped[list["Teacher"]] = relationship("Teacher", back_populates="school", cascade="all, delete-orphan")
    trainings: Mapped[list["Training"]] = relationship("Training", back_populates="school", cascade="all, delete-orphan")
    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="school",
        cascade="all, delete-orphan",
        order_by="Review.id",
    )

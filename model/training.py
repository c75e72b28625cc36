from sqlalchemy import String, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from model.base import TimestampedEntity

if TYPE_CHECKING:
    from model.school import School

class Training(TimestampedEntity):
    __tablename__ = "training"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    hours: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    school_id: Mapped[str] = mapped_column(ForeignKey("school.id", ondelete="CASCADE"), nullable=False, index=True)
    school: Mapped["School"] = relationship(back_populates="trainings")

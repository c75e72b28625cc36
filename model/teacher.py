from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from model.base import TimestampedEntity

if TYPE_CHECKING:
    from model.school import School

class Teacher(TimestampedEntity):
    __tablename__ = "teacher"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    specialization: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    school_id: Mapped[str] = mapped_column(ForeignKey("school.id", ondelete="CASCADE"), nullable=False, index=True)
    school: Mapped["School"] = relationship(back_populates="teachers")

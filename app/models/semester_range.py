"""Semester range model."""

from datetime import date

from sqlalchemy import CheckConstraint, Date, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.base import IDMixin, TimestampMixin


class SemesterRange(Base, IDMixin, TimestampMixin):
    """Start/end window the calendar and statistics operate over.

    The most recently created row is the current semester.
    """

    __tablename__ = "semester_ranges"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    __table_args__ = (
        CheckConstraint("start_date <= end_date", name="ck_semester_range_order"),
    )

    def contains(self, value: date) -> bool:
        return self.start_date <= value <= self.end_date

    def __repr__(self) -> str:
        return f"<SemesterRange(id={self.id}, {self.start_date}..{self.end_date})>"

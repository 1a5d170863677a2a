"""Dated class entry model."""

import datetime
from typing import Optional

from sqlalchemy import (
    BigInteger,
    Boolean,
    Date,
    ForeignKey,
    Integer,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.models.base import IDMixin, TimestampMixin


class ClassEntry(Base, IDMixin, TimestampMixin):
    """One scheduled period on one date, with completion status and notes."""

    __tablename__ = "class_entries"

    class_type_id: Mapped[int | None] = mapped_column(
        BigInteger,
        ForeignKey("class_types.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    semester_range_id: Mapped[int | None] = mapped_column(
        BigInteger,
        ForeignKey("semester_ranges.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    period: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    class_type: Mapped[Optional["ClassType"]] = relationship(
        "ClassType",
        back_populates="entries",
        lazy="selectin",
    )

    __table_args__ = (
        UniqueConstraint(
            "class_type_id", "date", "period",
            name="uq_class_entry_class_date_period",
        ),
    )

    @property
    def class_name(self) -> str | None:
        return self.class_type.name if self.class_type else None

    @property
    def class_color(self) -> str | None:
        return self.class_type.color if self.class_type else None

    def __repr__(self) -> str:
        return (
            f"<ClassEntry(date={self.date}, period={self.period}, "
            f"class_type_id={self.class_type_id}, status={self.status})>"
        )

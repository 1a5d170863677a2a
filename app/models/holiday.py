"""Holiday model."""

import datetime

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.base import IDMixin, TimestampMixin


class Holiday(Base, IDMixin, TimestampMixin):
    """A non-teaching date. Applied at read time; never deletes entries."""

    __tablename__ = "holidays"

    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, unique=True, index=True)
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<Holiday(date={self.date}, name={self.name})>"

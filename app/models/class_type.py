"""Class type model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.models.base import IDMixin, TimestampMixin


class ClassType(Base, IDMixin, TimestampMixin):
    """A class that can be placed into a period (e.g. "Class 3", a club)."""

    __tablename__ = "class_types"

    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    color: Mapped[str] = mapped_column(String(7), nullable=False, default="#cccccc")

    entries: Mapped[list["ClassEntry"]] = relationship(
        "ClassEntry",
        back_populates="class_type",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<ClassType(id={self.id}, name={self.name})>"

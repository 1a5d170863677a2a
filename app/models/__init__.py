"""Database models package."""

from app.models.class_entry import ClassEntry
from app.models.class_type import ClassType
from app.models.holiday import Holiday
from app.models.semester_range import SemesterRange

__all__ = [
    # Reference data
    "ClassType",
    "Holiday",
    # Semester
    "SemesterRange",
    # Entries
    "ClassEntry",
]

"""Semester range service."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import NotFoundError
from app.models.semester_range import SemesterRange
from app.schemas.semester_range import SemesterRangeCreate
from app.services.calendar import validate_date_range

logger = logging.getLogger(__name__)


class SemesterRangeService:
    """Semester range management service."""

    def __init__(self, db: Session):
        self.db = db

    def list_ranges(self) -> list[SemesterRange]:
        result = self.db.execute(
            select(SemesterRange).order_by(SemesterRange.created_at.desc(), SemesterRange.id.desc())
        )
        return list(result.scalars().all())

    def find_current(self) -> SemesterRange | None:
        """Most recently created semester, if any."""
        result = self.db.execute(
            select(SemesterRange)
            .order_by(SemesterRange.created_at.desc(), SemesterRange.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    def get_current(self) -> SemesterRange:
        semester = self.find_current()
        if not semester:
            raise NotFoundError("Current semester")
        return semester

    def get_range(self, semester_range_id: int) -> SemesterRange:
        semester = self.db.get(SemesterRange, semester_range_id)
        if not semester:
            raise NotFoundError("Semester range", str(semester_range_id))
        return semester

    def create_range(self, request: SemesterRangeCreate) -> SemesterRange:
        validate_date_range(request.start_date, request.end_date)
        semester = SemesterRange(
            name=request.name or settings.DEFAULT_SEMESTER_NAME,
            start_date=request.start_date,
            end_date=request.end_date,
        )
        self.db.add(semester)
        self.db.flush()
        self.db.refresh(semester)
        logger.info(f"Created semester {semester.name}: {semester.start_date}..{semester.end_date}")
        return semester

    def replace_current(self, request: SemesterRangeCreate) -> SemesterRange:
        """Replace start and end of the current semester, creating one if none exists."""
        validate_date_range(request.start_date, request.end_date)
        semester = self.find_current()
        if not semester:
            return self.create_range(request)

        semester.start_date = request.start_date
        semester.end_date = request.end_date
        if request.name:
            semester.name = request.name
        self.db.flush()
        self.db.refresh(semester)
        logger.info(f"Updated semester {semester.id}: {semester.start_date}..{semester.end_date}")
        return semester

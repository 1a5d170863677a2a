"""Applying a weekly template to a date range."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import InternalError, NotFoundError
from app.models.class_type import ClassType
from app.schemas.schedule import (
    DayOfWeek,
    MaterializationPolicy,
    MaterializeRequest,
    MaterializeResponse,
    WeeklyTemplate,
    normalize_weekly_template,
)
from app.services.calendar import validate_date_range
from app.services.class_entry import ClassEntryService
from app.services.materializer import carry_over, materialize
from app.services.semester_range import SemesterRangeService

logger = logging.getLogger(__name__)

DEFAULT_WEEKLY_TEMPLATE = {
    DayOfWeek.MONDAY: {3: 4, 5: 6, 7: 10},
    DayOfWeek.TUESDAY: {1: 1, 3: 3, 6: 7},
    DayOfWeek.WEDNESDAY: {2: 2, 5: 5, 7: 8},
    DayOfWeek.THURSDAY: {1: 1, 4: 4, 7: 9},
    DayOfWeek.FRIDAY: {3: 3, 6: 6, 7: 11},
}


def default_weekly_template() -> WeeklyTemplate:
    return normalize_weekly_template(DEFAULT_WEEKLY_TEMPLATE)


class ScheduleService:
    """Materializes weekly templates into stored class entries."""

    def __init__(self, db: Session):
        self.db = db
        self.entries = ClassEntryService(db)

    def apply_weekly_template(self, request: MaterializeRequest) -> MaterializeResponse:
        """Replace every entry in the range with a fresh expansion of the template.

        Delete and insert run in the request's transaction. A store failure
        rolls both back and is reported; the range is never left half-applied.
        """
        validate_date_range(request.start_date, request.end_date, settings.MAX_RANGE_DAYS)

        policy = request.policy or MaterializationPolicy(settings.MATERIALIZE_POLICY)
        semester_range_id = request.semester_range_id
        if semester_range_id is None:
            current = SemesterRangeService(self.db).find_current()
            semester_range_id = current.id if current else None
        else:
            SemesterRangeService(self.db).get_range(semester_range_id)
        self._ensure_class_types_exist(request.weekly_schedule)

        new_entries = materialize(
            request.weekly_schedule,
            semester_range_id,
            request.start_date,
            request.end_date,
        )

        try:
            existing = self.entries.list_entries(request.start_date, request.end_date)
            preserved = carry_over(new_entries, existing, policy)
            deleted = self.entries.delete_range(request.start_date, request.end_date)
            created = self.entries.bulk_insert(new_entries)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(
                f"Materialization of {request.start_date}..{request.end_date} failed"
            )
            raise InternalError(
                "Failed to apply the schedule; no changes were saved",
                details={"error": e.__class__.__name__},
            ) from e

        logger.info(
            f"Materialized {request.start_date}..{request.end_date} ({policy.value}): "
            f"deleted={deleted} created={created} preserved={preserved}"
        )
        return MaterializeResponse(
            start_date=request.start_date,
            end_date=request.end_date,
            policy=policy,
            deleted=deleted,
            created=created,
            preserved=preserved,
            message=f"Created {created} class entries",
        )

    def _ensure_class_types_exist(self, weekly_schedule: WeeklyTemplate) -> None:
        wanted = {
            class_type_id
            for periods in weekly_schedule.values()
            for class_type_id in periods.values()
            if class_type_id is not None
        }
        if not wanted:
            return
        found = set(
            self.db.execute(
                select(ClassType.id).where(ClassType.id.in_(wanted))
            ).scalars().all()
        )
        missing = sorted(wanted - found)
        if missing:
            raise NotFoundError("Class type", ", ".join(str(i) for i in missing))

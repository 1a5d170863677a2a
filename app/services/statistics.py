"""Progress statistics over dated class entries."""

import logging
import math
from collections import defaultdict
from collections.abc import Iterable
from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.class_entry import ClassEntry
from app.models.class_type import ClassType
from app.models.holiday import Holiday
from app.schemas.statistics import (
    ClassStatDetail,
    ClassTally,
    ScheduleStatistics,
    StatisticsResponse,
)
from app.services.calendar import DateLike, holiday_keys, to_local_date, validate_date_range
from app.services.class_entry import ClassEntryService

logger = logging.getLogger(__name__)


def progress_percentage(completed: int, total: int) -> int:
    """Completed share as a whole percent, rounded half up; 0 when total is 0."""
    if total <= 0:
        return 0
    return math.floor(completed / total * 100 + 0.5)


def compute_statistics(
    entries: Iterable[ClassEntry],
    range_start: DateLike,
    range_end: DateLike,
    today: DateLike,
    holidays: Iterable[DateLike] = (),
) -> ScheduleStatistics:
    """Reduce entries in ``[range_start, range_end]`` to completion counts.

    A date counts as a weekday only if it has entries, and as completed only
    if it lies strictly before ``today`` and all its entries are done.
    Entries on holiday dates are left out.
    """
    start = to_local_date(range_start)
    end = to_local_date(range_end)
    cutoff = to_local_date(today)
    skip = holiday_keys(holidays)

    done_by_date: dict[date, bool] = {}
    total_classes = 0
    completed_classes = 0
    class_stats: dict[int, ClassTally] = defaultdict(ClassTally)

    for entry in entries:
        entry_date = to_local_date(entry.date)
        if not start <= entry_date <= end or entry_date.isoformat() in skip:
            continue
        done_by_date[entry_date] = done_by_date.get(entry_date, True) and bool(entry.status)

        if entry.class_type_id is None:
            continue
        total_classes += 1
        tally = class_stats[entry.class_type_id]
        tally.total += 1
        if entry.status:
            completed_classes += 1
            tally.completed += 1

    total_weekdays = len(done_by_date)
    completed_weekdays = sum(1 for d, done in done_by_date.items() if done and d < cutoff)

    return ScheduleStatistics(
        total_weekdays=total_weekdays,
        completed_weekdays=completed_weekdays,
        remaining_weekdays=total_weekdays - completed_weekdays,
        total_classes=total_classes,
        completed_classes=completed_classes,
        class_stats=dict(class_stats),
    )


class StatisticsService:
    """Statistics over stored entries, enriched with class names and colors."""

    def __init__(self, db: Session):
        self.db = db

    def get_statistics(
        self,
        start_date: date,
        end_date: date,
        today: date,
    ) -> StatisticsResponse:
        validate_date_range(start_date, end_date)

        entries = ClassEntryService(self.db).list_entries(start_date, end_date)
        holidays = self.db.execute(
            select(Holiday.date).where(
                Holiday.date >= start_date,
                Holiday.date <= end_date,
            )
        ).scalars().all()
        class_types = {
            ct.id: ct for ct in self.db.execute(select(ClassType)).scalars().all()
        }

        stats = compute_statistics(entries, start_date, end_date, today, holidays)
        logger.debug(
            f"Statistics {start_date}..{end_date}: "
            f"{stats.completed_classes}/{stats.total_classes} classes done"
        )

        details = []
        for class_type_id in sorted(stats.class_stats):
            tally = stats.class_stats[class_type_id]
            class_type = class_types.get(class_type_id)
            details.append(
                ClassStatDetail(
                    class_type_id=class_type_id,
                    name=class_type.name if class_type else None,
                    color=class_type.color if class_type else None,
                    total=tally.total,
                    completed=tally.completed,
                    remaining=tally.total - tally.completed,
                    percentage=progress_percentage(tally.completed, tally.total),
                )
            )

        return StatisticsResponse(
            start_date=start_date,
            end_date=end_date,
            today=today,
            total_weekdays=stats.total_weekdays,
            completed_weekdays=stats.completed_weekdays,
            remaining_weekdays=stats.remaining_weekdays,
            total_classes=stats.total_classes,
            completed_classes=stats.completed_classes,
            remaining_classes=stats.remaining_classes,
            completion_percentage=progress_percentage(
                stats.completed_classes, stats.total_classes
            ),
            class_stats=details,
        )

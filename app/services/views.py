"""Per-date lookups derived from a flat list of class entries.

Nothing here is cached; a term holds at most a few thousand entries.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date

from app.models.class_entry import ClassEntry
from app.models.holiday import Holiday
from app.models.semester_range import SemesterRange
from app.schemas.calendar import DayView
from app.schemas.class_entry import ClassEntryResponse
from app.services.calendar import DateLike, day_name, is_weekday, iter_dates, to_local_date


def slot_key(class_type_id: int | None, period: int) -> str:
    return f"{class_type_id}-{period}"


def _on(entries: Iterable[ClassEntry], value: DateLike) -> list[ClassEntry]:
    target = to_local_date(value)
    return [e for e in entries if e.date == target]


def status_for_date(entries: Iterable[ClassEntry], value: DateLike) -> dict[str, bool]:
    """``"classId-period" -> status`` for one date."""
    return {slot_key(e.class_type_id, e.period): bool(e.status) for e in _on(entries, value)}


def comments_for_date(entries: Iterable[ClassEntry], value: DateLike) -> dict[str, str]:
    """``"classId-period" -> notes`` for one date."""
    return {slot_key(e.class_type_id, e.period): e.notes or "" for e in _on(entries, value)}


def classes_for_date(entries: Iterable[ClassEntry], value: DateLike) -> set[int]:
    """Distinct class ids scheduled on one date."""
    return {e.class_type_id for e in _on(entries, value) if e.class_type_id is not None}


def build_day_views(
    entries: Sequence[ClassEntry],
    start: date,
    end: date,
    holidays: Iterable[Holiday] = (),
    semester: SemesterRange | None = None,
) -> list[DayView]:
    """One view per date in ``[start, end]``.

    Holidays keep their entries but never report ``has_class``.
    """
    by_date: dict[date, list[ClassEntry]] = defaultdict(list)
    for entry in entries:
        by_date[entry.date].append(entry)
    holiday_names = {h.date: h.name for h in holidays}

    views = []
    for current in iter_dates(start, end):
        day_entries = sorted(by_date.get(current, []), key=lambda e: e.period)
        holiday = current in holiday_names
        within = semester.contains(current) if semester else True
        classes = classes_for_date(day_entries, current)
        views.append(
            DayView(
                date=current,
                day_name=day_name(current),
                is_weekday=is_weekday(current),
                is_holiday=holiday,
                holiday_name=holiday_names.get(current),
                within_semester=within,
                has_class=bool(classes) and within and not holiday,
                classes=sorted(classes),
                status=status_for_date(day_entries, current),
                comments=comments_for_date(day_entries, current),
                entries=[ClassEntryResponse.model_validate(e) for e in day_entries],
            )
        )
    return views

"""Expansion of a weekly template into dated class entries."""

from collections.abc import Iterable
from datetime import date

from app.models.class_entry import ClassEntry
from app.schemas.schedule import DayOfWeek, MaterializationPolicy, WeeklyTemplate
from app.services.calendar import day_name, iter_dates

SlotTuple = tuple[date, int | None, int]


def materialize(
    weekly_template: WeeklyTemplate,
    semester_range_id: int | None,
    start_date: date,
    end_date: date,
) -> list[ClassEntry]:
    """Build unsaved entries for every scheduled period in ``[start_date, end_date]``.

    Holidays are not skipped here; they are applied when entries are read.
    Returns an empty list when start_date > end_date.
    """
    entries = []
    for current in iter_dates(start_date, end_date):
        periods = weekly_template.get(DayOfWeek(day_name(current))) or {}
        for period, class_type_id in sorted(periods.items()):
            if class_type_id is None:
                continue
            entries.append(
                ClassEntry(
                    class_type_id=class_type_id,
                    semester_range_id=semester_range_id,
                    date=current,
                    period=int(period),
                    status=False,
                    notes="",
                )
            )
    return entries


def slot_of(entry: ClassEntry) -> SlotTuple:
    return (entry.date, entry.class_type_id, entry.period)


def carry_over(
    new_entries: Iterable[ClassEntry],
    existing_entries: Iterable[ClassEntry],
    policy: MaterializationPolicy,
) -> int:
    """Copy status/notes from existing entries onto regenerated ones.

    Only applies under ``preserve-existing``; a slot matches when date,
    class and period are all unchanged. Returns the number of entries that
    kept prior state.
    """
    if policy != MaterializationPolicy.PRESERVE_EXISTING:
        return 0

    previous = {slot_of(e): (e.status, e.notes) for e in existing_entries}
    preserved = 0
    for entry in new_entries:
        state = previous.get(slot_of(entry))
        if state is None:
            continue
        status, notes = state
        if status or notes:
            entry.status = status
            entry.notes = notes or ""
            preserved += 1
    return preserved

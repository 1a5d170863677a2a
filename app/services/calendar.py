"""Calendar arithmetic shared by the materializer, views and statistics.

Every conversion between dates and ``YYYY-MM-DD`` keys goes through
``to_local_date`` / ``date_key`` so that a timestamp near midnight can never
land on a neighbouring day.
"""

from collections.abc import Iterable, Iterator
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from app.core.config import settings
from app.core.exceptions import InvalidDateRangeError

DAY_NAMES = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

DateLike = date | datetime | str


def to_local_date(value: DateLike) -> date:
    """Normalize a date, datetime or ``YYYY-MM-DD`` string to a local date.

    Naive datetimes are taken as already local. Aware datetimes are converted
    to the configured timezone before the time of day is dropped.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(ZoneInfo(settings.TIMEZONE))
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date_key(value)
    raise TypeError(f"Unsupported date value: {value!r}")


def date_key(value: DateLike) -> str:
    """Format a date as its ``YYYY-MM-DD`` key."""
    return to_local_date(value).isoformat()


def parse_date_key(key: str) -> date:
    """Parse a ``YYYY-MM-DD`` key or a full ISO timestamp to a local date.

    Timestamps go through ``to_local_date``, so an offset such as ``+00:00``
    is converted to the configured timezone before the date is taken.
    """
    key = key.strip()
    try:
        if len(key) <= 10:
            return date.fromisoformat(key)
        if key.endswith("Z"):
            key = key[:-1] + "+00:00"
        return to_local_date(datetime.fromisoformat(key))
    except ValueError:
        raise ValueError(f"Invalid date key: {key!r}") from None


def today() -> date:
    """Current local date in the configured timezone."""
    return datetime.now(ZoneInfo(settings.TIMEZONE)).date()


def day_name(value: DateLike) -> str:
    """Lowercase English weekday name, the weekly template key."""
    return DAY_NAMES[to_local_date(value).weekday()]


def is_weekday(value: DateLike) -> bool:
    """True for Monday..Friday."""
    return to_local_date(value).weekday() < 5


def holiday_keys(holidays: Iterable[DateLike]) -> set[str]:
    return {date_key(h) for h in holidays}


def is_holiday(value: DateLike, holidays: Iterable[DateLike]) -> bool:
    """True if the value's local date is one of the holidays."""
    return date_key(value) in holiday_keys(holidays)


def iter_dates(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield every date in ``[start, end]``; nothing when start > end."""
    current = to_local_date(start)
    last = to_local_date(end)
    while current <= last:
        yield current
        current += timedelta(days=1)


def enumerate_weekdays_in_range(
    start: DateLike,
    end: DateLike,
    holidays: Iterable[DateLike] = (),
) -> list[date]:
    """Weekdays in ``[start, end]`` that are not holidays, ascending."""
    keys = holiday_keys(holidays)
    return [d for d in iter_dates(start, end) if is_weekday(d) and d.isoformat() not in keys]


def range_length(start: date, end: date) -> int:
    """Number of days in ``[start, end]``."""
    return (end - start).days + 1


def validate_date_range(
    start: date,
    end: date,
    max_days: int | None = None,
) -> None:
    """Reject an inverted range or one longer than ``max_days`` inclusive days."""
    if start > end:
        raise InvalidDateRangeError("Start date cannot be after end date", start, end)
    if max_days is not None and range_length(start, end) > max_days:
        raise InvalidDateRangeError(
            f"Date range cannot exceed {max_days} days",
            start,
            end,
        )

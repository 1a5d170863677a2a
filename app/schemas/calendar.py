"""Calendar view schemas."""

import datetime

from app.schemas.class_entry import ClassEntryResponse
from app.schemas.common import BaseSchema
from app.schemas.semester_range import SemesterRangeResponse


class DayView(BaseSchema):
    """Everything the client needs to render one calendar cell."""

    date: datetime.date
    day_name: str
    is_weekday: bool
    is_holiday: bool
    holiday_name: str | None = None
    within_semester: bool
    has_class: bool
    classes: list[int]
    status: dict[str, bool]
    comments: dict[str, str]
    entries: list[ClassEntryResponse]


class CalendarResponse(BaseSchema):
    """Day views for a window of dates."""

    start_date: datetime.date
    end_date: datetime.date
    semester: SemesterRangeResponse | None
    days: list[DayView]

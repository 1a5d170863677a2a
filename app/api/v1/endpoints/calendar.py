"""Calendar view endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.schemas.calendar import CalendarResponse, DayView
from app.schemas.semester_range import SemesterRangeResponse
from app.services.calendar import validate_date_range
from app.services.class_entry import ClassEntryService
from app.services.holiday import HolidayService
from app.services.semester_range import SemesterRangeService
from app.services.views import build_day_views

router = APIRouter()


def _build(db: Session, start_date: date, end_date: date) -> CalendarResponse:
    semester = SemesterRangeService(db).find_current()
    entries = ClassEntryService(db).list_entries(start_date, end_date)
    holidays = HolidayService(db).list_holidays(date_from=start_date, date_to=end_date)
    return CalendarResponse(
        start_date=start_date,
        end_date=end_date,
        semester=SemesterRangeResponse.model_validate(semester) if semester else None,
        days=build_day_views(entries, start_date, end_date, holidays, semester),
    )


@router.get("", response_model=CalendarResponse)
def get_calendar(
    db: Annotated[Session, Depends(get_db)],
    start_date: date = Query(...),
    end_date: date = Query(...),
):
    """
    Day-by-day view of a window (a week or a month grid).
    Each day carries its classes plus "classId-period" status and notes maps.
    """
    validate_date_range(start_date, end_date, settings.MAX_RANGE_DAYS)
    return _build(db, start_date, end_date)


@router.get("/{day}", response_model=DayView)
def get_calendar_day(
    day: date,
    db: Annotated[Session, Depends(get_db)],
):
    return _build(db, day, day).days[0]

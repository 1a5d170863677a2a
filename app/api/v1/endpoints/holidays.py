"""Holiday endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.common import CountResponse, MessageResponse
from app.schemas.holiday import HolidayCreate, HolidayResponse
from app.services.holiday import HolidayService

router = APIRouter()


@router.get("", response_model=list[HolidayResponse])
def list_holidays(
    db: Annotated[Session, Depends(get_db)],
    year: int | None = Query(None, ge=1900, le=2100),
    date_from: date | None = None,
    date_to: date | None = None,
):
    """List holidays by date, optionally restricted to a year or a range."""
    service = HolidayService(db)
    holidays = service.list_holidays(year=year, date_from=date_from, date_to=date_to)
    return [HolidayResponse.model_validate(h) for h in holidays]


@router.post("", response_model=HolidayResponse, status_code=201)
def add_holiday(
    request: HolidayCreate,
    db: Annotated[Session, Depends(get_db)],
):
    """
    Add a holiday.
    Existing class entries on that date are kept; they are just no longer
    shown or counted.
    """
    service = HolidayService(db)
    return HolidayResponse.model_validate(service.add_holiday(request))


@router.delete("", response_model=CountResponse)
def delete_all_holidays(db: Annotated[Session, Depends(get_db)]):
    """Delete every holiday."""
    service = HolidayService(db)
    count = service.delete_all()
    return CountResponse(message="All holidays deleted", count=count)


@router.delete("/{holiday_date}", response_model=MessageResponse)
def remove_holiday(
    holiday_date: date,
    db: Annotated[Session, Depends(get_db)],
):
    service = HolidayService(db)
    service.remove_holiday(holiday_date)
    return MessageResponse(message=f"Holiday {holiday_date} removed")

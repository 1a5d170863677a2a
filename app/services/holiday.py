"""Holiday service."""

import logging
from datetime import date

from sqlalchemy import delete, extract, select
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.models.holiday import Holiday
from app.schemas.holiday import HolidayCreate

logger = logging.getLogger(__name__)


class HolidayService:
    """Holiday management service."""

    def __init__(self, db: Session):
        self.db = db

    def list_holidays(
        self,
        year: int | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[Holiday]:
        query = select(Holiday)
        if year is not None:
            query = query.where(extract("year", Holiday.date) == year)
        if date_from is not None:
            query = query.where(Holiday.date >= date_from)
        if date_to is not None:
            query = query.where(Holiday.date <= date_to)
        result = self.db.execute(query.order_by(Holiday.date))
        return list(result.scalars().all())

    def add_holiday(self, request: HolidayCreate) -> Holiday:
        existing = self.db.execute(
            select(Holiday.id).where(Holiday.date == request.date)
        ).scalar_one_or_none()
        if existing is not None:
            raise ConflictError(
                f"{request.date} is already a holiday",
                details={"date": str(request.date)},
            )

        holiday = Holiday(date=request.date, name=request.name or None)
        self.db.add(holiday)
        self.db.flush()
        self.db.refresh(holiday)
        return holiday

    def remove_holiday(self, holiday_date: date) -> None:
        holiday = self.db.execute(
            select(Holiday).where(Holiday.date == holiday_date)
        ).scalar_one_or_none()
        if not holiday:
            raise NotFoundError("Holiday", str(holiday_date))
        self.db.delete(holiday)
        self.db.flush()

    def delete_all(self) -> int:
        result = self.db.execute(delete(Holiday))
        self.db.flush()
        logger.warning(f"Deleted all holidays ({result.rowcount})")
        return result.rowcount

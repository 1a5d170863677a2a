"""Holiday schemas."""

import datetime

from pydantic import Field

from app.schemas.common import BaseSchema


class HolidayCreate(BaseSchema):
    """Holiday creation schema."""

    date: datetime.date
    name: str | None = Field(None, max_length=100)


class HolidayResponse(BaseSchema):
    """Holiday response schema."""

    id: int
    date: datetime.date
    name: str | None

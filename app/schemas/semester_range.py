"""Semester range schemas."""

from datetime import date

from pydantic import Field, model_validator

from app.schemas.common import BaseSchema, TimestampSchema


class SemesterRangeCreate(BaseSchema):
    """Semester range creation / replacement schema."""

    name: str | None = Field(None, max_length=100)
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_order(self) -> "SemesterRangeCreate":
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class SemesterRangeResponse(TimestampSchema):
    """Semester range response schema."""

    id: int
    name: str
    start_date: date
    end_date: date

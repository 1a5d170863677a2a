"""Weekly template and materialization schemas."""

import enum
from datetime import date

from pydantic import Field, field_validator

from app.core.config import settings
from app.schemas.common import BaseSchema


class DayOfWeek(str, enum.Enum):
    """Weekly template keys, Sunday first."""

    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"


class MaterializationPolicy(str, enum.Enum):
    """What happens to status/notes of entries that are regenerated."""

    PRESERVE_EXISTING = "preserve-existing"
    REPLACE_ALL = "replace-all"


# day name -> period -> class type id (None = free period)
WeeklyTemplate = dict[DayOfWeek, dict[int, int | None]]


def normalize_weekly_template(template: dict) -> WeeklyTemplate:
    """Fill every day with periods 1..PERIODS_PER_DAY, rejecting other periods."""
    normalized: WeeklyTemplate = {}
    for day in DayOfWeek:
        periods = template.get(day) or template.get(day.value) or {}
        for period in periods:
            if not 1 <= int(period) <= settings.PERIODS_PER_DAY:
                raise ValueError(
                    f"Period {period} on {day.value} is outside 1..{settings.PERIODS_PER_DAY}"
                )
        normalized[day] = {
            period: periods.get(period, periods.get(str(period)))
            for period in range(1, settings.PERIODS_PER_DAY + 1)
        }
    return normalized


class MaterializeRequest(BaseSchema):
    """Expand a weekly template over a date range."""

    start_date: date
    end_date: date
    weekly_schedule: WeeklyTemplate
    semester_range_id: int | None = Field(
        None, description="Defaults to the current semester"
    )
    policy: MaterializationPolicy | None = Field(
        None, description="Defaults to the configured MATERIALIZE_POLICY"
    )

    @field_validator("weekly_schedule")
    @classmethod
    def validate_weekly_schedule(cls, v: dict) -> WeeklyTemplate:
        return normalize_weekly_template(v)


class MaterializeResponse(BaseSchema):
    """Result of a materialization run."""

    start_date: date
    end_date: date
    policy: MaterializationPolicy
    deleted: int
    created: int
    preserved: int
    message: str

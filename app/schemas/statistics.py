"""Statistics schemas."""

from datetime import date

from app.schemas.common import BaseSchema


class ClassTally(BaseSchema):
    """Per-class counts."""

    total: int = 0
    completed: int = 0


class ScheduleStatistics(BaseSchema):
    """Completion counts reduced from dated class entries."""

    total_weekdays: int
    completed_weekdays: int
    remaining_weekdays: int
    total_classes: int
    completed_classes: int
    class_stats: dict[int, ClassTally]

    @property
    def remaining_classes(self) -> int:
        return self.total_classes - self.completed_classes


class ClassStatDetail(BaseSchema):
    """Per-class progress row."""

    class_type_id: int
    name: str | None
    color: str | None
    total: int
    completed: int
    remaining: int
    percentage: int


class StatisticsResponse(BaseSchema):
    """Statistics for a date range."""

    start_date: date
    end_date: date
    today: date
    total_weekdays: int
    completed_weekdays: int
    remaining_weekdays: int
    total_classes: int
    completed_classes: int
    remaining_classes: int
    completion_percentage: int
    class_stats: list[ClassStatDetail]

"""Statistics endpoints."""

from datetime import date
from io import BytesIO
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.dependencies import Today
from app.schemas.statistics import StatisticsResponse
from app.services.export import ExportService
from app.services.semester_range import SemesterRangeService
from app.services.statistics import StatisticsService

router = APIRouter()


def _resolve_range(
    db: Session,
    start_date: date | None,
    end_date: date | None,
) -> tuple[date, date]:
    if start_date is not None and end_date is not None:
        return start_date, end_date
    semester = SemesterRangeService(db).get_current()
    return start_date or semester.start_date, end_date or semester.end_date


@router.get("", response_model=StatisticsResponse)
def get_statistics(
    db: Annotated[Session, Depends(get_db)],
    today: Today,
    start_date: date | None = None,
    end_date: date | None = None,
):
    """
    Completion statistics for a range (defaults to the current semester).
    Holiday dates are left out of every count.
    """
    start_date, end_date = _resolve_range(db, start_date, end_date)
    service = StatisticsService(db)
    return service.get_statistics(start_date, end_date, today)


@router.get("/export")
def export_statistics(
    db: Annotated[Session, Depends(get_db)],
    today: Today,
    start_date: date | None = None,
    end_date: date | None = None,
):
    """Download entries and statistics for a range as an Excel workbook."""
    start_date, end_date = _resolve_range(db, start_date, end_date)
    content = ExportService(db).build_workbook(start_date, end_date, today)

    filename = f"class_schedule_{start_date.isoformat()}_{end_date.isoformat()}.xlsx"
    return StreamingResponse(
        BytesIO(content),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )

"""Weekly template materialization endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.schedule import MaterializeRequest, MaterializeResponse, WeeklyTemplate
from app.services.schedule import ScheduleService, default_weekly_template

router = APIRouter()


@router.get("/default-template", response_model=WeeklyTemplate)
def get_default_template():
    """Starting weekly template for the schedule editor."""
    return default_weekly_template()


@router.post("/materialize", response_model=MaterializeResponse)
def materialize_schedule(
    request: MaterializeRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """
    Expand a weekly template into class entries for a date range.

    Every existing entry in the range is replaced. With policy
    "preserve-existing", regenerated slots keep their status and notes;
    with "replace-all" they start over. The range may span at most
    MAX_RANGE_DAYS days.
    """
    service = ScheduleService(db)
    return service.apply_weekly_template(request)

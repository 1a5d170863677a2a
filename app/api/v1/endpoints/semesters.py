"""Semester range endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.semester_range import SemesterRangeCreate, SemesterRangeResponse
from app.services.semester_range import SemesterRangeService

router = APIRouter()


@router.get("", response_model=list[SemesterRangeResponse])
def list_semesters(db: Annotated[Session, Depends(get_db)]):
    """List semesters, newest first."""
    service = SemesterRangeService(db)
    return [SemesterRangeResponse.model_validate(s) for s in service.list_ranges()]


@router.post("", response_model=SemesterRangeResponse, status_code=201)
def create_semester(
    request: SemesterRangeCreate,
    db: Annotated[Session, Depends(get_db)],
):
    """Create a semester. The newest semester becomes the current one."""
    service = SemesterRangeService(db)
    return SemesterRangeResponse.model_validate(service.create_range(request))


@router.get("/current", response_model=SemesterRangeResponse)
def get_current_semester(db: Annotated[Session, Depends(get_db)]):
    service = SemesterRangeService(db)
    return SemesterRangeResponse.model_validate(service.get_current())


@router.put("/current", response_model=SemesterRangeResponse)
def replace_current_semester(
    request: SemesterRangeCreate,
    db: Annotated[Session, Depends(get_db)],
):
    """
    Replace start and end of the current semester.
    Creates the semester when none exists yet.
    """
    service = SemesterRangeService(db)
    return SemesterRangeResponse.model_validate(service.replace_current(request))

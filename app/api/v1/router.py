"""Main API router aggregating all module routers."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    calendar,
    class_entries,
    class_types,
    holidays,
    schedule,
    semesters,
    statistics,
)
from app.schemas.common import ErrorResponse

# Every error body uses the same envelope
api_router = APIRouter(
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)

# Reference data
api_router.include_router(
    class_types.router,
    prefix="/class-types",
    tags=["Class Types"],
)

api_router.include_router(
    semesters.router,
    prefix="/semesters",
    tags=["Semesters"],
)

api_router.include_router(
    holidays.router,
    prefix="/holidays",
    tags=["Holidays"],
)

# Dated entries
api_router.include_router(
    class_entries.router,
    prefix="/class-entries",
    tags=["Class Entries"],
)

api_router.include_router(
    schedule.router,
    prefix="/schedule",
    tags=["Schedule"],
)

# Read models
api_router.include_router(
    calendar.router,
    prefix="/calendar",
    tags=["Calendar"],
)

api_router.include_router(
    statistics.router,
    prefix="/statistics",
    tags=["Statistics"],
)

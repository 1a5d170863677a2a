"""Class entry endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.dependencies import NoteBufferDep
from app.schemas.class_entry import (
    ClassEntryNotesSet,
    ClassEntryNotesUpdate,
    ClassEntryResponse,
    ClassEntryStatusUpdate,
    ClassEntryToggle,
    ClassEntryUpsert,
    PendingNotesResponse,
)
from app.schemas.common import CountResponse, MessageResponse
from app.services.calendar import validate_date_range
from app.services.class_entry import ClassEntryService

router = APIRouter()


@router.get("", response_model=list[ClassEntryResponse])
def list_class_entries(
    db: Annotated[Session, Depends(get_db)],
    start_date: date = Query(...),
    end_date: date = Query(...),
):
    """List entries dated within the range, ordered by date and period."""
    validate_date_range(start_date, end_date)
    service = ClassEntryService(db)
    return [
        ClassEntryResponse.model_validate(e)
        for e in service.list_entries(start_date, end_date)
    ]


@router.post("", response_model=ClassEntryResponse)
def upsert_class_entry(
    request: ClassEntryUpsert,
    db: Annotated[Session, Depends(get_db)],
):
    """
    Create or update the entry for (class_type_id, date, period).
    An existing entry has its status and notes overwritten.
    """
    service = ClassEntryService(db)
    return ClassEntryResponse.model_validate(service.upsert_entry(request))


@router.delete("", response_model=CountResponse)
def clear_class_entries(
    db: Annotated[Session, Depends(get_db)],
    start_date: date = Query(...),
    end_date: date = Query(...),
):
    """Delete every entry dated within the range."""
    validate_date_range(start_date, end_date, settings.MAX_RANGE_DAYS)
    service = ClassEntryService(db)
    count = service.delete_range(start_date, end_date)
    return CountResponse(message=f"Deleted class entries from {start_date} to {end_date}", count=count)


@router.delete("/all", response_model=CountResponse)
def delete_all_class_entries(db: Annotated[Session, Depends(get_db)]):
    """Delete every class entry. Cannot be undone."""
    service = ClassEntryService(db)
    count = service.delete_all()
    return CountResponse(message="All class entries deleted", count=count)


@router.post("/toggle", response_model=ClassEntryResponse)
def toggle_class_slot(
    request: ClassEntryToggle,
    db: Annotated[Session, Depends(get_db)],
):
    """
    Flip completion for (class_type_id, date, period).
    A slot without an entry gets one, marked completed.
    """
    service = ClassEntryService(db)
    return ClassEntryResponse.model_validate(service.toggle_slot(request))


@router.put("/notes", response_model=ClassEntryResponse)
def set_class_slot_notes(
    request: ClassEntryNotesSet,
    db: Annotated[Session, Depends(get_db)],
):
    """
    Save notes for (class_type_id, date, period) immediately.
    A slot without an entry gets one with status false.
    """
    service = ClassEntryService(db)
    return ClassEntryResponse.model_validate(service.set_notes_for_slot(request))


@router.put("/notes/draft", response_model=PendingNotesResponse, status_code=202)
def queue_notes_draft(
    request: ClassEntryNotesSet,
    buffer: NoteBufferDep,
):
    """
    Buffer a notes edit. It is written once the slot has had no further
    edits for NOTE_DEBOUNCE_MS, or on flush.
    """
    buffer.queue(request)
    return PendingNotesResponse(has_pending=buffer.has_pending, pending=buffer.pending_count)


@router.post("/notes/flush", response_model=CountResponse)
def flush_notes_drafts(buffer: NoteBufferDep):
    """Write all buffered notes now."""
    count = buffer.flush()
    return CountResponse(message="Buffered notes saved", count=count)


@router.delete("/notes/draft", response_model=CountResponse)
def cancel_notes_drafts(buffer: NoteBufferDep):
    """Discard buffered notes without writing them (editor closed)."""
    count = buffer.cancel()
    return CountResponse(message="Buffered notes discarded", count=count)


@router.get("/notes/pending", response_model=PendingNotesResponse)
def get_pending_notes(buffer: NoteBufferDep):
    """Whether unsaved note edits exist, for navigate-away warnings."""
    return PendingNotesResponse(has_pending=buffer.has_pending, pending=buffer.pending_count)


@router.get("/{entry_id}", response_model=ClassEntryResponse)
def get_class_entry(
    entry_id: int,
    db: Annotated[Session, Depends(get_db)],
):
    service = ClassEntryService(db)
    return ClassEntryResponse.model_validate(service.get_entry(entry_id))


@router.patch("/{entry_id}/status", response_model=ClassEntryResponse)
def update_class_entry_status(
    entry_id: int,
    request: ClassEntryStatusUpdate,
    db: Annotated[Session, Depends(get_db)],
):
    service = ClassEntryService(db)
    return ClassEntryResponse.model_validate(service.update_status(entry_id, request.status))


@router.patch("/{entry_id}/notes", response_model=ClassEntryResponse)
def update_class_entry_notes(
    entry_id: int,
    request: ClassEntryNotesUpdate,
    db: Annotated[Session, Depends(get_db)],
):
    service = ClassEntryService(db)
    return ClassEntryResponse.model_validate(service.update_notes(entry_id, request.notes))


@router.post("/{entry_id}/toggle", response_model=ClassEntryResponse)
def toggle_class_entry(
    entry_id: int,
    db: Annotated[Session, Depends(get_db)],
):
    """Flip completion of an entry."""
    service = ClassEntryService(db)
    return ClassEntryResponse.model_validate(service.toggle_status(entry_id))


@router.delete("/{entry_id}", response_model=MessageResponse)
def delete_class_entry(
    entry_id: int,
    db: Annotated[Session, Depends(get_db)],
):
    service = ClassEntryService(db)
    service.delete_entry(entry_id)
    return MessageResponse(message="Class entry deleted successfully")

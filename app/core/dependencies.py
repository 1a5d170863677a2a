"""FastAPI dependency injection utilities."""

from datetime import date
from typing import Annotated

from fastapi import Depends

from app.core.database import SessionLocal
from app.core.scheduler import get_scheduler
from app.services.calendar import today
from app.services.note_buffer import NoteBuffer

# Process-wide note buffer, created on first use
_note_buffer: NoteBuffer | None = None


def get_note_buffer() -> NoteBuffer:
    """Get the shared note buffer."""
    global _note_buffer
    if _note_buffer is None:
        _note_buffer = NoteBuffer(get_scheduler(), SessionLocal)
    return _note_buffer


def shutdown_note_buffer() -> None:
    """Write outstanding drafts and drop the buffer before the scheduler stops."""
    global _note_buffer
    if _note_buffer is not None:
        _note_buffer.flush()
        _note_buffer = None


def get_today() -> date:
    """Current local date; overridden in tests."""
    return today()


# Type aliases for dependency injection
NoteBufferDep = Annotated[NoteBuffer, Depends(get_note_buffer)]
Today = Annotated[date, Depends(get_today)]

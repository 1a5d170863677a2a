"""Buffered note edits.

Typing into a notes field produces a write per keystroke. Drafts are held
per slot and written once the slot has been quiet for ``NOTE_DEBOUNCE_MS``,
or immediately on flush.
"""

import logging
from collections.abc import Callable

from apscheduler.schedulers.base import BaseScheduler
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.debounce import KeyedDebouncer
from app.schemas.class_entry import ClassEntryNotesSet
from app.services.class_entry import ClassEntryService

logger = logging.getLogger(__name__)


def draft_key(request: ClassEntryNotesSet) -> str:
    return f"{request.date.isoformat()}-{request.class_type_id}-{request.period}"


class NoteBuffer:
    """Debounces note writes; each commit uses its own session."""

    def __init__(
        self,
        scheduler: BaseScheduler,
        session_factory: Callable[[], Session],
        delay_ms: int | None = None,
    ):
        self.session_factory = session_factory
        delay_ms = settings.NOTE_DEBOUNCE_MS if delay_ms is None else delay_ms
        self.debouncer = KeyedDebouncer(scheduler, delay_ms / 1000, prefix="notes")

    @property
    def has_pending(self) -> bool:
        return self.debouncer.has_pending

    @property
    def pending_count(self) -> int:
        return len(self.debouncer.pending_keys)

    def queue(self, request: ClassEntryNotesSet) -> str:
        """Buffer a draft, replacing any earlier draft for the same slot."""
        key = draft_key(request)
        self.debouncer.submit(key, self._commit, request)
        return key

    def flush(self) -> int:
        return self.debouncer.flush()

    def cancel(self) -> int:
        return self.debouncer.cancel()

    def _commit(self, request: ClassEntryNotesSet) -> None:
        session = self.session_factory()
        try:
            ClassEntryService(session).set_notes_for_slot(request)
            session.commit()
            logger.debug(f"Saved buffered notes for {draft_key(request)}")
        except Exception:
            session.rollback()
            logger.exception(f"Failed to save buffered notes for {draft_key(request)}")
            raise
        finally:
            session.close()

"""Class entry service: range queries, upserts, status and notes edits."""

import logging
from collections.abc import Sequence
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError
from app.models.class_entry import ClassEntry
from app.models.class_type import ClassType
from app.schemas.class_entry import (
    ClassEntryNotesSet,
    ClassEntryToggle,
    ClassEntryUpsert,
    SlotKey,
)

logger = logging.getLogger(__name__)


class ClassEntryService:
    """Class entry management service."""

    def __init__(self, db: Session):
        self.db = db

    # ==================== Reads ====================

    def list_entries(self, start_date: date, end_date: date) -> list[ClassEntry]:
        """All entries with ``start_date <= date <= end_date``, by date then period."""
        result = self.db.execute(
            select(ClassEntry)
            .where(
                ClassEntry.date >= start_date,
                ClassEntry.date <= end_date,
            )
            .order_by(ClassEntry.date, ClassEntry.period)
        )
        return list(result.scalars().all())

    def list_entries_for_date(self, on_date: date) -> list[ClassEntry]:
        return self.list_entries(on_date, on_date)

    def get_entry(self, entry_id: int) -> ClassEntry:
        """Get class entry by ID."""
        entry = self.db.get(ClassEntry, entry_id)
        if not entry:
            raise NotFoundError("Class entry", str(entry_id))
        return entry

    def find_by_slot(self, slot: SlotKey) -> ClassEntry | None:
        """Look up an entry by ``(class_type_id, date, period)``."""
        if slot.class_type_id is None:
            class_clause = ClassEntry.class_type_id.is_(None)
        else:
            class_clause = ClassEntry.class_type_id == slot.class_type_id
        result = self.db.execute(
            select(ClassEntry).where(
                class_clause,
                ClassEntry.date == slot.date,
                ClassEntry.period == slot.period,
            )
        )
        return result.scalars().first()

    # ==================== Writes ====================

    def upsert_entry(self, request: ClassEntryUpsert) -> ClassEntry:
        """Create the entry for the slot, or overwrite status/notes of the existing one."""
        self._validate_slot(request)

        entry = self.find_by_slot(request)
        if entry:
            entry.status = request.status
            entry.notes = request.notes
            if request.semester_range_id is not None:
                entry.semester_range_id = request.semester_range_id
        else:
            entry = ClassEntry(
                class_type_id=request.class_type_id,
                semester_range_id=request.semester_range_id,
                date=request.date,
                period=request.period,
                status=request.status,
                notes=request.notes,
            )
            self.db.add(entry)

        self.db.flush()
        self.db.refresh(entry)
        return entry

    def update_status(self, entry_id: int, status: bool) -> ClassEntry:
        entry = self.get_entry(entry_id)
        entry.status = status
        self.db.flush()
        return entry

    def update_notes(self, entry_id: int, notes: str) -> ClassEntry:
        entry = self.get_entry(entry_id)
        entry.notes = notes
        self.db.flush()
        return entry

    def toggle_status(self, entry_id: int) -> ClassEntry:
        entry = self.get_entry(entry_id)
        entry.status = not entry.status
        self.db.flush()
        return entry

    def toggle_slot(self, request: ClassEntryToggle) -> ClassEntry:
        """Flip status for a slot; an absent slot is created and marked done."""
        entry = self._get_or_create(request, request.semester_range_id)
        entry.status = not entry.status
        self.db.flush()
        return entry

    def set_notes_for_slot(self, request: ClassEntryNotesSet) -> ClassEntry:
        """Set notes for a slot; an absent slot is created with ``status=False``."""
        entry = self._get_or_create(request, request.semester_range_id)
        entry.notes = request.notes
        self.db.flush()
        return entry

    def delete_entry(self, entry_id: int) -> None:
        """Delete a class entry."""
        entry = self.get_entry(entry_id)
        self.db.delete(entry)
        self.db.flush()

    def delete_range(self, start_date: date, end_date: date) -> int:
        """Delete every entry dated within ``[start_date, end_date]``."""
        result = self.db.execute(
            delete(ClassEntry).where(
                ClassEntry.date >= start_date,
                ClassEntry.date <= end_date,
            )
        )
        self.db.flush()
        logger.info(f"Deleted {result.rowcount} class entries from {start_date} to {end_date}")
        return result.rowcount

    def delete_all(self) -> int:
        result = self.db.execute(delete(ClassEntry))
        self.db.flush()
        logger.warning(f"Deleted all class entries ({result.rowcount})")
        return result.rowcount

    def bulk_insert(self, entries: Sequence[ClassEntry]) -> int:
        """Insert unsaved entries in one flush."""
        if not entries:
            return 0
        self.db.add_all(entries)
        self.db.flush()
        return len(entries)

    # ==================== Helpers ====================

    def _get_or_create(self, slot: SlotKey, semester_range_id: int | None) -> ClassEntry:
        self._validate_slot(slot)
        entry = self.find_by_slot(slot)
        if entry:
            return entry

        entry = ClassEntry(
            class_type_id=slot.class_type_id,
            semester_range_id=semester_range_id,
            date=slot.date,
            period=slot.period,
            status=False,
            notes="",
        )
        self.db.add(entry)
        self.db.flush()
        logger.debug(f"Created class entry for {slot.date} period {slot.period}")
        return entry

    def _validate_slot(self, slot: SlotKey) -> None:
        if not 1 <= slot.period <= settings.PERIODS_PER_DAY:
            raise ValidationError(
                f"Period must be between 1 and {settings.PERIODS_PER_DAY}",
                details={"period": slot.period},
            )
        if slot.class_type_id is not None and not self.db.get(ClassType, slot.class_type_id):
            raise NotFoundError("Class type", str(slot.class_type_id))

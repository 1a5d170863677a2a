"""Class entry schemas."""

import datetime

from pydantic import ConfigDict, Field

from app.schemas.common import BaseSchema


class SlotKey(BaseSchema):
    """Natural key of a class entry: one class in one period on one date."""

    date: datetime.date
    class_type_id: int | None = None
    period: int = Field(..., ge=1)


class ClassEntryUpsert(SlotKey):
    """Create-or-update by natural key."""

    model_config = ConfigDict(str_strip_whitespace=False)

    semester_range_id: int | None = None
    status: bool = False
    notes: str = ""


class ClassEntryToggle(SlotKey):
    """Flip completion status by natural key, creating the entry if absent."""

    semester_range_id: int | None = None


class ClassEntryNotesSet(SlotKey):
    """Set notes by natural key, creating the entry if absent."""

    model_config = ConfigDict(str_strip_whitespace=False)

    semester_range_id: int | None = None
    notes: str


class ClassEntryStatusUpdate(BaseSchema):
    """Status update by id."""

    status: bool


class ClassEntryNotesUpdate(BaseSchema):
    """Notes update by id."""

    model_config = ConfigDict(str_strip_whitespace=False)

    notes: str


class ClassEntryResponse(BaseSchema):
    """Class entry response schema."""

    id: int
    class_type_id: int | None
    semester_range_id: int | None
    date: datetime.date
    period: int
    status: bool
    notes: str
    class_name: str | None = None
    class_color: str | None = None


class PendingNotesResponse(BaseSchema):
    """Buffered note edits not yet written."""

    has_pending: bool
    pending: int

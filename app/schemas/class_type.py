"""Class type schemas."""

from pydantic import Field

from app.schemas.common import BaseSchema

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class ClassTypeCreate(BaseSchema):
    """Class type creation schema."""

    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field("#cccccc", pattern=HEX_COLOR_PATTERN)


class ClassTypeUpdate(BaseSchema):
    """Class type update schema."""

    name: str | None = Field(None, min_length=1, max_length=100)
    color: str | None = Field(None, pattern=HEX_COLOR_PATTERN)


class ClassTypeResponse(BaseSchema):
    """Class type response schema."""

    id: int
    name: str
    color: str

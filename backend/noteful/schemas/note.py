"""
Noteful Backend — Note Schemas
================================

What:  Pydantic models defining the /api/notes contract.
Why:   Request parsing, response serialization, and OpenAPI doc generation.
How:   FastAPI parses request bodies into the *Create/*Update models; the
       notes router builds NoteResponse objects through the serialization
       layer.

Timestamp format:
    `modified` is always rendered as UTC ISO 8601 with millisecond
    precision and a trailing `Z` (e.g. "2029-01-22T16:28:32.615Z").
    Databases that drop zone information (SQLite) return naive values;
    those are interpreted as UTC so a POST response and a later GET of
    the same note render identically.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_serializer


def format_timestamp(value: datetime) -> str:
    """Render a datetime as `YYYY-MM-DDTHH:MM:SS.mmmZ` in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a note.
    Who:   Returned by GET /api/notes, GET /api/notes/{id} and POST /api/notes.

    `name` and `content` have already been sanitized when this model is built.
    """
    id: int = Field(description="Note identifier")
    name: str = Field(description="Note title (markup neutralized)")
    modified: datetime = Field(description="Last modification time (UTC ISO 8601)")
    folder_id: int = Field(description="Identifier of the owning folder")
    content: str = Field(description="Note body (markup neutralized)")

    model_config = {"from_attributes": True}

    @field_serializer("modified")
    def serialize_modified(self, value: datetime) -> str:
        return format_timestamp(value)


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /api/notes.

    All three fields are required, but only absent/null counts as missing:
    `folder_id: 0` or `content: ""` pass the presence check.
    """
    name: Optional[str] = Field(default=None, description="Note title")
    folder_id: Optional[int] = Field(default=None, description="Owning folder id")
    content: Optional[str] = Field(default=None, description="Note body")


class NoteUpdate(BaseModel):
    """Body of PATCH /api/notes/{note_id}. At least one field must be truthy."""
    name: Optional[str] = Field(default=None, description="New title")
    folder_id: Optional[int] = Field(default=None, description="New owning folder id")
    content: Optional[str] = Field(default=None, description="New body")

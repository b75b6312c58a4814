"""
QuickNotes Backend - Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between frontend and backend.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate OpenAPI documentation.

Wire format:
    Notes are serialized with camelCase timestamp keys (createdAt, updatedAt)
    and RFC 3339 UTC timestamps. Request schemas only check JSON shape and
    types; length bounds are enforced by the Note factory so that every write
    path shares one rule.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models - What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /api/notes.

    Missing fields default to "" and are then refused by the Note factory
    with a validation error, not a schema error.
    """
    title: str = Field(default="", description="Note title; surrounding whitespace is trimmed")
    content: str = Field(default="", description="Note body, stored verbatim")

    @field_validator("title")
    @classmethod
    def trim_title(cls, v: str) -> str:
        """Drops leading/trailing whitespace from the title."""
        return v.strip()


class NoteUpdate(BaseModel):
    """
    Body of PUT /api/notes/{id}.

    Omitted or null fields are left unchanged. A string value, even "",
    replaces the field (and must pass the length rules).
    """
    title: Optional[str] = Field(default=None, description="New title, or null to keep")
    content: Optional[str] = Field(default=None, description="New content, or null to keep")

    @field_validator("title")
    @classmethod
    def trim_title(cls, v: Optional[str]) -> Optional[str]:
        """Drops leading/trailing whitespace from the title."""
        return v.strip() if v is not None else v


# ══════════════════════════════════════════════════════════════════════════
# Response Models - What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    Full representation of a note.

    Returned by every notes endpoint that yields a body.
    """
    id: str = Field(description="Time-ordered unique note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")
    created_at: datetime = Field(alias="createdAt", description="Creation time (UTC, RFC 3339)")
    updated_at: datetime = Field(alias="updatedAt", description="Last modification time (UTC, RFC 3339)")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error envelope for 400/500 responses.

    Example:
        {
            "error": "invalid_json",
            "message": "invalid JSON",
            "details": {"errors": [...]},
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently held in memory")
    uptime_seconds: float = Field(description="Seconds since service started")

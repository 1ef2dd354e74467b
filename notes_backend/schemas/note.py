"""
Simple Notes Backend: Pydantic Request/Response Schemas
=========================================================

What:  Pydantic models defining the API contract between frontend and backend.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI documentation served at /docs.
Who:   Used by route handlers and NoteService.

Design Decision:
    Schemas are separate from the Note entity. The entity uses snake_case
    Python attributes; the wire format uses the fixed camelCase names
    `createdAt` / `updatedAt`, applied here through field aliases.

    Request schemas deliberately do NOT enforce a non-empty title. Trimming
    and the empty-title rule belong to the Note entity, and their failure is
    reported as 400 validation_error by the global handler.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from notes_backend.models.note import Note


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /notes."""

    title: str = Field(description="Note title; must be non-empty after trimming")
    content: Optional[str] = Field(
        default=None,
        description="Note body; trimmed, may be empty (missing or null becomes empty string)",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [{"title": "Groceries", "content": "Milk, eggs, bread"}]
        }
    }


class NoteUpdate(BaseModel):
    """
    Body of PUT /notes/{id}.

    A full replacement: omitting `content` (or sending null) clears it to "".
    Defaulting is left to the Note entity's normalize().
    """

    title: str = Field(description="New title; must be non-empty after trimming")
    content: Optional[str] = Field(
        default=None,
        description="New body (missing or null becomes empty string)",
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    Wire representation of a note.

    Field names on the wire are fixed: id, title, content, createdAt, updatedAt.
    """

    id: str = Field(description="Unique note identifier (UUID string)")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")
    created_at: datetime = Field(
        alias="createdAt",
        description="When the note was created (UTC ISO 8601)",
    )
    updated_at: datetime = Field(
        alias="updatedAt",
        description="When the note was last updated (UTC ISO 8601)",
    )

    model_config = {"populate_by_name": True}

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "note with ID '…' was not found",
            "details": {"resource": "note", "resource_id": "…"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthMessage(BaseModel):
    """Body of GET /, kept for clients that poll the root path."""
    message: str = Field(default="Healthy")


class HealthResponse(BaseModel):
    """Health check response returned by GET /health."""
    status: str = Field(description="Overall service status: healthy")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently held in memory")
    uptime_seconds: float = Field(description="Seconds since service started")

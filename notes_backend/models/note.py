"""
Simple Notes Backend: Note Entity
===================================

What:  The shape of a stored note and the normalization/validation rules
       applied to incoming note data.
How:   Frozen dataclass for the entity; two pure functions for the rules.
Who:   Used by NotesStore on every write; read by NoteService when building
       API responses.

Field rules:
    - id:          opaque UUID string, assigned by the store, never changes
    - title:       trimmed; must be non-empty after trimming
    - content:     trimmed; may be empty; missing content becomes ""
    - created_at:  UTC, set once at creation
    - updated_at:  UTC, set at creation and on every successful update

Validation is a property of the data, not of the store: the store calls
normalize() then validate_for_write() before touching its collection.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from notes_backend.exceptions import ValidationError


@dataclass(frozen=True)
class Note:
    """
    Immutable snapshot of one note.

    Instances are never mutated in place. An update produces a new instance
    (dataclasses.replace) which the store swaps in, so any Note a caller holds
    stays exactly as it was when handed out.
    """

    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, title={self.title!r}, "
            f"updated_at='{self.updated_at.isoformat()}')>"
        )


def normalize(title: Optional[str], content: Optional[str] = None) -> Tuple[str, str]:
    """Trim both fields; a missing field becomes the empty string."""
    return (title or "").strip(), (content or "").strip()


def validate_for_write(title: Optional[str]) -> None:
    """
    Reject a title that is empty after trimming.

    Raises:
        ValidationError: with field="title"; content has no constraint.
    """
    if not (title or "").strip():
        raise ValidationError(message="Title must not be empty", field="title")

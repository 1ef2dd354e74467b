"""
Simple Notes Backend: Note Service
====================================

What:  Thin orchestration layer between the HTTP routes and the NotesStore.
How:   Canonicalizes path ids, calls one store operation, maps the resulting
       Note entities into NoteResponse schemas, and logs mutations.
Who:   Called by route handlers through the get_note_service dependency.

The store holds the whole behavioral contract (validation, identity,
timestamps, ordering); this layer adds no business rules of its own. Its one
translation: a False from NotesStore.delete becomes NotFoundError, so the
route can answer 404.
"""

import logging
import uuid
from typing import List

from notes_backend.exceptions import NotFoundError
from notes_backend.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from notes_backend.store.notes_store import NotesStore

logger = logging.getLogger(__name__)


def canonical_note_id(raw_id: str) -> str:
    """
    Parse a path id into the store's canonical form (lowercase hyphenated UUID).

    Accepts anything uuid.UUID accepts (upper case, braces, no hyphens).
    An id that is not a UUID can never name a stored note, so it is reported
    as NotFoundError rather than a validation failure.
    """
    try:
        return str(uuid.UUID(raw_id))
    except (ValueError, TypeError, AttributeError):
        raise NotFoundError(resource="note", resource_id=raw_id) from None


class NoteService:
    """
    Business operations for the /notes resource.

    Responsibilities:
        - list_notes():  all notes, most recently updated first
        - get_note():    single note, NotFoundError if absent
        - create_note(): new note from a NoteCreate body
        - update_note(): full replacement of title/content
        - delete_note(): removal, NotFoundError if absent
    """

    def __init__(self, store: NotesStore):
        self.store = store

    def list_notes(self) -> List[NoteResponse]:
        notes = self.store.list()
        logger.debug("Listing %d notes", len(notes))
        return [NoteResponse.from_note(note) for note in notes]

    def get_note(self, note_id: str) -> NoteResponse:
        note = self.store.get(canonical_note_id(note_id))
        return NoteResponse.from_note(note)

    def create_note(self, payload: NoteCreate) -> NoteResponse:
        note = self.store.create(payload.title, payload.content)
        logger.info("Note created: %s", note.id)
        return NoteResponse.from_note(note)

    def update_note(self, note_id: str, payload: NoteUpdate) -> NoteResponse:
        note = self.store.update(canonical_note_id(note_id), payload.title, payload.content)
        logger.info("Note updated: %s", note.id)
        return NoteResponse.from_note(note)

    def delete_note(self, note_id: str) -> None:
        canonical = canonical_note_id(note_id)
        if not self.store.delete(canonical):
            raise NotFoundError(resource="note", resource_id=note_id)
        logger.info("Note deleted: %s", canonical)

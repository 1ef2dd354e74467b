"""
Simple Notes Backend: In-Memory Notes Store
=============================================

What:  The authoritative, thread-safe keyed collection of notes and the single
       source of truth for identity, timestamps, and listing order.
How:   A dict of note id → immutable Note, guarded by one threading.Lock.
Who:   Owned by the application (one store per create_app()); called by
       NoteService from FastAPI's threadpool, so calls arrive concurrently.
When:  Every request touching /notes.

Concurrency model:
    Every operation holds the lock only for the dict read or write itself.
    Notes are frozen dataclasses and an update swaps in a new instance, so a
    reader can never observe a half-written note (title updated but
    updated_at not yet refreshed). list() copies the values under the lock
    and sorts outside it: each note in the result was live at some instant
    during the call.

    create() validates before the lock is taken; update() validates inside
    the lock, right after the existence check. Either way nothing is written
    until validation passes, so a failed create/update leaves the collection
    exactly as it was.

Identity:
    Ids are random UUID4 strings (122 random bits). No sequential counter:
    ids carry no ordering information and need no coordination.

Timestamps:
    Stamped by the store from an injectable clock, never by the caller.
    updated_at strictly increases on every update, even when the clock is
    coarse or steps backwards (see _next_timestamp).
"""

import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from notes_backend.exceptions import NotFoundError
from notes_backend.models.note import Note, normalize, validate_for_write

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Smallest step datetime can represent; used to keep updated_at strictly increasing
_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    """Default clock: timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


class NotesStore:
    """
    Concurrency-safe in-memory collection of notes.

    Operations:
        create(title, content) → Note
        get(note_id)           → Note                    (NotFoundError)
        list()                 → List[Note], newest update first
        update(note_id, ...)   → Note                    (NotFoundError, ValidationError)
        delete(note_id)        → bool
        count(), clear()

    Every returned Note is an immutable snapshot; later store mutations never
    change a value already handed out.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock: Clock = clock or utc_now
        self._notes: Dict[str, Note] = {}
        self._lock = threading.Lock()

    # ── Writes ────────────────────────────────────────────────────────────

    def create(self, title: Optional[str], content: Optional[str] = None) -> Note:
        """Normalize, validate, then insert a note under a fresh id."""
        title, content = normalize(title, content)
        validate_for_write(title)

        with self._lock:
            note_id = self._new_id()
            now = self._clock()
            note = Note(
                id=note_id,
                title=title,
                content=content,
                created_at=now,
                updated_at=now,
            )
            self._notes[note_id] = note
            live = len(self._notes)

        logger.debug("Stored note %s (%d live)", note_id, live)
        return note

    def update(
        self,
        note_id: str,
        title: Optional[str],
        content: Optional[str] = None,
    ) -> Note:
        """
        Replace title/content of an existing note and refresh updated_at.

        NotFound is checked first: an unknown id yields NotFoundError even
        when the submitted title is also invalid.
        """
        title, content = normalize(title, content)

        with self._lock:
            existing = self._notes.get(note_id)
            if existing is None:
                raise NotFoundError(resource="note", resource_id=note_id)
            validate_for_write(title)

            updated = replace(
                existing,
                title=title,
                content=content,
                updated_at=self._next_timestamp(existing.updated_at),
            )
            self._notes[note_id] = updated

        return updated

    def delete(self, note_id: str) -> bool:
        """Remove a note. Returns False (not an error) if it was already absent."""
        with self._lock:
            return self._notes.pop(note_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._notes.clear()

    # ── Reads ─────────────────────────────────────────────────────────────

    def get(self, note_id: str) -> Note:
        with self._lock:
            note = self._notes.get(note_id)
        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        return note

    def list(self) -> List[Note]:
        """
        Snapshot of all live notes ordered by updated_at descending.

        Equal updated_at values are ordered by id (descending) so the result
        is deterministic for a given collection.
        """
        with self._lock:
            notes = list(self._notes.values())
        notes.sort(key=lambda n: (n.updated_at, n.id), reverse=True)
        return notes

    def count(self) -> int:
        with self._lock:
            return len(self._notes)

    # ── Internals (call with the lock held) ───────────────────────────────

    def _new_id(self) -> str:
        note_id = str(uuid.uuid4())
        while note_id in self._notes:
            note_id = str(uuid.uuid4())
        return note_id

    def _next_timestamp(self, previous: datetime) -> datetime:
        now = self._clock()
        if now <= previous:
            return previous + _TICK
        return now

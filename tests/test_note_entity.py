"""
Simple Notes Backend: Note Entity Unit Tests
==============================================

Tests for normalize() and validate_for_write(), and the immutability of Note.
"""

import dataclasses
from datetime import datetime, timezone

import pytest

from notes_backend.exceptions import ValidationError
from notes_backend.models.note import Note, normalize, validate_for_write


class TestNormalize:

    def test_trims_both_fields(self):
        assert normalize("  Title  ", "\n body \t") == ("Title", "body")

    def test_missing_content_becomes_empty(self):
        assert normalize("Title") == ("Title", "")
        assert normalize("Title", None) == ("Title", "")

    def test_missing_title_becomes_empty(self):
        assert normalize(None, "x") == ("", "x")

    def test_inner_whitespace_preserved(self):
        assert normalize(" a  b ", " line1\nline2 ") == ("a  b", "line1\nline2")


class TestValidateForWrite:

    def test_non_empty_title_passes(self):
        validate_for_write("A")
        validate_for_write("  padded  ")

    @pytest.mark.parametrize("title", ["", "   ", "\t\n", None])
    def test_blank_title_rejected(self, title):
        with pytest.raises(ValidationError) as exc_info:
            validate_for_write(title)
        assert exc_info.value.field == "title"
        assert exc_info.value.context == {"field": "title"}


class TestNoteSnapshot:

    def test_note_is_frozen(self):
        now = datetime.now(timezone.utc)
        note = Note(id="abc", title="t", content="", created_at=now, updated_at=now)
        with pytest.raises(dataclasses.FrozenInstanceError):
            note.title = "changed"

    def test_notes_with_same_fields_are_equal(self):
        now = datetime.now(timezone.utc)
        a = Note(id="abc", title="t", content="c", created_at=now, updated_at=now)
        b = Note(id="abc", title="t", content="c", created_at=now, updated_at=now)
        assert a == b

"""
Simple Notes Backend: Note Service Unit Tests
===============================================

What:  Tests for NoteService (id canonicalization, schema mapping, delete → 404).
How:   Real NotesStore with a fake clock for behavior; a MagicMock store where
       only the calls made matter.
"""

import uuid
from unittest.mock import MagicMock

import pytest

from notes_backend.exceptions import NotFoundError, ValidationError
from notes_backend.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from notes_backend.services.note_service import NoteService, canonical_note_id


class TestCanonicalNoteId:

    def test_canonical_form_unchanged(self):
        raw = str(uuid.uuid4())
        assert canonical_note_id(raw) == raw

    def test_upper_case_and_braces_accepted(self):
        raw = uuid.uuid4()
        assert canonical_note_id("{" + str(raw).upper() + "}") == str(raw)
        assert canonical_note_id(raw.hex) == str(raw)

    @pytest.mark.parametrize("raw", ["", "123", "not-a-uuid", "zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz"])
    def test_non_uuid_is_not_found(self, raw):
        with pytest.raises(NotFoundError):
            canonical_note_id(raw)


class TestNoteServiceCrud:

    def test_create_returns_response(self, note_service):
        result = note_service.create_note(NoteCreate(title=" A ", content=" b "))
        assert isinstance(result, NoteResponse)
        assert result.title == "A"
        assert result.content == "b"
        assert result.created_at == result.updated_at

    def test_create_blank_title_propagates_validation_error(self, note_service, store):
        with pytest.raises(ValidationError):
            note_service.create_note(NoteCreate(title="   "))
        assert store.count() == 0

    def test_get_accepts_upper_case_id(self, note_service):
        created = note_service.create_note(NoteCreate(title="A"))
        fetched = note_service.get_note(created.id.upper())
        assert fetched == created

    def test_get_unknown_raises_not_found(self, note_service):
        with pytest.raises(NotFoundError):
            note_service.get_note(str(uuid.uuid4()))

    def test_update_returns_updated_note(self, note_service):
        created = note_service.create_note(NoteCreate(title="A"))
        updated = note_service.update_note(created.id, NoteUpdate(title="B", content="x"))
        assert updated.id == created.id
        assert updated.title == "B"
        assert updated.content == "x"
        assert updated.updated_at > created.updated_at

    def test_list_orders_by_updated_at(self, note_service):
        a = note_service.create_note(NoteCreate(title="A"))
        b = note_service.create_note(NoteCreate(title="B"))
        note_service.update_note(a.id, NoteUpdate(title="A2"))
        assert [n.id for n in note_service.list_notes()] == [a.id, b.id]

    def test_delete_then_delete_again_raises_not_found(self, note_service):
        created = note_service.create_note(NoteCreate(title="A"))
        note_service.delete_note(created.id)
        with pytest.raises(NotFoundError):
            note_service.delete_note(created.id)


class TestNoteServiceDelegation:

    def test_delete_passes_canonical_id_to_store(self):
        store = MagicMock()
        store.delete.return_value = True
        service = NoteService(store)
        raw = uuid.uuid4()

        service.delete_note(str(raw).upper())

        store.delete.assert_called_once_with(str(raw))

    def test_malformed_id_never_reaches_store(self):
        store = MagicMock()
        service = NoteService(store)

        with pytest.raises(NotFoundError):
            service.update_note("nope", NoteUpdate(title="A"))

        store.update.assert_not_called()

"""
Simple Notes Backend: Notes Route Handlers
============================================

What:  CRUD endpoints for /notes.
How:   Parses the request, delegates to NoteService, returns the schema with
       the right status code. ValidationError and NotFoundError raised below
       are turned into 400/404 by the global exception handlers in main.py.
Who:   Called by the notes frontend.

Handlers are plain `def` functions: FastAPI runs them in its threadpool,
and the NotesStore lock makes concurrent calls safe.

Route Inventory:
    GET    /notes        → 200 list, most recently updated first
    GET    /notes/{id}   → 200 note | 404
    POST   /notes        → 201 note + Location header | 400
    PUT    /notes/{id}   → 200 note | 404 | 400
    DELETE /notes/{id}   → 204 | 404
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from notes_backend.dependencies import get_note_service
from notes_backend.schemas.note import (
    ErrorResponse,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)
from notes_backend.services.note_service import NoteService

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get(
    "",
    response_model=List[NoteResponse],
    operation_id="ListNotes",
    summary="List notes",
    description="Returns all notes sorted by updatedAt desc.",
)
def list_notes(service: NoteService = Depends(get_note_service)) -> List[NoteResponse]:
    return service.list_notes()


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    operation_id="GetNote",
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get note",
    description="Returns a single note by id.",
)
def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return service.get_note(note_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteResponse,
    operation_id="CreateNote",
    responses={400: {"description": "Title empty or missing", "model": ErrorResponse}},
    summary="Create note",
    description="Creates a new note with title and content.",
)
def create_note(
    payload: NoteCreate,
    response: Response,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """
    Create a note.

    The store assigns id, createdAt and updatedAt; the client only supplies
    title and (optionally) content. The Location header points at the new
    resource.
    """
    note = service.create_note(payload)
    response.headers["Location"] = f"/notes/{note.id}"
    return note


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    operation_id="UpdateNote",
    responses={
        400: {"description": "Title empty or missing", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Update note",
    description="Updates an existing note by id.",
)
def update_note(
    note_id: str,
    payload: NoteUpdate,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return service.update_note(note_id, payload)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    operation_id="DeleteNote",
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete note",
    description="Deletes a note by id.",
)
def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> Response:
    service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""
Simple Notes Backend: Request Dependencies
============================================

What:  FastAPI dependencies that hand route handlers the app's NotesStore
       and NoteService.
How:   create_app() builds one store per application and keeps it on
       app.state; these functions read it back from the current request.
Who:   Injected into route handlers via FastAPI's Depends() system.

Example usage in a route:
    @router.get("/notes")
    def list_notes(service: NoteService = Depends(get_note_service)):
        return service.list_notes()

One store per app instance means each create_app() call (one per test)
starts from an empty collection.
"""

from fastapi import Request

from notes_backend.services.note_service import NoteService
from notes_backend.store.notes_store import NotesStore


def get_notes_store(request: Request) -> NotesStore:
    return request.app.state.notes_store


def get_note_service(request: Request) -> NoteService:
    return request.app.state.note_service

"""
Simple Notes Backend: Custom Exception Hierarchy
==================================================

What:  Application-specific exceptions for the outcomes the notes API models.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching HTTP status.
Who:   Raised by the Note entity, the NotesStore and the NoteService.

Exception Hierarchy:
    NotesError (base)
    ├── ValidationError   → 400 Bad Request (client can fix the input)
    └── NotFoundError     → 404 Not Found (stale or unknown note id)

Neither is a fault of the store: both are expected, non-retryable results of
bad input or a stale reference, and neither leaves a partial write behind.
"""

from typing import Any, Dict, Optional


class NotesError(Exception):
    """
    Base exception for all notes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional info, e.g. the offending field or resource id
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesError):
    """
    Raised when note data violates a field constraint.

    The only constraint is a non-empty title after trimming, so `field` is
    "title" in practice. It is kept in `context` so the API response names
    the offending field.

    Example response:
        {
            "error": "validation_error",
            "message": "Title must not be empty",
            "details": {"field": "title"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotesError):
    """
    Raised when a referenced note id does not exist in the store.

    When:    get/update/delete with an id that was never issued, was deleted,
             or is not a valid UUID at all.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id

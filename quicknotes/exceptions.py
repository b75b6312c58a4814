"""
QuickNotes Backend - Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the few ways a request can fail.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return responses with the right HTTP status codes.
Who:   Raised by the Note factory, the service layer and request parsing.

Exception Hierarchy:
    QuickNotesError (base)         → 500 Internal Server Error
    ├── ValidationError            → 400 Bad Request (title/content out of bounds)
    ├── InvalidRequestBodyError    → 400 Bad Request (body is not the expected JSON)
    └── NotFoundError              → 404 Not Found (empty body)

The in-memory store cannot fail on its own, so there is no storage error type.
"""

from typing import Any, Dict, Optional


class QuickNotesError(Exception):
    """
    Base exception for all QuickNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(QuickNotesError):
    """
    Raised when note fields break the domain rules.

    When:    Title not within 1-100 characters, content not within 1-10000.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "title must be between 1 and 100 characters (got 0)",
            "details": {"field": "title", "length": 0, "min": 1, "max": 100}
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


class InvalidRequestBodyError(QuickNotesError):
    """
    Raised when a request body cannot be decoded into the expected shape.

    Covers malformed JSON as well as well-formed JSON with wrong field types.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "invalid JSON",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(QuickNotesError):
    """
    Raised when a requested note does not exist.

    When:    GET/PUT/DELETE /api/notes/{id} with an unknown id.
    HTTP:    404 Not Found, with an empty body

    The store reports a miss as None/False; the service layer converts that
    into this exception so routes never branch on it.
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

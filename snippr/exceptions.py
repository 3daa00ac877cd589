"""
Snippr - Application Exception Hierarchy
==========================================

What:  Exceptions raised by the snippet store and route handlers.
How:   Each exception carries a client-safe message and a context dict.
       Global handlers registered in main.py turn them into JSON error
       responses with the matching HTTP status code.
Who:   Raised by SnippetStore and the routes; caught by the handlers.

Exception Hierarchy:
    SnipprError (base)          → 500 Internal Server Error
    ├── ValidationError         → 400 Bad Request (missing/empty field)
    └── NotFoundError           → 404 Not Found (unknown snippet id)

Both leaf errors are recoverable: the store state is untouched when they
are raised, and the request that triggered them simply fails.
"""

from typing import Any, Dict, Optional


class SnipprError(Exception):
    """
    Base exception for all Snippr application errors.

    Attributes:
        message:  User-facing error description (safe to return in a response)
        context:  Extra debug information (logged, returned only as details)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SnipprError):
    """
    Raised when client input fails a presence check.

    When:    POST /snippets with a missing or empty `language` or `code`.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Field 'language' is required and must not be empty",
            "details": {"field": "language"}
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


class NotFoundError(SnipprError):
    """
    Raised when a requested resource does not exist.

    When:    GET /snippets/{id} with an id that was never assigned.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id

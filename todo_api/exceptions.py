"""
Todo API — Custom Exception Hierarchy
======================================

What:  Application-specific exceptions for the distinct failure causes.
Why:   Services raise a cause (not found, invalid input, internal failure)
       without knowing about HTTP responses; the HTTP boundary maps every
       cause to the one client-facing envelope, `HttpError`.
How:   Each exception class carries a message, a class-level HTTP status
       and an optional context dict. The global handler registered in
       main.py calls `to_http_error()` and returns its response.
Who:   Raised by services and routes; caught by global handlers.

Exception Hierarchy:
    TodoApiError (base)          → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    └── InternalServerError      → 500 Internal Server Error
"""

from http import HTTPStatus
from typing import Any, Dict, Optional

from todo_api.schemas.error import HttpError, format_status


class TodoApiError(Exception):
    """
    Base exception for all Todo API errors.

    Attributes:
        message:  User-facing error description (returned as `msg`)
        context:  Additional debug info (logged but NOT returned to client)
        status:   HTTP status the boundary answers with
    """

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{format_status(self.status)}] {self.message}"

    def to_http_error(self) -> HttpError:
        """Map this failure cause to the client-facing envelope."""
        return HttpError(msg=self.message, status=self.status)


class ValidationError(TodoApiError):
    """
    Raised when client input fails validation.

    When:    Missing or mistyped body fields, non-integer path ids, malformed JSON.
    HTTP:    400 Bad Request
    """

    status = HTTPStatus.BAD_REQUEST

    def __init__(
        self,
        message: str = "Validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(TodoApiError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /todos/{todo_id} with an unknown id, or an
             explorer asset path outside the bundled asset set.
    HTTP:    404 Not Found

    Stores return None for missing records; the service layer converts
    that None into this exception.
    """

    status = HTTPStatus.NOT_FOUND

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id is not None:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class InternalServerError(TodoApiError):
    """
    Raised when the server fails to produce a response it should be able to produce.

    When:    The OpenAPI document cannot be serialized, or the explorer
             asset lookup itself fails.
    HTTP:    500 Internal Server Error
    """

    status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str = "An internal error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

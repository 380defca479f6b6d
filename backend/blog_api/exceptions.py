"""
Blog API — Custom Exception Hierarchy
======================================

What:  Application-specific exceptions for the error scenarios of the posts API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by PostService and PostStore; caught by global handlers.

Exception Hierarchy:
    BlogAPIError (base)
    ├── ValidationError           → 400 Bad Request (client can fix)
    ├── NotFoundError             → 404 Not Found
    ├── MalformedIdentifierError  → 500 Internal Server Error
    └── StorageError              → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class BlogAPIError(Exception):
    """
    Base exception for all Blog API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged; only returned for client errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BlogAPIError):
    """
    Raised when client input fails validation.

    When:    Missing or empty required field on create, path/body id mismatch
             on update.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Missing `title` in request body",
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


class NotFoundError(BlogAPIError):
    """
    Raised when a requested post does not exist.

    When:    PUT /posts/{id} or GET /posts/{id} with a well-formed id that
             matches no record.
    HTTP:    404 Not Found

    The store returns None for missing records; the service converts that
    None into this exception.
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


class MalformedIdentifierError(BlogAPIError):
    """
    Raised when an id cannot be parsed into the store's native key format.

    When:    Any /posts/{id} operation whose id is not a UUID.
    HTTP:    500 Internal Server Error

    Deleting a missing record succeeds, while deleting with an unparseable
    id is a server fault. That asymmetry is kept on purpose until the
    intended contract is confirmed.
    """

    def __init__(
        self,
        identifier: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["identifier"] = identifier
        super().__init__(
            message=f"'{identifier}' is not a valid post identifier",
            context=ctx,
        )
        self.identifier = identifier


class StorageError(BlogAPIError):
    """
    Raised when the backing store fails or is unreachable.

    When:    Connection lost mid-query, constraint violation, timeout, etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Driver details
    are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A storage error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

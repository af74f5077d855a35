"""
Noteful Backend — Custom Exception Hierarchy
==============================================

What:  The failures a Noteful request can end in, one class per status.
How:   `message` is what the client sees; `context` is extra detail for the
       log line only. Handlers in main.py turn each class into a
       `{"error": {"message": ...}}` body.
Who:   Raised by the validation layer, stores, routes and the auth gate.

Exception Hierarchy:
    NotefulError (base)      → 500 Internal Server Error
    ├── UnauthorizedError    → 401 Unauthorized (missing/invalid bearer token)
    ├── ValidationError      → 400 Bad Request (client can fix)
    ├── NotFoundError        → 404 Not Found
    └── DatabaseError        → 500 Internal Server Error
"""

from typing import Any, Dict, Optional, Sequence


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

    Attributes:
        message:  Text placed in the response body
        context:  Ids and error types for the log; never sent
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class UnauthorizedError(NotefulError):
    """
    Raised when a request lacks a valid bearer credential.

    HTTP: 401 Unauthorized. The body is the flat `{"error": "Unauthorized request"}`
    rather than the nested form used by the other errors.
    """

    def __init__(
        self,
        message: str = "Unauthorized request",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ValidationError(NotefulError):
    """
    Raised when a request body fails the field checks.

    HTTP: 400 Bad Request

    Example response:
        {"error": {"message": "Missing 'name' in request body"}}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        fields: Optional[Sequence[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        if fields:
            ctx["fields"] = list(fields)
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotefulError):
    """
    Raised when a referenced folder or note does not exist.

    HTTP: 404 Not Found

    The message is resource-specific ("Folder doesn't exist"); the id is
    kept in the context for logging only.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} doesn't exist"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(NotefulError):
    """
    Raised when a database statement fails.

    HTTP: 500 Internal Server Error

    The message returned to the client is always generic. Constraint names,
    SQL and driver errors are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

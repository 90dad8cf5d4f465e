from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when the acting user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a record disappeared between listing and acting on it."""


class BackendError(Exception):
    """Error returned by the database service.

    ``code`` is machine readable (duplicate, constraint, permission_denied,
    not_found, connection, unknown); ``message`` is meant for humans and is
    shown to the user verbatim.
    """

    def __init__(self, code: str, message: str, *, errno: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.errno = errno

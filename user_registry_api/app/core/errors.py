"""
Domain errors raised by the user store.

Every error carries the HTTP status it maps to and the message that
is returned to the client as ``{"error": message}``.  The mapping is
applied by a single exception handler registered in ``main``.
"""

from typing import Optional

from fastapi import status


class UserRegistryError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "internal error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateKeyError(UserRegistryError):
    """A user with the requested ``id`` is already stored."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "user already exists"


class UserNotFoundError(UserRegistryError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "user not found"


class StorageError(UserRegistryError):
    """Any SQLite failure not covered by the other errors.

    The message is the raw database message, e.g.
    ``NOT NULL constraint failed: usuario.name``.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

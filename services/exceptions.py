"""Errors raised by the credential store, task repository and auth gate."""
from fastapi import status


class TaskTrackerError(Exception):
    """
    Base error carrying the HTTP status and the message shown to the client.

    Subclasses fix the status; the message defaults to a short generic text.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ConflictError(TaskTrackerError):
    """Raised when registering an email that is already taken."""

    # Duplicate registration has always been reported as 401
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "User Already Exists"


class UnauthorizedError(TaskTrackerError):
    """Raised for a missing or invalid token, or wrong login credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid JWT Token"


class BadRequestError(TaskTrackerError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFoundError(TaskTrackerError):
    """Raised when a task does not exist or belongs to another user."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "task not found"


class StorageError(TaskTrackerError):
    """
    Raised for any persistence failure.

    The message stays generic; the underlying database error is logged, never
    returned.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Database error"

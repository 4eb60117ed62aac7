# notes_api/common/exceptions.py

from fastapi import status


class AppError(Exception):
    """
    Base error for failures the API reports back to the client.

    Subclasses pick the HTTP status; the message is returned verbatim
    as the response body's `message` field.
    """
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """Raised when a required field is missing or malformed."""


class NotFoundError(AppError):
    """Raised when no record matches the requested id."""


class ConflictError(AppError):
    """Raised when a write would break title uniqueness."""
    status_code = status.HTTP_409_CONFLICT

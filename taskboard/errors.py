"""Domain errors mapped to HTTP responses in main.py."""

from fastapi import status


class TaskboardError(Exception):
    """Base class for errors that carry an HTTP status code."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TaskboardError):
    """Malformed or out-of-range input."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str | None, reason: str) -> None:
        super().__init__(reason)
        self.field = field
        self.reason = reason


class NotFoundError(TaskboardError):
    """The referenced task or comment does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(TaskboardError):
    """The acting user does not own the resource."""

    status_code = status.HTTP_403_FORBIDDEN

"""Service-layer errors.

Each error carries the HTTP status it maps to and a human-readable message.
The app-level exception handler turns them into ``{"message": ...}`` responses.
"""

from fastapi import status


class ServiceError(Exception):
    """Base exception for service operations."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    """Malformed or out-of-range input."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ServiceError):
    """Missing, invalid or expired token, or bad credentials at login."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ServiceError):
    """Authenticated, but not the owner of the resource."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ServiceError):
    """Resource does not exist (or is not visible to the caller)."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    """Duplicate registration. Reported as 400, not 409."""

    status_code = status.HTTP_400_BAD_REQUEST

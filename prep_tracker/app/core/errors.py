"""
Application error taxonomy.

Services raise these; main.py renders them as {"error": message} with the
matching status code. Nothing here is retried automatically.
"""
from fastapi import status


class AppError(Exception):
    """Base class for errors that are reported back to the caller."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    public_message: str | None = None

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message or self.__class__.__name__

    @property
    def client_message(self) -> str:
        """Message safe to return to the caller."""
        return self.public_message or self.message


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = 422


class AuthError(AppError):
    """Invalid/expired session, bad credentials, or owner mismatch."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundOrForbidden(AppError):
    """Row absent or owned by someone else. The two cases are indistinguishable."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str = "Row"):
        super().__init__(f"{entity} not found")


class UpstreamError(AppError):
    """Third-party backend failed or returned a non-success response."""

    status_code = status.HTTP_502_BAD_GATEWAY


class ConfigurationError(AppError):
    """A required backend credential is missing."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message = "Service is not configured. Please try again later."

"""
Error taxonomy for the Astro API.

Services raise these exceptions; the application turns them into
``{"error": message, **details}`` JSON bodies with the matching status code.
"""

from __future__ import annotations

from typing import Any


class ConfigurationError(RuntimeError):
    """Raised at startup when mandatory configuration is missing."""


class AstroError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code = 500

    def __init__(self, message: str, *, status_code: int | None = None, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        body.update(self.details)
        return body


class ValidationError(AstroError):
    status_code = 400


class AuthError(AstroError):
    status_code = 400


class InvalidCredentialsError(AuthError):
    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class NotAuthenticatedError(AuthError):
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Not authenticated.")


class InvalidTokenError(AuthError):
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Invalid token.")


class ForbiddenError(AstroError):
    status_code = 403


class ConflictError(AstroError):
    status_code = 409


class NotFoundError(AstroError):
    status_code = 404


class StorageError(AstroError):
    status_code = 500


class RateLimitError(AstroError):
    status_code = 429

    def __init__(self) -> None:
        super().__init__("Too many requests. Try again shortly.")

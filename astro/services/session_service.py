"""Session cookie helpers and request principal resolution."""
from __future__ import annotations

from fastapi import Request, Response

from astro.core.config import Settings
from astro.core.errors import ForbiddenError
from astro.core.tokens import Principal

ACCESS_COOKIE_NAME = "access_token"


def set_access_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        ACCESS_COOKIE_NAME,
        token,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
        max_age=settings.access_token_ttl_seconds,
        path="/",
    )


def clear_access_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        ACCESS_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )


def current_principal(request: Request) -> Principal:
    """FastAPI dependency: principal from the ``access_token`` cookie, or 401."""
    auth_service = request.app.state.auth_service
    return auth_service.authenticate(request.cookies.get(ACCESS_COOKIE_NAME))


def require_admin(request: Request) -> Principal:
    principal = current_principal(request)
    if principal.role != "admin":
        raise ForbiddenError("Admin access required.")
    return principal

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from astro.core.config import Settings
from astro.core.rate_limiter import rate_limit_ip
from astro.core.tokens import Principal
from astro.domain.schemas import ChangePasswordIn, LoginIn, ResetPasswordIn, SignupIn
from astro.routers.dependencies import get_auth_service, get_settings_dep
from astro.services.auth_service import AuthService
from astro.services.session_service import clear_access_cookie, current_principal, set_access_cookie

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", status_code=201)
def signup(request: Request, body: SignupIn, auth_service: AuthService = Depends(get_auth_service)):
    rate_limit_ip(request, "auth:signup", limit=10, window_seconds=300)
    auth_service.signup(body.phone, body.fullname, body.email, body.password, body.confirm_password)
    return {"message": "User created successfully"}


@router.post("/login")
def login(
    request: Request,
    response: Response,
    body: LoginIn,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dep),
):
    rate_limit_ip(request, "auth:login", limit=10, window_seconds=60)
    outcome = auth_service.login(body.phone, body.password)
    set_access_cookie(response, outcome.token, settings)
    return {"message": "Login successful", "token": outcome.token, "userRole": outcome.role}


@router.post("/logout")
def logout(response: Response, settings: Settings = Depends(get_settings_dep)):
    # Tokens are stateless; logging out only drops the cookie.
    clear_access_cookie(response, settings)
    return {"message": "Logged out successfully."}


@router.get("/profile")
def profile(
    principal: Principal = Depends(current_principal),
    auth_service: AuthService = Depends(get_auth_service),
):
    return auth_service.profile(principal)


@router.put("/change-password")
def change_password(
    body: ChangePasswordIn,
    principal: Principal = Depends(current_principal),
    auth_service: AuthService = Depends(get_auth_service),
):
    auth_service.change_password(principal, body.current_password, body.new_password)
    return {"message": "Password updated successfully."}


@router.post("/reset-password")
def reset_password(request: Request, body: ResetPasswordIn, auth_service: AuthService = Depends(get_auth_service)):
    rate_limit_ip(request, "auth:reset", limit=5, window_seconds=300)
    auth_service.reset_password(body.phone, body.code, body.new_password)
    return {"message": "Password reset successfully."}

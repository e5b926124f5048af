"""
Authentication and account use cases.

Signup, login, token authentication, profile lookup, password change and
password reset. Each flow runs strictly in order (lookup, hash, write); the
UNIQUE constraint on ``account.phone`` is the final guard against concurrent
signups with the same phone.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import Optional

from argon2 import exceptions as argon_exc
from sqlalchemy.exc import IntegrityError

from astro.core.config import Settings
from astro.core.errors import (
    AstroError,
    AuthError,
    ConflictError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    NotFoundError,
    ValidationError,
)
from astro.core.security import hash_password, needs_rehash, verify_dummy, verify_password
from astro.core.tokens import Principal, TokenService
from astro.db.models import Account
from astro.repositories.account_repository import AccountRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
DUPLICATE_PHONE_MESSAGE = "A user with this phone already exists."
USER_NOT_FOUND_MESSAGE = "User not found."


@dataclass
class LoginSuccess:
    account_id: int
    token: str
    role: Optional[str]


def hash_or_fail(password: str) -> str:
    """Hash ``password``; hashing failures become a generic 500."""
    try:
        return hash_password(password)
    except argon_exc.HashingError as exc:
        logger.error("Password hashing failed: %s", exc)
        raise AstroError("Error processing password.") from exc


@dataclass
class AuthService:
    """Handles signup, login, token checks and password flows."""

    accounts: AccountRepository
    tokens: TokenService
    settings: Settings

    # -------------------------------------- signup --------------------------------------
    def signup(
        self,
        phone: str | None,
        fullname: str | None,
        email: str | None,
        password: str | None,
        confirm_password: str | None,
    ) -> Account:
        phone = (phone or "").strip()
        fullname = (fullname or "").strip()
        if not phone or not fullname or not password or not confirm_password:
            raise ValidationError("Phone, fullname, password, and confirm password are required.")
        if password != confirm_password:
            raise ValidationError("Passwords do not match.")
        if self.accounts.phone_exists(phone):
            raise ConflictError(DUPLICATE_PHONE_MESSAGE, status_code=400)

        password_hash = hash_or_fail(password)
        try:
            account = self.accounts.create(phone, fullname, password_hash, email=(email or "").strip() or None)
        except IntegrityError as exc:
            # Lost the race against a concurrent signup for the same phone.
            logger.info("Signup for %s rejected by unique constraint", phone)
            raise ConflictError(DUPLICATE_PHONE_MESSAGE, status_code=400) from exc
        logger.info("Account %s created", account.id)
        return account

    # -------------------------------------- login --------------------------------------
    def login(self, phone: str | None, password: str | None) -> LoginSuccess:
        phone = (phone or "").strip()
        if not phone or not password:
            raise ValidationError("Phone and password are required.")
        account = self.accounts.get_by_phone(phone)
        if not account:
            # Unknown phones cost the same hash work as a wrong password.
            verify_dummy(password)
            raise InvalidCredentialsError()
        if not verify_password(password, account.password_hash):
            raise InvalidCredentialsError()
        if needs_rehash(account.password_hash):
            self.accounts.update_password(account.id, hash_or_fail(password))
            logger.info("Upgraded password hash for account %s", account.id)
        token = self.tokens.issue(account.id, account.phone, account.role)
        return LoginSuccess(account_id=account.id, token=token, role=account.role)

    def authenticate(self, token: str | None) -> Principal:
        if not token:
            raise NotAuthenticatedError()
        return self.tokens.verify(token)

    def profile(self, principal: Principal) -> dict:
        account = self.accounts.get_by_id(principal.account_id)
        if not account:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        return {
            "idaccount": account.id,
            "phone": account.phone,
            "fullname": account.fullname,
            "email": account.email,
        }

    # -------------------------------------- passwords --------------------------------------
    def change_password(self, principal: Principal, current_password: str | None, new_password: str | None) -> None:
        if not current_password or not new_password:
            raise ValidationError("Current password and new password are required.")
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise ValidationError("New password must be at least 8 characters.")
        account = self.accounts.get_by_id(principal.account_id)
        if not account:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        if not verify_password(current_password, account.password_hash):
            raise AuthError("Current password is incorrect.")
        self.accounts.update_password(account.id, hash_or_fail(new_password))
        logger.info("Password changed for account %s", account.id)

    def reset_password(self, phone: str | None, code: str | None, new_password: str | None) -> None:
        """Reset a password using the out-of-band verification code.

        The code is compared before the account lookup, so a wrong code is
        rejected the same way whether or not the phone is registered.
        """
        phone = (phone or "").strip()
        code = (code or "").strip()
        if not phone or not code or not new_password:
            raise ValidationError("All fields are required.")
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise ValidationError("New password must be at least 8 characters.")
        if not secrets.compare_digest(code, self.settings.reset_verification_code):
            raise AuthError("Invalid verification code.")
        if not self.accounts.get_by_phone(phone):
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        self.accounts.update_password_by_phone(phone, hash_or_fail(new_password))
        logger.info("Password reset for phone %s", phone)

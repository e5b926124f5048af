"""Account management and summary statistics for the admin dashboard."""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from astro.core.errors import ConflictError, NotFoundError, StorageError, ValidationError
from astro.db.models import Account
from astro.repositories.account_repository import AccountRepository
from astro.repositories.reading_repository import ReadingRepository
from astro.services.auth_service import hash_or_fail

logger = logging.getLogger(__name__)

RECENT_WINDOW = timedelta(days=7)
ROLES = ("user", "admin")
DUPLICATE_PHONE_MESSAGE = "Phone number already exists"
USER_NOT_FOUND_MESSAGE = "User not found"


def _role(value: Optional[str]) -> str:
    role = (value or "").strip().lower() or "user"
    if role not in ROLES:
        raise ValidationError(f"Role must be one of: {', '.join(ROLES)}")
    return role


def account_to_dict(account: Account) -> dict[str, Any]:
    return {
        "idaccount": account.id,
        "phone": account.phone,
        "fullname": account.fullname,
        "email": account.email,
        "role": account.role,
    }


class DashboardService:
    def __init__(self, accounts: AccountRepository, readings: ReadingRepository) -> None:
        self.accounts = accounts
        self.readings = readings

    # -------------------------------------- users --------------------------------------
    def list_users(self) -> list[dict[str, Any]]:
        return [account_to_dict(account) for account in self.accounts.list_accounts()]

    def get_user(self, account_id: int) -> dict[str, Any]:
        account = self.accounts.get_by_id(account_id)
        if not account:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        return account_to_dict(account)

    def get_user_by_phone(self, phone: str) -> dict[str, Any]:
        account = self.accounts.get_by_phone(phone)
        if not account:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        return account_to_dict(account)

    def create_user(
        self,
        phone: Optional[str],
        fullname: Optional[str],
        password: Optional[str],
        email: Optional[str] = None,
        role: Optional[str] = None,
    ) -> int:
        phone = (phone or "").strip()
        fullname = (fullname or "").strip()
        if not phone or not fullname or not password:
            raise ValidationError("Phone, fullname, and password are required")
        try:
            account = self.accounts.create(
                phone,
                fullname,
                hash_or_fail(password),
                email=(email or "").strip() or None,
                role=_role(role),
            )
        except IntegrityError as exc:
            raise ConflictError(DUPLICATE_PHONE_MESSAGE) from exc
        logger.info("Dashboard created account %s", account.id)
        return account.id

    def update_user(
        self,
        account_id: int,
        phone: Optional[str],
        fullname: Optional[str],
        email: Optional[str] = None,
        role: Optional[str] = None,
    ) -> None:
        if not self.accounts.get_by_id(account_id):
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        phone = (phone or "").strip()
        fullname = (fullname or "").strip()
        if not phone or not fullname:
            raise ValidationError("Phone and fullname are required")
        try:
            self.accounts.update_profile(
                account_id,
                phone=phone,
                fullname=fullname,
                email=(email or "").strip() or None,
                role=_role(role),
            )
        except IntegrityError as exc:
            raise ConflictError(DUPLICATE_PHONE_MESSAGE) from exc

    def delete_user(self, account_id: int) -> None:
        if not self.accounts.delete(account_id):
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)

    # -------------------------------------- statistics --------------------------------------
    async def statistics(self, *, now: datetime | None = None) -> dict[str, int]:
        """Count users and readings; all counts run concurrently and fail together."""
        current = now or datetime.now(timezone.utc)
        since = current.astimezone(timezone.utc).replace(tzinfo=None) - RECENT_WINDOW
        try:
            users, astrology, numerology, recent_astrology, recent_numerology = await asyncio.gather(
                asyncio.to_thread(self.accounts.count),
                asyncio.to_thread(self.readings.count_astrology),
                asyncio.to_thread(self.readings.count_numerology),
                asyncio.to_thread(self.readings.count_astrology, since),
                asyncio.to_thread(self.readings.count_numerology, since),
            )
        except SQLAlchemyError as exc:
            logger.error("Statistics error: %s", exc)
            raise StorageError("Failed to retrieve statistics.") from exc
        return {
            "totalUsers": users,
            "totalAstrologyReadings": astrology,
            "totalNumerologyReadings": numerology,
            "totalReadings": astrology + numerology,
            "recentReadings": recent_astrology + recent_numerology,
        }

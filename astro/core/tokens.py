"""
Signed session tokens.

Tokens are stateless: a JWT carrying the account id, phone and role, signed
with the server secret. Expiry is checked against an injectable clock so the
service can be exercised deterministically.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import jwt

from astro.core.errors import InvalidTokenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    """Authenticated identity derived from a verified token."""

    account_id: int
    phone: str
    role: Optional[str]


class TokenService:
    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        ttl_seconds: int = 3600,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def issue(self, account_id: int, phone: str, role: Optional[str]) -> str:
        now = int(self._clock())
        payload = {
            "sub": str(account_id),
            "phone": phone,
            "role": role,
            "iat": now,
            "exp": now + self.ttl_seconds,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Principal:
        """Return the principal embedded in ``token`` or raise InvalidTokenError."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False, "verify_iat": False, "require": ["sub", "exp"]},
            )
        except jwt.InvalidTokenError as exc:
            logger.info("Rejected session token: %s", exc)
            raise InvalidTokenError() from exc
        try:
            expires_at = int(payload["exp"])
            account_id = int(payload["sub"])
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError() from exc
        if self._clock() >= expires_at:
            logger.info("Rejected expired session token for account %s", account_id)
            raise InvalidTokenError()
        return Principal(account_id=account_id, phone=str(payload.get("phone") or ""), role=payload.get("role"))

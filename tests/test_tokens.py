from __future__ import annotations

import jwt
import pytest

from astro.core.errors import InvalidTokenError
from astro.core.tokens import TokenService

SECRET = "test-secret-key-0123456789abcdefghij"


class FakeClock:
    def __init__(self, now: float) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_token_is_valid_until_its_lifetime_elapses():
    clock = FakeClock(1_700_000_000)
    tokens = TokenService(SECRET, ttl_seconds=3600, clock=clock)
    token = tokens.issue(42, "0900000000", "user")

    clock.now += 59 * 60
    principal = tokens.verify(token)
    assert principal.account_id == 42
    assert principal.phone == "0900000000"
    assert principal.role == "user"

    clock.now += 2 * 60
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_token_signed_with_another_secret_is_rejected():
    token = TokenService("another-secret-key-0123456789abcdefgh").issue(1, "0900000000", "admin")
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify(token)


def test_tampered_payload_is_rejected():
    tokens = TokenService(SECRET)
    header, _payload, signature = tokens.issue(1, "0900000000", "user").split(".")
    forged_payload = jwt.encode({"sub": "1", "role": "admin", "exp": 9_999_999_999}, "x" * 32).split(".")[1]
    with pytest.raises(InvalidTokenError):
        tokens.verify(".".join((header, forged_payload, signature)))


def test_garbage_is_rejected():
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify("not-a-token")

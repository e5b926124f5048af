"""Security helpers (hashing and verification)."""

from __future__ import annotations

import functools

import bcrypt
from argon2 import PasswordHasher, exceptions as argon_exc

_ph = PasswordHasher()
_ARGON_PREFIX = "$argon2"
_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(password: str) -> str:
    """Create a salted Argon2 hash."""
    return _ph.hash(password)


@functools.lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return _ph.hash("astro-missing-account")


def verify_dummy(password: str) -> None:
    """Spend one Argon2 verification for a login that has no stored hash."""
    verify_password(password or "-", _dummy_hash())


def is_legacy_hash(stored_hash: str | None) -> bool:
    """True for bcrypt hashes written by the previous backend."""
    return (stored_hash or "").startswith(_BCRYPT_PREFIXES)


def needs_rehash(stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    if is_legacy_hash(stored):
        return True
    if stored.startswith(_ARGON_PREFIX):
        return _ph.check_needs_rehash(stored)
    return False


def verify_password(password: str, stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    if not password or not stored:
        return False
    if stored.startswith(_ARGON_PREFIX):
        try:
            return _ph.verify(stored, password)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
    if is_legacy_hash(stored):
        try:
            return bcrypt.checkpw(password.encode("utf-8"), stored.encode("utf-8"))
        except ValueError:
            return False
    return False

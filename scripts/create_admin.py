#!/usr/bin/env python3
"""
Create an admin account, or promote an existing account to admin.

Usage:
  python scripts/create_admin.py --phone 0900000000 --name "Admin" [--email a@b.c] [--password ...]

A random password is generated (and printed once) when none is given for a new
account. DATABASE_URL and JWT_SECRET are read from the environment.
"""
from __future__ import annotations

import argparse
import secrets
import sys

from astro.core.config import get_settings
from astro.db.session import Database
from astro.repositories.account_repository import AccountRepository
from astro.services.auth_service import MIN_PASSWORD_LENGTH, hash_or_fail


def main() -> None:
    ap = argparse.ArgumentParser(description="Create or promote an admin account")
    ap.add_argument("--phone", required=True, help="Account phone number")
    ap.add_argument("--name", help="Full name (required for a new account)")
    ap.add_argument("--email", help="Optional e-mail")
    ap.add_argument("--password", help="Password (default: random)")
    args = ap.parse_args()

    phone = (args.phone or "").strip()
    if not phone:
        raise SystemExit("Invalid phone")

    database = Database(get_settings().database_url)
    try:
        repo = AccountRepository(database)
        existing = repo.get_by_phone(phone)
        if existing:
            repo.set_role(existing.id, "admin")
            print(f"OK: account {existing.id} ({phone}) promoted to admin")
            return

        name = (args.name or "").strip()
        if not name:
            raise SystemExit("--name is required for a new account")
        password = args.password or secrets.token_urlsafe(12)
        if len(password) < MIN_PASSWORD_LENGTH:
            raise SystemExit(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        account = repo.create(phone, name, hash_or_fail(password), email=(args.email or "").strip() or None, role="admin")
        print("OK: admin account created")
        print(f"  ID: {account.id}")
        print(f"  Phone: {phone}")
        if not args.password:
            print(f"  Password: {password}")
    finally:
        database.dispose()


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)

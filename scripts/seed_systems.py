#!/usr/bin/env python3
"""
Create the schema and register one system record per meaning table.

Usage:
  python scripts/seed_systems.py

Existing system records are kept; only missing categories are added, in the
canonical order (which is also the order of the meaning lists in the API).
"""
from __future__ import annotations

import sys

from astro.core.config import get_settings
from astro.db.session import Database
from astro.domain.categories import NumerologyCategory, Planet
from astro.repositories.catalog_repository import CatalogRepository


def _seed(repo: CatalogRepository, kind, categories) -> int:
    known = {(system.name or "").strip().lower() for system in repo.list_systems(kind)}
    added = 0
    for category in categories:
        if category.value in known:
            continue
        repo.create_system(kind, category.value, category.value.replace("_", " ").title())
        added += 1
    return added


def main() -> None:
    database = Database(get_settings().database_url)
    try:
        database.create_all()
        repo = CatalogRepository(database)
        astro_added = _seed(repo, "astrology", list(Planet))
        numero_added = _seed(repo, "numerology", list(NumerologyCategory))
        print(f"OK: {astro_added} astrology and {numero_added} numerology systems added")
    finally:
        database.dispose()


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)

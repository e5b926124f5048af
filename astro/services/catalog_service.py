"""Legacy system metadata (the ``astrology`` and ``numerology`` tables)."""
from __future__ import annotations

import logging

from astro.core.errors import NotFoundError, ValidationError
from astro.repositories.catalog_repository import CatalogRepository, SystemKind

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, catalog: CatalogRepository) -> None:
        self.catalog = catalog

    def list_systems(self, kind: SystemKind) -> list[dict]:
        return [
            {"id": system.id, "name": system.name, "description": system.description}
            for system in self.catalog.list_systems(kind)
        ]

    def create_system(self, kind: SystemKind, name: str | None, description: str | None) -> int:
        name = (name or "").strip()
        if not name or not description:
            raise ValidationError("Name and description are required.")
        system_id = self.catalog.create_system(kind, name, description)
        logger.info("Created %s system %s (%s)", kind, system_id, name)
        return system_id

    def update_system(self, kind: SystemKind, system_id: int, name: str | None, description: str | None) -> None:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Name is required.")
        if not self.catalog.update_system(kind, system_id, name, description):
            raise NotFoundError("System not found.")

    def delete_system(self, kind: SystemKind, system_id: int) -> None:
        if not self.catalog.delete_system(kind, system_id):
            raise NotFoundError("System not found.")

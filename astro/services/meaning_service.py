"""
Meaning lookups across the per-category tables.

Reads fan out over every system record concurrently. A lookup that fails, or a
system whose name is not a known category, degrades to an empty meaning
instead of failing the whole request. Only a failure to read the system list
itself is surfaced to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Sequence, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from astro.core.errors import NotFoundError, StorageError, ValidationError
from astro.domain.categories import NumerologyCategory, Planet
from astro.repositories.catalog_repository import CatalogRepository, SystemKind, SystemRecord
from astro.repositories.meaning_repository import MeaningRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

EMPTY_MEANING: tuple[str, str] = ("", "")


async def gather_degraded(calls: Sequence[Callable[[], T]], default: T, *, label: str) -> list[T]:
    """Run blocking ``calls`` concurrently; a failing call yields ``default``."""

    async def run(index: int, call: Callable[[], T]) -> T:
        try:
            return await asyncio.to_thread(call)
        except Exception:
            logger.warning("%s lookup #%d failed; using empty value", label, index, exc_info=True)
            return default

    return list(await asyncio.gather(*(run(i, call) for i, call in enumerate(calls))))


class MeaningService:
    def __init__(self, meanings: MeaningRepository, catalog: CatalogRepository) -> None:
        self.meanings = meanings
        self.catalog = catalog

    async def _systems(self, kind: SystemKind) -> list[SystemRecord]:
        try:
            systems = await asyncio.to_thread(self.catalog.list_systems, kind)
        except SQLAlchemyError as exc:
            logger.error("Failed to read %s systems: %s", kind, exc)
            raise StorageError("Failed to retrieve systems.") from exc
        return sorted(systems, key=lambda system: system.id)

    # -------------------------------------- astrology --------------------------------------
    def _zodiac_lookup(self, system: SystemRecord, zodiac: str) -> Callable[[], str]:
        def lookup() -> str:
            planet = Planet.parse(system.name)
            if planet is None:
                logger.warning("Astrology system %s (%r) has no meaning table", system.id, system.name)
                return ""
            return self.meanings.get_zodiac_meaning(planet, zodiac) or ""

        return lookup

    async def astrology_meanings(self, zodiac: str) -> list[str]:
        systems = await self._systems("astrology")
        calls = [self._zodiac_lookup(system, zodiac) for system in systems]
        return await gather_degraded(calls, "", label="astrology meaning")

    def interpretation(self, planet_name: str, zodiac: str) -> str:
        planet = Planet.parse(planet_name)
        if planet is None:
            raise ValidationError("Invalid planet name")
        description = self.meanings.get_zodiac_meaning(planet, zodiac)
        if description is None:
            raise NotFoundError(
                "No interpretation found",
                details={"description": f"No interpretation found for {planet_name} in {zodiac}"},
            )
        return description

    async def save_astrology_meanings(self, zodiac: str, meanings: Sequence[str]) -> tuple[int, int]:
        systems = await self._systems("astrology")

        def upsert(system: SystemRecord, meaning: str) -> Callable[[], bool]:
            def call() -> bool:
                planet = Planet.parse(system.name)
                if planet is None:
                    logger.warning("Skipping astrology system %s (%r): unknown table", system.id, system.name)
                    return False
                self.meanings.upsert_zodiac_meaning(planet, zodiac, meaning)
                return True

            return call

        calls = [upsert(system, _nth(meanings, index)) for index, system in enumerate(systems)]
        results = await gather_degraded(calls, False, label="astrology meaning upsert")
        return sum(1 for ok in results if ok), len(systems)

    # -------------------------------------- numerology --------------------------------------
    def _number_lookup(self, system: SystemRecord, number: int) -> Callable[[], str]:
        def lookup() -> str:
            category = NumerologyCategory.parse(system.name)
            if category is None:
                logger.warning("Numerology system %s (%r) has no meaning table", system.id, system.name)
                return ""
            found = self.meanings.get_number_meaning(category, number)
            return found[1] if found else ""

        return lookup

    async def numerology_meanings(self, number: int) -> list[str]:
        systems = await self._systems("numerology")
        calls = [self._number_lookup(system, number) for system in systems]
        return await gather_degraded(calls, "", label="numerology meaning")

    async def save_numerology_meanings(self, number: int, meanings: Sequence[str]) -> tuple[int, int]:
        systems = await self._systems("numerology")

        def upsert(system: SystemRecord, meaning: str) -> Callable[[], bool]:
            def call() -> bool:
                category = NumerologyCategory.parse(system.name)
                if category is None:
                    logger.warning("Skipping numerology system %s (%r): unknown table", system.id, system.name)
                    return False
                self.meanings.upsert_number_meaning(category, number, meaning)
                return True

            return call

        calls = [upsert(system, _nth(meanings, index)) for index, system in enumerate(systems)]
        results = await gather_degraded(calls, False, label="numerology meaning upsert")
        return sum(1 for ok in results if ok), len(systems)

    async def number_meanings(
        self, requests: Sequence[tuple[NumerologyCategory, Optional[int]]]
    ) -> list[tuple[str, str]]:
        """Resolve (title, description) for each (category, number) pair."""

        def lookup(category: NumerologyCategory, number: Optional[int]) -> Callable[[], tuple[str, str]]:
            def call() -> tuple[str, str]:
                if number is None:
                    return EMPTY_MEANING
                return self.meanings.get_number_meaning(category, number) or EMPTY_MEANING

            return call

        calls = [lookup(category, number) for category, number in requests]
        return await gather_degraded(calls, EMPTY_MEANING, label="numerology number")

    def delete_numerology_meaning(self, table: str, number: int) -> None:
        category = NumerologyCategory.parse(table)
        if category is None or category.value != table:
            raise ValidationError("Invalid table name.")
        if not self.meanings.delete_number_meaning(category, number):
            raise NotFoundError("Meaning not found.")


def _nth(meanings: Sequence[str], index: int) -> str:
    if index < len(meanings):
        return meanings[index] or ""
    return ""

"""
Reading recorder: persists computed astrology and numerology results.

Phone numbers are a soft link to ``account``. A reading submitted with a phone
that is not registered (or that cannot be checked) is still stored, only
without the phone association.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError

from astro.core.errors import NotFoundError, ValidationError
from astro.db.models import AstrologyReading, NumerologyReading
from astro.domain.categories import READING_PLANETS, NumerologyCategory
from astro.repositories.account_repository import AccountRepository
from astro.repositories.reading_repository import ReadingRepository
from astro.services.meaning_service import MeaningService

logger = logging.getLogger(__name__)

ASTROLOGY_REQUIRED = ("date", "sun", "moon", "ascendant")

# (request key, response prefix, table column, meaning category)
NUMBER_FIELDS = (
    ("lifePathNumber", "lifePath", "lifepath_number", NumerologyCategory.LIFE_PATH),
    ("destinyNumber", "destiny", "destiny_number", NumerologyCategory.DESTINY),
    ("soulUrgeNumber", "soulUrge", "soulurge_number", NumerologyCategory.SOUL_URGE),
    ("personalityNumber", "personality", "personality_number", NumerologyCategory.PERSONALITY),
    ("naturalAbilityNumber", "naturalAbility", "naturalability_number", NumerologyCategory.NATURAL_ABILITY),
    ("maturityNumber", "maturity", "maturity_number", NumerologyCategory.MATURITY),
    ("attitudeNumber", "attitude", "attitude_number", NumerologyCategory.ATTITUDE),
)
CHALLENGE_FIELDS = (
    ("challenge1", "challenge_number_1"),
    ("challenge2", "challenge_number_2"),
    ("challenge3", "challenge_number_3"),
    ("challenge4", "challenge_number_4"),
)

SAVE_WARNING = "Result calculated successfully but could not be saved to history"


def astrology_to_dict(reading: AstrologyReading) -> dict[str, Any]:
    data: dict[str, Any] = {"ResultID": reading.id, "PhoneNumber": reading.phone_number, "date": reading.date}
    for planet in READING_PLANETS:
        data[planet.value] = getattr(reading, planet.value)
    data["created_at"] = reading.created_at
    return data


def numerology_to_dict(reading: NumerologyReading) -> dict[str, Any]:
    data: dict[str, Any] = {"ResultID": reading.id, "PhoneNumber": reading.phone_number}
    for _key, _prefix, column, _category in NUMBER_FIELDS:
        data[column] = getattr(reading, column)
    for _key, column in CHALLENGE_FIELDS:
        data[column] = getattr(reading, column)
    data["date"] = reading.date
    data["challenge_numbers"] = {key: getattr(reading, column) for key, column in CHALLENGE_FIELDS}
    return data


class ReadingService:
    def __init__(self, readings: ReadingRepository, accounts: AccountRepository, meanings: MeaningService) -> None:
        self.readings = readings
        self.accounts = accounts
        self.meanings = meanings

    def _linked_phone(self, phone: Optional[str]) -> Optional[str]:
        """Return ``phone`` when it belongs to an account, otherwise None."""
        phone = (phone or "").strip()
        if not phone:
            return None
        try:
            exists = self.accounts.phone_exists(phone)
        except SQLAlchemyError as exc:
            logger.warning("Could not check account for phone %s, saving without it: %s", phone, exc)
            return None
        if not exists:
            logger.info("Phone number %s not found in account table, saving without phone number", phone)
            return None
        return phone

    # -------------------------------------- astrology --------------------------------------
    def save_astrology(self, payload: dict[str, Any]) -> dict[str, Any]:
        if any(not payload.get(field) for field in ASTROLOGY_REQUIRED):
            raise ValidationError("Missing required fields", details={"required": list(ASTROLOGY_REQUIRED)})
        phone = self._linked_phone(payload.get("PhoneNumber"))
        placements = {planet.value: payload.get(planet.value) for planet in READING_PLANETS}
        reading_id = self.readings.create_astrology(phone, str(payload["date"]), placements)
        logger.info("Astrology reading %s saved", reading_id)
        return {
            "message": "User astrology results saved successfully",
            "id": reading_id,
            "data": {"PhoneNumber": phone, "date": payload["date"], **placements},
        }

    def list_astrology(self) -> list[dict[str, Any]]:
        return [astrology_to_dict(reading) for reading in self.readings.list_astrology()]

    def astrology_by_phone(self, phone: str) -> list[dict[str, Any]]:
        return [astrology_to_dict(reading) for reading in self.readings.astrology_by_phone(phone)]

    def get_astrology(self, reading_id: int) -> dict[str, Any]:
        reading = self.readings.get_astrology(reading_id)
        if not reading:
            raise NotFoundError("Astrology reading not found")
        return astrology_to_dict(reading)

    def delete_astrology(self, reading_id: int) -> None:
        if not self.readings.delete_astrology(reading_id):
            raise NotFoundError("User result not found.")

    # -------------------------------------- numerology --------------------------------------
    async def calculate(
        self,
        full_name: Optional[str],
        date: Optional[str],
        numbers: Optional[dict[str, Any]],
        phone: Optional[str],
    ) -> dict[str, Any]:
        """Enrich the client-computed numbers with their meanings and record them."""
        if not full_name or not date or not numbers:
            raise ValidationError("Missing required fields.")

        requests = [(category, numbers.get(key)) for key, _prefix, _column, category in NUMBER_FIELDS]
        requests += [(NumerologyCategory.CHALLENGE, numbers.get(key)) for key, _column in CHALLENGE_FIELDS]
        found = await self.meanings.number_meanings(requests)

        data: dict[str, Any] = {"fullName": full_name, "date": date, "phoneNumber": phone}
        for (key, prefix, _column, _category), (title, description) in zip(NUMBER_FIELDS, found):
            data[key] = numbers.get(key)
            data[f"{prefix}Title"] = title
            data[f"{prefix}Description"] = description
        challenges: dict[str, Any] = {}
        for (key, _column), (title, description) in zip(CHALLENGE_FIELDS, found[len(NUMBER_FIELDS):]):
            challenges[key] = numbers.get(key)
            challenges[f"{key}Title"] = title
            challenges[f"{key}Description"] = description
        data["challenges"] = challenges

        columns = {column: numbers.get(key) for key, _prefix, column, _category in NUMBER_FIELDS}
        columns.update({column: numbers.get(key) for key, column in CHALLENGE_FIELDS})
        try:
            linked = await asyncio.to_thread(self._linked_phone, phone)
            data["savedResultId"] = await asyncio.to_thread(self.readings.create_numerology, linked, columns)
            logger.info("Numerology result saved with ID: %s", data["savedResultId"])
        except SQLAlchemyError:
            logger.exception("Failed to save numerology result")
            data["saveWarning"] = SAVE_WARNING
        return data

    def history(self, phone: str, *, limit: int = 10, offset: int = 0) -> list[dict[str, Any]]:
        phone = (phone or "").strip()
        if not phone:
            raise ValidationError("Phone number is required.")
        if limit < 0 or offset < 0:
            raise ValidationError("limit and offset must not be negative.")
        rows = self.readings.numerology_by_phone(phone, limit=limit, offset=offset)
        return [numerology_to_dict(reading) for reading in rows]

    def list_numerology(self) -> list[dict[str, Any]]:
        return [numerology_to_dict(reading) for reading in self.readings.list_numerology()]

    def numerology_by_phone(self, phone: str) -> list[dict[str, Any]]:
        return [numerology_to_dict(reading) for reading in self.readings.numerology_by_phone(phone)]

    def get_numerology(self, reading_id: int, *, missing_message: str = "Result not found.") -> dict[str, Any]:
        reading = self.readings.get_numerology(reading_id)
        if not reading:
            raise NotFoundError(missing_message)
        return numerology_to_dict(reading)

    def delete_numerology(self, reading_id: int) -> None:
        if not self.readings.delete_numerology(reading_id):
            raise NotFoundError("Result not found.")

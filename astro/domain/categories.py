"""
Closed sets of meaning categories.

Each astrology planet and each numerology number type owns one lookup table.
Category names coming from requests or from the legacy ``astrology`` /
``numerology`` system records are resolved through these enums; anything
outside them is rejected before it can reach SQL.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class _Category(str, Enum):
    @classmethod
    def parse(cls, value: object) -> Optional["_Category"]:
        key = str(value or "").strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return None


class Planet(_Category):
    SUN = "sun"
    MOON = "moon"
    MERCURY = "mercury"
    VENUS = "venus"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
    NEPTUNE = "neptune"
    PLUTO = "pluto"
    CHIRON = "chiron"
    ASCENDANT = "ascendant"


class NumerologyCategory(_Category):
    LIFE_PATH = "lifepath_number"
    DESTINY = "destiny_number"
    SOUL_URGE = "soulurge_number"
    PERSONALITY = "personality_number"
    NATURAL_ABILITY = "naturalability_number"
    MATURITY = "maturity_number"
    ATTITUDE = "attitude_number"
    CHALLENGE = "challenge_number"


ZODIAC_SIGNS = (
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
)

# Order of the planet columns on an astrology reading.
READING_PLANETS = (
    Planet.ASCENDANT,
    Planet.CHIRON,
    Planet.JUPITER,
    Planet.MARS,
    Planet.MERCURY,
    Planet.MOON,
    Planet.NEPTUNE,
    Planet.PLUTO,
    Planet.SATURN,
    Planet.SUN,
    Planet.VENUS,
)

"""SQLAlchemy models mirroring the existing MySQL schema."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from astro.domain.categories import NumerologyCategory, Planet

from .session import Base


class Account(Base):
    __tablename__ = "account"

    id = Column("idaccount", Integer, primary_key=True, autoincrement=True)
    phone = Column(String(32), unique=True, nullable=False)
    fullname = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    password_hash = Column("password", String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user", server_default="user")


class AstrologySystem(Base):
    __tablename__ = "astrology"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False)
    description = Column(Text, nullable=True)


class NumerologySystem(Base):
    __tablename__ = "numerology"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False)
    description = Column(Text, nullable=True)


class AstrologyReading(Base):
    __tablename__ = "userastrologyresults"

    id = Column("ResultID", Integer, primary_key=True, autoincrement=True)
    phone_number = Column("PhoneNumber", String(32), nullable=True, index=True)
    date = Column(String(64), nullable=False)
    ascendant = Column(String(32), nullable=True)
    chiron = Column(String(32), nullable=True)
    jupiter = Column(String(32), nullable=True)
    mars = Column(String(32), nullable=True)
    mercury = Column(String(32), nullable=True)
    moon = Column(String(32), nullable=True)
    neptune = Column(String(32), nullable=True)
    pluto = Column(String(32), nullable=True)
    saturn = Column(String(32), nullable=True)
    sun = Column(String(32), nullable=True)
    venus = Column(String(32), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class NumerologyReading(Base):
    __tablename__ = "usernumerologyresults"

    id = Column("ResultID", Integer, primary_key=True, autoincrement=True)
    phone_number = Column("PhoneNumber", String(32), nullable=True, index=True)
    lifepath_number = Column(Integer, nullable=True)
    destiny_number = Column(Integer, nullable=True)
    soulurge_number = Column(Integer, nullable=True)
    personality_number = Column(Integer, nullable=True)
    naturalability_number = Column(Integer, nullable=True)
    maturity_number = Column(Integer, nullable=True)
    attitude_number = Column(Integer, nullable=True)
    challenge_number_1 = Column(Integer, nullable=True)
    challenge_number_2 = Column(Integer, nullable=True)
    challenge_number_3 = Column(Integer, nullable=True)
    challenge_number_4 = Column(Integer, nullable=True)
    date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


# -------------------------- meaning tables --------------------------
class ZodiacMeaning:
    """Columns shared by the per-planet tables (zodiac sign -> description)."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    zodiac_sign = Column("ZodiacSign", String(32), unique=True, nullable=False)
    description = Column("Description", Text, nullable=True)


class NumberMeaning:
    """Columns shared by the numerology tables (number -> title, description)."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    number = Column("Number", Integer, unique=True, nullable=False)
    title = Column("Title", String(255), nullable=True)
    description = Column("Description", Text, nullable=True)


class SunMeaning(ZodiacMeaning, Base):
    __tablename__ = "sun"


class MoonMeaning(ZodiacMeaning, Base):
    __tablename__ = "moon"


class MercuryMeaning(ZodiacMeaning, Base):
    __tablename__ = "mercury"


class VenusMeaning(ZodiacMeaning, Base):
    __tablename__ = "venus"


class MarsMeaning(ZodiacMeaning, Base):
    __tablename__ = "mars"


class JupiterMeaning(ZodiacMeaning, Base):
    __tablename__ = "jupiter"


class SaturnMeaning(ZodiacMeaning, Base):
    __tablename__ = "saturn"


class NeptuneMeaning(ZodiacMeaning, Base):
    __tablename__ = "neptune"


class PlutoMeaning(ZodiacMeaning, Base):
    __tablename__ = "pluto"


class ChironMeaning(ZodiacMeaning, Base):
    __tablename__ = "chiron"


class AscendantMeaning(ZodiacMeaning, Base):
    __tablename__ = "ascendant"


class LifePathMeaning(NumberMeaning, Base):
    __tablename__ = "lifepath_number"


class DestinyMeaning(NumberMeaning, Base):
    __tablename__ = "destiny_number"


class SoulUrgeMeaning(NumberMeaning, Base):
    __tablename__ = "soulurge_number"


class PersonalityMeaning(NumberMeaning, Base):
    __tablename__ = "personality_number"


class NaturalAbilityMeaning(NumberMeaning, Base):
    __tablename__ = "naturalability_number"


class MaturityMeaning(NumberMeaning, Base):
    __tablename__ = "maturity_number"


class AttitudeMeaning(NumberMeaning, Base):
    __tablename__ = "attitude_number"


class ChallengeMeaning(NumberMeaning, Base):
    __tablename__ = "challenge_number"


PLANET_MODELS = {
    Planet.SUN: SunMeaning,
    Planet.MOON: MoonMeaning,
    Planet.MERCURY: MercuryMeaning,
    Planet.VENUS: VenusMeaning,
    Planet.MARS: MarsMeaning,
    Planet.JUPITER: JupiterMeaning,
    Planet.SATURN: SaturnMeaning,
    Planet.NEPTUNE: NeptuneMeaning,
    Planet.PLUTO: PlutoMeaning,
    Planet.CHIRON: ChironMeaning,
    Planet.ASCENDANT: AscendantMeaning,
}

NUMEROLOGY_MODELS = {
    NumerologyCategory.LIFE_PATH: LifePathMeaning,
    NumerologyCategory.DESTINY: DestinyMeaning,
    NumerologyCategory.SOUL_URGE: SoulUrgeMeaning,
    NumerologyCategory.PERSONALITY: PersonalityMeaning,
    NumerologyCategory.NATURAL_ABILITY: NaturalAbilityMeaning,
    NumerologyCategory.MATURITY: MaturityMeaning,
    NumerologyCategory.ATTITUDE: AttitudeMeaning,
    NumerologyCategory.CHALLENGE: ChallengeMeaning,
}

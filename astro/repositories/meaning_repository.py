"""Per-category meaning tables (zodiac sign or number -> meaning)."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import delete, select, update

from astro.db.models import NUMEROLOGY_MODELS, PLANET_MODELS
from astro.db.session import Database
from astro.domain.categories import NumerologyCategory, Planet


class MeaningRepository:
    """Table selection goes through the closed category maps only."""

    def __init__(self, database: Database) -> None:
        self.db = database

    # -------------------------- astrology --------------------------
    def get_zodiac_meaning(self, planet: Planet, zodiac: str) -> Optional[str]:
        model = PLANET_MODELS[planet]
        with self.db.session() as session:
            stmt = select(model.description).where(model.zodiac_sign == zodiac).limit(1)
            row = session.execute(stmt).first()
            if row is None:
                return None
            return row[0] or ""

    def upsert_zodiac_meaning(self, planet: Planet, zodiac: str, description: str) -> None:
        model = PLANET_MODELS[planet]
        with self.db.session() as session:
            stmt = update(model).where(model.zodiac_sign == zodiac).values(description=description)
            result = session.execute(stmt)
            if result.rowcount == 0:
                session.add(model(zodiac_sign=zodiac, description=description))
            session.commit()

    # -------------------------- numerology --------------------------
    def get_number_meaning(self, category: NumerologyCategory, number: int) -> Optional[tuple[str, str]]:
        model = NUMEROLOGY_MODELS[category]
        with self.db.session() as session:
            stmt = select(model.title, model.description).where(model.number == number).limit(1)
            row = session.execute(stmt).first()
            if row is None:
                return None
            return row[0] or "", row[1] or ""

    def upsert_number_meaning(
        self,
        category: NumerologyCategory,
        number: int,
        description: str,
        title: str | None = None,
    ) -> None:
        model = NUMEROLOGY_MODELS[category]
        values = {"description": description}
        if title is not None:
            values["title"] = title
        with self.db.session() as session:
            result = session.execute(update(model).where(model.number == number).values(**values))
            if result.rowcount == 0:
                session.add(model(number=number, **values))
            session.commit()

    def delete_number_meaning(self, category: NumerologyCategory, number: int) -> bool:
        model = NUMEROLOGY_MODELS[category]
        with self.db.session() as session:
            result = session.execute(delete(model).where(model.number == number))
            session.commit()
            return result.rowcount > 0

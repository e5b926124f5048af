"""Persisted astrology and numerology readings."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, func, select

from astro.db.models import AstrologyReading, NumerologyReading
from astro.db.session import Database


class ReadingRepository:
    def __init__(self, database: Database) -> None:
        self.db = database

    # -------------------------- astrology --------------------------
    def create_astrology(self, phone: Optional[str], date: str, placements: dict[str, Optional[str]]) -> int:
        entity = AstrologyReading(phone_number=phone, date=date, **placements)
        with self.db.session() as session:
            session.add(entity)
            session.commit()
            return int(entity.id)

    def list_astrology(self) -> list[AstrologyReading]:
        with self.db.session() as session:
            stmt = select(AstrologyReading).order_by(AstrologyReading.created_at.desc(), AstrologyReading.id.desc())
            return list(session.execute(stmt).scalars().all())

    def astrology_by_phone(self, phone: str) -> list[AstrologyReading]:
        with self.db.session() as session:
            stmt = (
                select(AstrologyReading)
                .where(AstrologyReading.phone_number == phone)
                .order_by(AstrologyReading.created_at.desc(), AstrologyReading.id.desc())
            )
            return list(session.execute(stmt).scalars().all())

    def get_astrology(self, reading_id: int) -> Optional[AstrologyReading]:
        with self.db.session() as session:
            return session.get(AstrologyReading, reading_id)

    def delete_astrology(self, reading_id: int) -> bool:
        with self.db.session() as session:
            result = session.execute(delete(AstrologyReading).where(AstrologyReading.id == reading_id))
            session.commit()
            return result.rowcount > 0

    def count_astrology(self, since: datetime | None = None) -> int:
        stmt = select(func.count()).select_from(AstrologyReading)
        if since is not None:
            stmt = stmt.where(AstrologyReading.created_at >= since)
        with self.db.session() as session:
            return int(session.execute(stmt).scalar_one())

    # -------------------------- numerology --------------------------
    def create_numerology(self, phone: Optional[str], numbers: dict[str, Optional[int]]) -> int:
        entity = NumerologyReading(phone_number=phone, **numbers)
        with self.db.session() as session:
            session.add(entity)
            session.commit()
            return int(entity.id)

    def list_numerology(self) -> list[NumerologyReading]:
        with self.db.session() as session:
            stmt = select(NumerologyReading).order_by(NumerologyReading.date.desc(), NumerologyReading.id.desc())
            return list(session.execute(stmt).scalars().all())

    def numerology_by_phone(self, phone: str, *, limit: int | None = None, offset: int = 0) -> list[NumerologyReading]:
        stmt = (
            select(NumerologyReading)
            .where(NumerologyReading.phone_number == phone)
            .order_by(NumerologyReading.date.desc(), NumerologyReading.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit).offset(offset)
        elif offset:
            stmt = stmt.offset(offset)
        with self.db.session() as session:
            return list(session.execute(stmt).scalars().all())

    def get_numerology(self, reading_id: int) -> Optional[NumerologyReading]:
        with self.db.session() as session:
            return session.get(NumerologyReading, reading_id)

    def delete_numerology(self, reading_id: int) -> bool:
        with self.db.session() as session:
            result = session.execute(delete(NumerologyReading).where(NumerologyReading.id == reading_id))
            session.commit()
            return result.rowcount > 0

    def count_numerology(self, since: datetime | None = None) -> int:
        stmt = select(func.count()).select_from(NumerologyReading)
        if since is not None:
            stmt = stmt.where(NumerologyReading.date >= since)
        with self.db.session() as session:
            return int(session.execute(stmt).scalar_one())

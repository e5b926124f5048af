"""Legacy ``astrology`` / ``numerology`` system records."""
from __future__ import annotations

from typing import Literal, Optional, Union

from sqlalchemy import delete, select, update

from astro.db.models import AstrologySystem, NumerologySystem
from astro.db.session import Database

SystemKind = Literal["astrology", "numerology"]
SystemRecord = Union[AstrologySystem, NumerologySystem]

SYSTEM_MODELS = {
    "astrology": AstrologySystem,
    "numerology": NumerologySystem,
}


class CatalogRepository:
    def __init__(self, database: Database) -> None:
        self.db = database

    @staticmethod
    def _model(kind: SystemKind):
        try:
            return SYSTEM_MODELS[kind]
        except KeyError:
            raise ValueError(f"Unknown system kind: {kind}") from None

    def list_systems(self, kind: SystemKind) -> list[SystemRecord]:
        model = self._model(kind)
        with self.db.session() as session:
            return list(session.execute(select(model).order_by(model.id)).scalars().all())

    def get_system(self, kind: SystemKind, system_id: int) -> Optional[SystemRecord]:
        with self.db.session() as session:
            return session.get(self._model(kind), system_id)

    def create_system(self, kind: SystemKind, name: str, description: str) -> int:
        entity = self._model(kind)(name=name, description=description)
        with self.db.session() as session:
            session.add(entity)
            session.commit()
            return int(entity.id)

    def update_system(self, kind: SystemKind, system_id: int, name: str | None, description: str | None) -> bool:
        model = self._model(kind)
        with self.db.session() as session:
            stmt = update(model).where(model.id == system_id).values(name=name, description=description)
            result = session.execute(stmt)
            session.commit()
            return result.rowcount > 0

    def delete_system(self, kind: SystemKind, system_id: int) -> bool:
        model = self._model(kind)
        with self.db.session() as session:
            result = session.execute(delete(model).where(model.id == system_id))
            session.commit()
            return result.rowcount > 0

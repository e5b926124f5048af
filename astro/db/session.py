"""Engine/session lifecycle for the SQL backend."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()

logger = logging.getLogger(__name__)


class Database:
    """Owns one engine and its session factory; passed explicitly to repositories."""

    def __init__(self, url: str, *, echo: bool = False) -> None:
        url = (url or "").strip()
        if not url:
            raise RuntimeError("A database URL is required.")
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.engine: Engine = create_engine(url, future=True, pool_pre_ping=True, echo=echo, connect_args=connect_args)
        self._sessionmaker = sessionmaker(bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)

    @contextmanager
    def session(self) -> Iterator[Session]:
        session: Session = self._sessionmaker()
        try:
            yield session
        finally:
            session.close()

    def create_all(self) -> None:
        from . import models  # noqa: F401  # register tables on Base.metadata

        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        from . import models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")

"""Database helpers (engine/session lifecycle and models)."""

from .session import Base, Database

__all__ = ["Base", "Database"]

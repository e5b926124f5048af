"""
Persistence adapters.

Each repository receives the application's Database and wraps one group of
tables. Services depend on repositories rather than on SQLAlchemy sessions.
"""

from .account_repository import AccountRepository
from .catalog_repository import CatalogRepository
from .meaning_repository import MeaningRepository
from .reading_repository import ReadingRepository

__all__ = ["AccountRepository", "CatalogRepository", "MeaningRepository", "ReadingRepository"]

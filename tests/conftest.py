from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Makes the astro package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from astro.app import create_app  # noqa: E402
from astro.core.config import Settings  # noqa: E402
from astro.core.security import hash_password  # noqa: E402
from astro.db.session import Database  # noqa: E402
from astro.repositories import AccountRepository, CatalogRepository, MeaningRepository, ReadingRepository  # noqa: E402

TEST_SECRET = "test-secret-key-0123456789abcdefghij"
ADMIN_PHONE = "0999999999"
ADMIN_PASSWORD = "admin-password"


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        jwt_secret=TEST_SECRET,
        rate_limit_enabled=False,
    )


@pytest.fixture()
def database(settings):
    """Temporary SQLite schema; disposed on teardown so the file is not left locked."""
    db = Database(settings.database_url)
    db.create_all()
    yield db
    db.drop_all()
    db.dispose()


@pytest.fixture()
def accounts(database) -> AccountRepository:
    return AccountRepository(database)


@pytest.fixture()
def readings_repo(database) -> ReadingRepository:
    return ReadingRepository(database)


@pytest.fixture()
def catalog_repo(database) -> CatalogRepository:
    return CatalogRepository(database)


@pytest.fixture()
def meaning_repo(database) -> MeaningRepository:
    return MeaningRepository(database)


@pytest.fixture()
def app(settings, database):
    return create_app(settings, database=database)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def signup(client, phone="0900000000", password="password123", fullname="Test User"):
    return client.post(
        "/api/auth/signup",
        json={"phone": phone, "fullname": fullname, "password": password, "confirmPassword": password},
    )


def login(client, phone="0900000000", password="password123"):
    return client.post("/api/auth/login", json={"phone": phone, "password": password})


@pytest.fixture()
def admin_client(client, accounts):
    accounts.create(ADMIN_PHONE, "Admin", hash_password(ADMIN_PASSWORD), role="admin")
    response = login(client, ADMIN_PHONE, ADMIN_PASSWORD)
    assert response.status_code == 200
    return client

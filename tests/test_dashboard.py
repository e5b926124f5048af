from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from astro.core.errors import ConflictError, ValidationError
from astro.services.dashboard_service import DashboardService
from tests.conftest import login, signup


@pytest.fixture()
def dashboard(accounts, readings_repo) -> DashboardService:
    return DashboardService(accounts, readings_repo)


def test_dashboard_requires_admin(client):
    assert client.get("/api/dashboard/statistics").status_code == 401

    signup(client)
    login(client)
    response = client.get("/api/dashboard/users")
    assert response.status_code == 403
    assert response.json() == {"error": "Admin access required."}


def test_statistics_counts_users_and_readings(admin_client, readings_repo):
    signup(admin_client, phone="0900000001")
    readings_repo.create_astrology(None, "1990-01-01", {"sun": "Capricorn"})
    readings_repo.create_numerology(None, {"lifepath_number": 1})
    readings_repo.create_numerology(None, {"lifepath_number": 2})

    response = admin_client.get("/api/dashboard/statistics")

    assert response.status_code == 200
    assert response.json() == {
        "totalUsers": 2,
        "totalAstrologyReadings": 1,
        "totalNumerologyReadings": 2,
        "totalReadings": 3,
        "recentReadings": 3,
    }


def test_recent_readings_use_a_seven_day_window(dashboard, readings_repo):
    readings_repo.create_astrology(None, "1990-01-01", {"sun": "Capricorn"})
    readings_repo.create_numerology(None, {"lifepath_number": 1})

    later = datetime.now(timezone.utc) + timedelta(days=30)
    stats = asyncio.run(dashboard.statistics(now=later))

    assert stats["totalReadings"] == 2
    assert stats["recentReadings"] == 0


def test_user_crud(admin_client, accounts):
    response = admin_client.post(
        "/api/dashboard/users",
        json={"phone": "0911111111", "fullname": "Created", "password": "password123", "email": "c@example.com"},
    )
    assert response.status_code == 201
    user_id = response.json()["userId"]
    assert accounts.get_by_id(user_id).password_hash.startswith("$argon2")

    user = admin_client.get(f"/api/dashboard/users/{user_id}").json()
    assert user == {
        "idaccount": user_id,
        "phone": "0911111111",
        "fullname": "Created",
        "email": "c@example.com",
        "role": "user",
    }
    assert admin_client.get("/api/dashboard/users/phone/0911111111").json()["idaccount"] == user_id

    response = admin_client.put(f"/api/dashboard/users/{user_id}", json={"phone": "0911111112", "fullname": "Renamed", "role": "admin"})
    assert response.status_code == 200
    assert accounts.get_by_id(user_id).role == "admin"

    assert admin_client.delete(f"/api/dashboard/users/{user_id}").status_code == 200
    assert admin_client.get(f"/api/dashboard/users/{user_id}").status_code == 404


def test_duplicate_phone_is_a_conflict(admin_client):
    payload = {"phone": "0911111111", "fullname": "One", "password": "password123"}
    assert admin_client.post("/api/dashboard/users", json=payload).status_code == 201

    response = admin_client.post("/api/dashboard/users", json=payload)
    assert response.status_code == 409
    assert response.json() == {"error": "Phone number already exists"}


def test_unknown_role_is_rejected(dashboard):
    with pytest.raises(ValidationError, match="Role must be one of"):
        dashboard.create_user("0911111111", "One", "password123", role="root")


def test_update_to_taken_phone_conflicts(dashboard):
    first = dashboard.create_user("0911111111", "One", "password123")
    dashboard.create_user("0922222222", "Two", "password123")
    with pytest.raises(ConflictError):
        dashboard.update_user(first, "0922222222", "One")

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from astro.domain.categories import NumerologyCategory
from tests.conftest import signup

PLACEMENTS = {
    "date": "1990-08-01",
    "sun": "Leo",
    "moon": "Pisces",
    "ascendant": "Virgo",
    "venus": "Cancer",
}

NUMBERS = {
    "lifePathNumber": 7,
    "destinyNumber": 3,
    "soulUrgeNumber": 5,
    "personalityNumber": 8,
    "naturalAbilityNumber": 1,
    "maturityNumber": 1,
    "attitudeNumber": 9,
    "challenge1": 2,
    "challenge2": 0,
    "challenge3": 2,
    "challenge4": 4,
}


def test_astrology_reading_keeps_phone_of_registered_account(client):
    signup(client)
    response = client.post("/api/astrology/save-results", json={"PhoneNumber": "0900000000", **PLACEMENTS})
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User astrology results saved successfully"
    assert body["data"]["PhoneNumber"] == "0900000000"

    response = client.get("/api/astrology/user-results/0900000000")
    assert response.status_code == 200
    [reading] = response.json()
    assert reading["ResultID"] == body["id"]
    assert reading["sun"] == "Leo"
    assert reading["mercury"] is None


def test_astrology_reading_with_unknown_phone_is_saved_without_it(client):
    response = client.post("/api/astrology/save-results", json={"PhoneNumber": "0987654321", **PLACEMENTS})
    assert response.status_code == 201
    reading_id = response.json()["id"]

    reading = client.get(f"/api/astrology/readings/{reading_id}").json()
    assert reading["PhoneNumber"] is None
    assert client.get("/api/astrology/user-results/0987654321").status_code == 404


def test_astrology_reading_requires_core_placements(client):
    response = client.post("/api/astrology/save-results", json={"date": "1990-08-01", "sun": "Leo"})
    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields"


def test_delete_astrology_reading(client):
    reading_id = client.post("/api/astrology/save-results", json=PLACEMENTS).json()["id"]

    assert client.delete(f"/api/astrology/user-results/{reading_id}").status_code == 200
    response = client.delete(f"/api/astrology/user-results/{reading_id}")
    assert response.status_code == 404
    assert response.json() == {"error": "User result not found."}


def test_calculate_enriches_and_records_numbers(client, meaning_repo):
    signup(client)
    meaning_repo.upsert_number_meaning(NumerologyCategory.LIFE_PATH, 7, "Inward and analytical", title="The Seeker")
    meaning_repo.upsert_number_meaning(NumerologyCategory.CHALLENGE, 4, "Discipline", title="Order")

    response = client.post(
        "/api/numerology/calculate",
        json={"fullName": "Test User", "date": "1990-08-01", "numbers": NUMBERS, "phoneNumber": "0900000000"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    data = payload["data"]
    assert data["lifePathNumber"] == 7
    assert data["lifePathTitle"] == "The Seeker"
    assert data["lifePathDescription"] == "Inward and analytical"
    assert data["destinyTitle"] == ""
    assert data["challenges"]["challenge4Title"] == "Order"
    assert data["challenges"]["challenge1Description"] == ""
    assert "saveWarning" not in data

    saved = client.get(f"/api/numerology/result/{data['savedResultId']}").json()["data"]
    assert saved["PhoneNumber"] == "0900000000"
    assert saved["lifepath_number"] == 7
    assert saved["challenge_numbers"] == {"challenge1": 2, "challenge2": 0, "challenge3": 2, "challenge4": 4}


def test_calculate_still_answers_when_saving_fails(client, app, monkeypatch):
    def broken(*_args, **_kwargs):
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr(app.state.reading_service.readings, "create_numerology", broken)

    response = client.post("/api/numerology/calculate", json={"fullName": "A", "date": "2000-01-01", "numbers": NUMBERS})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["saveWarning"] == "Result calculated successfully but could not be saved to history"
    assert "savedResultId" not in data


def test_calculate_requires_name_date_and_numbers(client):
    response = client.post("/api/numerology/calculate", json={"fullName": "A", "date": "2000-01-01"})
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields."}


def test_history_paginates_newest_first(client, readings_repo):
    signup(client)
    ids = [readings_repo.create_numerology("0900000000", {"lifepath_number": n}) for n in range(1, 6)]

    response = client.get("/api/numerology/history/0900000000", params={"limit": 2, "offset": 1})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert [row["ResultID"] for row in body["data"]] == [ids[3], ids[2]]

    assert client.get("/api/numerology/history/0900000000", params={"limit": -1}).status_code == 400


def test_numerology_result_delete_and_missing(client, readings_repo):
    reading_id = readings_repo.create_numerology(None, {"lifepath_number": 3})

    assert client.delete(f"/api/numerology/result/{reading_id}").status_code == 200
    response = client.get(f"/api/numerology/result/{reading_id}")
    assert response.status_code == 404
    assert response.json() == {"error": "Result not found."}

from __future__ import annotations

import bcrypt
import pytest

from astro.core.errors import AuthError, ConflictError, ValidationError
from astro.core.tokens import TokenService
import astro.services.auth_service as auth_module
from astro.services.auth_service import AuthService
from tests.conftest import TEST_SECRET, login, signup


@pytest.fixture()
def auth_service(accounts, settings) -> AuthService:
    return AuthService(accounts=accounts, tokens=TokenService(TEST_SECRET), settings=settings)


def test_signup_then_login_sets_session_cookie(client):
    response = signup(client)
    assert response.status_code == 201
    assert response.json() == {"message": "User created successfully"}

    response = login(client)
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["userRole"] == "user"
    assert body["token"]

    cookie = response.headers["set-cookie"]
    assert cookie.startswith("access_token=")
    assert "httponly" in cookie.lower()
    assert "samesite=strict" in cookie.lower()
    assert "secure" not in cookie.lower()


def test_duplicate_phone_is_rejected(client):
    assert signup(client).status_code == 201
    response = signup(client, fullname="Someone Else")
    assert response.status_code == 400
    assert response.json() == {"error": "A user with this phone already exists."}


def test_signup_validation_messages(client):
    response = client.post("/api/auth/signup", json={"phone": "0900000000", "password": "password123"})
    assert response.status_code == 400
    assert response.json()["error"] == "Phone, fullname, password, and confirm password are required."

    response = client.post(
        "/api/auth/signup",
        json={"phone": "0900000000", "fullname": "A", "password": "password123", "confirmPassword": "password321"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Passwords do not match."


def test_wrong_password_and_unknown_phone_are_indistinguishable(client):
    signup(client)
    wrong_password = login(client, password="not-the-password")
    unknown_phone = login(client, phone="0911111111")
    assert wrong_password.status_code == unknown_phone.status_code == 400
    assert wrong_password.json() == unknown_phone.json() == {"error": "Invalid credentials"}


def test_profile_requires_a_valid_cookie(client):
    response = client.get("/api/auth/profile")
    assert response.status_code == 401
    assert response.json() == {"error": "Not authenticated."}

    client.cookies.set("access_token", "garbage")
    response = client.get("/api/auth/profile")
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid token."}


def test_profile_returns_public_fields(client):
    signup(client)
    login(client)
    response = client.get("/api/auth/profile")
    assert response.status_code == 200
    body = response.json()
    assert body["phone"] == "0900000000"
    assert body["fullname"] == "Test User"
    assert "password" not in body
    assert "password_hash" not in body


def test_logout_clears_cookie(client):
    signup(client)
    login(client)
    response = client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully."}
    assert client.get("/api/auth/profile").status_code == 401


def test_change_password_enforces_minimum_length(client):
    signup(client)
    login(client)

    response = client.put("/api/auth/change-password", json={"currentPassword": "password123", "newPassword": "1234567"})
    assert response.status_code == 400
    assert response.json() == {"error": "New password must be at least 8 characters."}

    response = client.put("/api/auth/change-password", json={"currentPassword": "wrong-one", "newPassword": "12345678"})
    assert response.status_code == 400
    assert response.json() == {"error": "Current password is incorrect."}

    response = client.put("/api/auth/change-password", json={"currentPassword": "password123", "newPassword": "12345678"})
    assert response.status_code == 200
    assert login(client, password="12345678").status_code == 200
    assert login(client, password="password123").status_code == 400


def test_reset_password_requires_the_verification_code(client):
    signup(client)

    response = client.post("/api/auth/reset-password", json={"phone": "0900000000", "code": "000000", "newPassword": "brand-new-pw"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid verification code."}

    response = client.post("/api/auth/reset-password", json={"phone": "0900000000", "code": 131313, "newPassword": "brand-new-pw"})
    assert response.status_code == 200
    assert login(client, password="brand-new-pw").status_code == 200
    assert login(client).status_code == 400


def test_reset_password_wrong_code_for_unknown_phone_does_not_reveal_account(client):
    response = client.post("/api/auth/reset-password", json={"phone": "0922222222", "code": "999999", "newPassword": "brand-new-pw"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid verification code."}

    response = client.post("/api/auth/reset-password", json={"phone": "0922222222", "code": "131313", "newPassword": "brand-new-pw"})
    assert response.status_code == 404


def test_login_upgrades_legacy_bcrypt_hash(auth_service, accounts):
    legacy = bcrypt.hashpw(b"password123", bcrypt.gensalt(rounds=4)).decode("utf-8")
    account = accounts.create("0933333333", "Legacy", legacy)

    outcome = auth_service.login("0933333333", "password123")

    assert outcome.account_id == account.id
    stored = accounts.get_by_id(account.id).password_hash
    assert stored.startswith("$argon2")
    assert auth_service.login("0933333333", "password123").token


def test_service_rejects_missing_fields(auth_service):
    with pytest.raises(ValidationError):
        auth_service.login("", "password123")
    with pytest.raises(ValidationError):
        auth_service.reset_password("0900000000", "131313", "short")
    with pytest.raises(AuthError):
        auth_service.reset_password("0900000000", "131314", "long-enough")


def test_malformed_body_is_a_400(client):
    response = client.post("/api/auth/login", content=b"{not json", headers={"content-type": "application/json"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request."


def test_concurrent_signup_is_stopped_by_unique_phone(auth_service, accounts, monkeypatch):
    auth_service.signup("0944444444", "First", None, "password123", "password123")
    # Simulate a second request that passed the existence check before the first insert.
    monkeypatch.setattr(accounts, "phone_exists", lambda phone: False)

    with pytest.raises(ConflictError) as excinfo:
        auth_service.signup("0944444444", "Second", None, "password123", "password123")

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "A user with this phone already exists."
    assert accounts.count() == 1
    assert accounts.get_by_phone("0944444444").fullname == "First"


def test_unknown_phone_still_spends_a_password_verification(auth_service, monkeypatch):
    calls = []
    monkeypatch.setattr(auth_module, "verify_dummy", lambda password: calls.append(password))

    with pytest.raises(AuthError, match="Invalid credentials"):
        auth_service.login("0955555555", "password123")

    assert calls == ["password123"]

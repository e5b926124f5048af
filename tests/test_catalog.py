from __future__ import annotations


def test_astrology_system_lifecycle(client):
    response = client.post("/api/astrology", json={"name": "sun", "description": "Sun sign meanings"})
    assert response.status_code == 201
    system_id = response.json()["id"]

    assert client.get("/api/astrology/system").json() == [
        {"id": system_id, "name": "sun", "description": "Sun sign meanings"}
    ]

    response = client.put(f"/api/astrology/{system_id}", json={"name": "sun", "description": "Updated"})
    assert response.status_code == 200
    assert client.get("/api/astrology/system").json()[0]["description"] == "Updated"

    assert client.delete(f"/api/astrology/{system_id}").status_code == 200
    response = client.delete(f"/api/astrology/{system_id}")
    assert response.status_code == 404
    assert response.json() == {"error": "System not found."}


def test_numerology_system_requires_name(client):
    response = client.post("/api/numerology", json={"description": "no name"})
    assert response.status_code == 400
    assert response.json() == {"error": "Name and description are required."}

    response = client.put("/api/numerology/999", json={"name": "destiny_number"})
    assert response.status_code == 404


def test_health_and_security_headers(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"


def test_api_docs_are_served_without_the_strict_policy(client):
    response = client.get("/docs")
    assert response.status_code == 200
    assert "content-security-policy" not in response.headers
    assert response.headers["x-content-type-options"] == "nosniff"

    assert "default-src 'none'" in client.get("/health").headers["content-security-policy"]

from datetime import date

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD


def test_login(client):
    response = client.post("/api/v1/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["email"] == ADMIN_EMAIL
    assert body["access_token"]


def test_login_wrong_password(client):
    response = client.post("/api/v1/admin/login", json={"email": ADMIN_EMAIL, "password": "guess"})

    assert response.status_code == 401


def test_login_wrong_email(client):
    response = client.post(
        "/api/v1/admin/login",
        json={"email": "someone.else@gmail.com", "password": ADMIN_PASSWORD},
    )

    assert response.status_code == 401


def test_summary_requires_admin(client):
    assert client.get("/api/v1/admin/summary").status_code in (401, 403)


def test_summary(client, admin_headers, appointment_payload, order_payload):
    today = date.today().isoformat()
    client.post("/api/v1/appointments", json={**appointment_payload, "date": today, "time": "3:00 PM"})
    cancelled = client.post("/api/v1/appointments", json={**appointment_payload, "date": today, "time": "10:00 AM"})
    client.put(
        "/api/v1/appointments",
        json={"id": cancelled.json()["id"], "status": "Cancelled"},
        headers=admin_headers,
    )
    client.post("/api/v1/appointments", json={**appointment_payload, "date": "2031-01-15", "time": "11:00 AM"})
    client.post("/api/v1/orders", json=order_payload)

    response = client.get("/api/v1/admin/summary", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["appointments"]["total_appointments"] == 3
    assert body["appointments"]["by_status"] == {"Scheduled": 2, "Cancelled": 1}
    assert body["appointments"]["booked_revenue"] == 998
    assert body["orders"]["total_orders"] == 1
    assert body["orders"]["order_revenue"] == 630
    assert body["orders"]["units_sold"] == 3
    assert body["schedule"]["date"] == today
    assert [a["time"] for a in body["schedule"]["appointments"]] == ["3:00 PM"]


def test_rate_limit_on_public_forms(monkeypatch, engine, order_payload):
    from fastapi.testclient import TestClient

    from app.config.settings import settings
    from app.main import create_app

    monkeypatch.setattr(settings, "PUBLIC_RATE_LIMIT_PER_MINUTE", 2)
    client = TestClient(create_app())

    # Rejected payloads still count against the window
    assert client.post("/api/v1/orders", json={}).status_code == 400
    assert client.post("/api/v1/orders", json={}).status_code == 400
    response = client.post("/api/v1/orders", json={})
    assert response.status_code == 429
    assert response.headers["Retry-After"] == "60"

    assert client.get("/api/v1/catalog/products").status_code == 200


def test_catalog_routes(client):
    packages = client.get("/api/v1/catalog/wash-packages").json()
    assert len(packages) == 9

    bike = client.get("/api/v1/catalog/wash-packages/bike").json()
    assert [p["price"] for p in bike] == [150, 300]

    assert client.get("/api/v1/catalog/wash-packages/tractor").status_code == 404

    products = client.get("/api/v1/catalog/products").json()
    assert products["deliveryCharge"] == 50
    assert [p["id"] for p in products["products"]] == ["half-liter", "one-liter"]


def test_health_and_root(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/").json()["status"] == "running"

    response = client.get("/health")
    assert response.headers["X-Correlation-ID"]

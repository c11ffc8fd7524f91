from sqlalchemy.orm import Session

from app.models.order import Order
from conftest import disk_full

URL = "/api/v1/orders"


def test_create_order(client, db_session, order_payload, order_task):
    response = client.post(URL, json=order_payload)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Order created successfully"

    stored = db_session.query(Order).one()
    assert str(stored.id) == body["id"]
    assert stored.status == "Processing"
    assert float(stored.subtotal) == 580
    assert float(stored.delivery_charge) == 50
    assert float(stored.total) == 630
    assert stored.payment_method == "cod"
    assert stored.item_count == 3

    assert len(order_task.calls) == 1
    assert order_task.calls[0]["args"][0]["items"][0]["id"] == "half-liter"


def test_mismatched_total_stored_as_sent(client, db_session, order_payload):
    response = client.post(URL, json={**order_payload, "total": 600})

    assert response.status_code == 200
    assert float(db_session.query(Order).one().total) == 600


def test_missing_fields(client, db_session, order_payload):
    payload = {**order_payload, "items": [], "pincode": ""}
    payload.pop("city")

    response = client.post(URL, json=payload)

    assert response.status_code == 400
    assert response.json() == {
        "error": "Missing required fields",
        "missingFields": ["city", "pincode", "items"],
    }
    assert db_session.query(Order).count() == 0


def test_invalid_item(client, order_payload):
    items = [{"id": "half-liter", "name": "Coconut Oil", "size": "500ml", "price": 150, "quantity": 0}]

    response = client.post(URL, json={**order_payload, "items": items})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid field values"


def test_notification_failure_does_not_fail_order(client, db_session, order_payload, order_task):
    order_task.error = RuntimeError("redis down")

    assert client.post(URL, json=order_payload).status_code == 200
    assert db_session.query(Order).count() == 1


def test_quote(client):
    response = client.post(
        f"{URL}/quote",
        json={"items": [{"id": "half-liter", "quantity": 2}, {"id": "one-liter", "quantity": 1}]},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["subtotal"] == 580
    assert body["deliveryCharge"] == 50
    assert body["total"] == 630
    assert body["items"][0]["lineTotal"] == 300
    assert body["items"][1]["size"] == "1 Liter"


def test_quote_unknown_product(client):
    response = client.post(f"{URL}/quote", json={"items": [{"id": "coconut-milk", "quantity": 1}]})

    assert response.status_code == 400
    assert response.json() == {"error": "Unknown product", "details": "coconut-milk"}


def test_admin_listing_and_update(client, db_session, order_payload, admin_headers):
    assert client.get(URL).status_code in (401, 403)

    first = client.post(URL, json=order_payload).json()["id"]
    second = client.post(URL, json={**order_payload, "paymentMethod": "gpay"}).json()["id"]

    listing = client.get(URL, headers=admin_headers).json()
    assert [o["id"] for o in listing] == [second, first]
    assert listing[0]["paymentMethod"] == "gpay"

    response = client.put(URL, json={"id": first, "status": "Shipped"}, headers=admin_headers)
    assert response.json() == {"success": True, "message": "Order updated successfully"}

    shipped = client.get(URL, params={"status": "Shipped"}, headers=admin_headers).json()
    assert [o["id"] for o in shipped] == [first]

    fetched = client.get(f"{URL}/{first}", headers=admin_headers).json()
    assert fetched["status"] == "Shipped"
    assert fetched["updatedAt"] is not None


def test_update_unknown_order(client, admin_headers):
    response = client.put(URL, json={"id": "missing", "status": "Shipped"}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Order not found"}

    response = client.put(URL, json={"status": "Shipped"}, headers=admin_headers)
    assert response.status_code == 400


def test_store_failure_returns_database_error(client, db_session, order_payload, failing_commit, order_task):
    response = client.post(URL, json=order_payload)

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Database error"
    assert "disk full" in body["details"]
    assert failing_commit
    assert db_session.query(Order).count() == 0
    assert order_task.calls == []


def test_update_lookup_failure_returns_json(client, monkeypatch, admin_headers):
    monkeypatch.setattr(Session, "query", disk_full)

    response = client.put(
        URL,
        json={"id": "6f1c1c1e-8b7a-4a43-9d54-3c0f5f2b1a90", "status": "Shipped"},
        headers=admin_headers,
    )

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Failed to update order"
    assert "disk full" in body["details"]

"""Testy integracyjne endpointow zamowien przez TestClient."""

from decimal import Decimal

import pytest


def _payload(customer_id="c1", **overrides):
    data = {
        "customerId": customer_id,
        "email": "c1@example.com",
        "firstName": "Ada",
        "items": [{"productId": "p1", "name": "Les Paul", "price": "1999.00", "quantity": 1}],
        "subtotal": "1999.00",
        "shippingCost": "0.00",
        "total": "1999.00",
    }
    data.update(overrides)
    return data


@pytest.fixture
def order_id(client):
    return client.post("/orders", json=_payload()).json()["id"]


class TestCreateOrder:
    def test_create_ignores_supplied_status(self, client):
        resp = client.post("/orders", json=_payload(status="SHIPPED"))
        assert resp.status_code == 201
        body = resp.json()
        assert body["status"] == "PENDING"
        assert body["id"]
        assert body["firstName"] == "Ada"
        assert Decimal(body["total"]) == Decimal("1999.00")
        assert body["items"][0]["productId"] == "p1"

    def test_create_rejects_sub_cent_amounts(self, client):
        assert client.post("/orders", json=_payload(total="1999.005")).status_code == 422

    def test_create_requires_email(self, client):
        payload = _payload()
        del payload["email"]
        assert client.post("/orders", json=payload).status_code == 422


class TestQueryOrders:
    def test_get_order(self, client, order_id):
        resp = client.get(f"/orders/{order_id}")
        assert resp.status_code == 200
        assert resp.json()["id"] == order_id

    def test_get_unknown_order(self, client):
        assert client.get("/orders/nope").status_code == 404

    def test_list_orders(self, client, order_id):
        resp = client.get("/orders")
        assert [o["id"] for o in resp.json()] == [order_id]

    def test_list_orders_by_status(self, client, order_id):
        assert [o["id"] for o in client.get("/orders", params={"status": "pending"}).json()] == [order_id]
        assert client.get("/orders", params={"status": "CONFIRMED"}).json() == []

    def test_list_orders_by_bad_status(self, client):
        assert client.get("/orders", params={"status": "bogus"}).status_code == 400

    def test_list_by_customer(self, client, order_id):
        client.post("/orders", json=_payload("c2"))
        resp = client.get("/orders/customer/c1")
        assert [o["id"] for o in resp.json()] == [order_id]


class TestUpdateStatus:
    def test_legal_transition(self, client, order_id):
        resp = client.patch(f"/orders/{order_id}/status", json={"status": "confirmed"})
        assert resp.status_code == 200
        assert resp.json()["status"] == "CONFIRMED"

    def test_unknown_order(self, client):
        resp = client.patch("/orders/unknown-id/status", json={"status": "CONFIRMED"})
        assert resp.status_code == 404
        assert client.get("/orders").json() == []

    def test_invalid_status_token(self, client, order_id):
        resp = client.patch(f"/orders/{order_id}/status", json={"status": "teleported"})
        assert resp.status_code == 400

    def test_missing_status_token(self, client, order_id):
        assert client.patch(f"/orders/{order_id}/status", json={}).status_code == 400

    def test_illegal_transition(self, client, order_id):
        resp = client.patch(f"/orders/{order_id}/status", json={"status": "DELIVERED"})
        assert resp.status_code == 409
        assert client.get(f"/orders/{order_id}").json()["status"] == "PENDING"

"""
Component tests for the HTTP layer.

Routers, services and repositories run for real against the per-test SQLite
session; only redis (in-memory stand-in) and celery (mock) are replaced through
FastAPI dependency overrides.
"""
import pytest
from fastapi.testclient import TestClient

from baglemonster.api.deps import get_lock_service, get_notification_service
from baglemonster.data.database import get_db
from baglemonster.main import app


@pytest.fixture
def client(db_session, lock_service, notifications):
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_lock_service] = lambda: lock_service
    app.dependency_overrides[get_notification_service] = lambda: notifications

    yield TestClient(app)

    app.dependency_overrides.clear()


def as_user(user):
    return {"user_id": user.id}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestCartEndpoints:
    def test_order_flow(self, client, consumer, product, notifications):
        # ARRANGE / ACT: add 2 x 500 to a fresh cart
        response = client.post(
            "/carts/",
            params=as_user(consumer),
            json={"product_id": product.id, "store_id": product.store_id, "quantity": 2},
        )
        assert response.status_code == 201

        cart = client.get("/carts/me", params=as_user(consumer)).json()
        assert cart["status"] == "OPEN"
        assert cart["total_price"] == 1000
        assert cart["items"][0]["quantity"] == 2

        # +1 then -1
        response = client.patch(f"/carts/{cart['cart_id']}/products/{product.id}/add", params=as_user(consumer))
        assert response.status_code == 200
        assert response.json()["quantity"] == 3
        response = client.patch(f"/carts/{cart['cart_id']}/products/{product.id}/subtract", params=as_user(consumer))
        assert response.json()["quantity"] == 2

        # order
        response = client.post(
            f"/carts/{cart['cart_id']}/order",
            params=as_user(consumer),
            json={"delivery_address": "12 Bagel St", "phone_number": "010-0000-0000"},
        )
        assert response.status_code == 200
        assert response.json()["status"] == "ORDERED"
        notifications.send_order_notification.assert_called_once_with(consumer.id, cart["cart_id"])

        # no open cart anymore, but it shows up in the history
        assert client.get("/carts/me", params=as_user(consumer)).status_code == 404
        history = client.get("/carts/", params=as_user(consumer)).json()
        assert [c["cart_id"] for c in history] == [cart["cart_id"]]

    def test_cross_store_is_conflict(self, client, consumer, product, foreign_product):
        client.post(
            "/carts/",
            params=as_user(consumer),
            json={"product_id": product.id, "store_id": product.store_id, "quantity": 2},
        )

        response = client.post(
            "/carts/",
            params=as_user(consumer),
            json={"product_id": foreign_product.id, "store_id": foreign_product.store_id, "quantity": 1},
        )

        assert response.status_code == 409
        assert client.get("/carts/me", params=as_user(consumer)).json()["total_price"] == 1000

    def test_foreign_cart_is_forbidden(self, client, consumer, other_consumer, product):
        client.post(
            "/carts/",
            params=as_user(consumer),
            json={"product_id": product.id, "store_id": product.store_id, "quantity": 1},
        )
        cart_id = client.get("/carts/me", params=as_user(consumer)).json()["cart_id"]

        assert client.delete(f"/carts/{cart_id}", params=as_user(other_consumer)).status_code == 403
        assert client.delete(
            f"/carts/{cart_id}/products/{product.id}", params=as_user(other_consumer)
        ).status_code == 403

    def test_delete_endpoints(self, client, consumer, product):
        client.post(
            "/carts/",
            params=as_user(consumer),
            json={"product_id": product.id, "store_id": product.store_id, "quantity": 1},
        )
        cart_id = client.get("/carts/me", params=as_user(consumer)).json()["cart_id"]

        assert client.delete(f"/carts/{cart_id}/products/{product.id}", params=as_user(consumer)).status_code == 204
        assert client.get("/carts/me", params=as_user(consumer)).json()["items"] == []
        assert client.delete(f"/carts/{cart_id}", params=as_user(consumer)).status_code == 204
        assert client.delete(f"/carts/{cart_id}", params=as_user(consumer)).status_code == 404

    def test_invalid_quantity_is_rejected(self, client, consumer, product):
        response = client.post(
            "/carts/",
            params=as_user(consumer),
            json={"product_id": product.id, "store_id": product.store_id, "quantity": 0},
        )
        assert response.status_code == 422

    def test_unknown_caller(self, client):
        assert client.get("/carts/me", params={"user_id": 999}).status_code == 401

    def test_missing_caller(self, client):
        assert client.get("/carts/me").status_code == 422


class TestStoreEndpoints:
    def test_store_lifecycle(self, client, store_owner):
        response = client.post("/stores/", params=as_user(store_owner), json={"name": "Bagle Monster"})
        assert response.status_code == 201
        store_id = response.json()["id"]

        assert client.get("/stores/me", params=as_user(store_owner)).json()["id"] == store_id
        assert client.get(f"/stores/{store_id}").json()["name"] == "Bagle Monster"

        response = client.put(
            f"/stores/{store_id}",
            params=as_user(store_owner),
            json={"name": "Bagel Monster", "description": "fixed the typo"},
        )
        assert response.status_code == 200
        assert response.json()["description"] == "fixed the typo"

        product = client.post(
            f"/stores/{store_id}/products",
            params=as_user(store_owner),
            json={"name": "Plain Bagel", "price": 500},
        )
        assert product.status_code == 201
        assert client.get(f"/products/{product.json()['id']}").json()["price"] == 500
        assert len(client.get(f"/stores/{store_id}/products").json()) == 1

        assert client.delete(f"/stores/{store_id}", params=as_user(store_owner)).status_code == 204
        assert client.get("/stores/").json() == []

    def test_consumer_cannot_create_store(self, client, consumer):
        response = client.post("/stores/", params=as_user(consumer), json={"name": "Nope"})
        assert response.status_code == 403

    def test_second_store_is_conflict(self, client, store, store_owner):
        response = client.post("/stores/", params=as_user(store_owner), json={"name": "Second"})
        assert response.status_code == 409

    def test_non_owner_cannot_modify(self, client, store, other_store_owner):
        response = client.put(f"/stores/{store.id}", params=as_user(other_store_owner), json={"name": "Mine"})
        assert response.status_code == 403

    def test_store_with_carts_is_conflict(self, client, store, product, consumer, store_owner):
        store_id = store.id
        client.post(
            "/carts/",
            params=as_user(consumer),
            json={"product_id": product.id, "store_id": store_id, "quantity": 1},
        )

        response = client.delete(f"/stores/{store_id}", params=as_user(store_owner))

        assert response.status_code == 409
        assert client.get(f"/stores/{store_id}").status_code == 200

    def test_missing_store(self, client):
        assert client.get("/stores/404").status_code == 404


class TestUserEndpoints:
    def test_create_and_get(self, client):
        response = client.post("/users/", json={"name": "kim", "role": "STORE"})
        assert response.status_code == 201
        user_id = response.json()["id"]

        assert client.get(f"/users/{user_id}").json() == {"id": user_id, "name": "kim", "role": "STORE"}

    def test_unknown_role(self, client):
        assert client.post("/users/", json={"name": "kim", "role": "ROOT"}).status_code == 422

    def test_missing_user(self, client):
        assert client.get("/users/999").status_code == 404

"""
Waiter presence: listing, phone login, lenient status updates and the
per-waiter order history.
"""
import pytest

from foodcourt.db.models.waiter import Waiter, WaiterStatus


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("engaged", WaiterStatus.ENGAGED),
        (WaiterStatus.ENGAGED, WaiterStatus.ENGAGED),
        ("free", WaiterStatus.FREE),
        ("on-break", WaiterStatus.FREE),
        ("ENGAGED", WaiterStatus.FREE),
        ("", WaiterStatus.FREE),
        (None, WaiterStatus.FREE),
        (3, WaiterStatus.FREE),
    ],
)
def test_status_normalization(raw, expected):
    assert WaiterStatus.normalize(raw) is expected


class TestWaiterRegistry:
    def test_list_is_ordered_by_name(self, client, waiters):
        client.post("/api/waiters", json={"name": "Meena", "phone": "9876509876"})

        names = [w["name"] for w in client.get("/api/waiters").json()]

        assert names == ["Asha", "Meena", "Ravi"]

    def test_create_normalizes_status(self, client):
        engaged = client.post("/api/waiters", json={"name": "Zara", "status": "engaged"})
        odd = client.post("/api/waiters", json={"name": "Omar", "phone": "9000000000", "status": "on-break"})
        default = client.post("/api/waiters", json={"name": "Lata"})

        assert engaged.status_code == 201
        assert engaged.json()["status"] == "engaged"
        assert odd.json() == {"id": odd.json()["id"], "name": "Omar", "phone": "9000000000", "status": "free"}
        assert default.json()["status"] == "free"
        assert default.json()["phone"] is None

    def test_create_requires_name(self, client):
        response = client.post("/api/waiters", json={"phone": "9000000000"})

        assert response.status_code == 400
        assert response.json()["detail"] == "name required"

    def test_get_waiter(self, client, waiters):
        assert client.get(f"/api/waiters/{waiters['asha'].id}").json()["name"] == "Asha"
        assert client.get("/api/waiters/9999").status_code == 404


class TestWaiterLogin:
    def test_login_by_phone(self, client, waiters):
        response = client.post("/api/waiters/login", json={"phone": "9876512345"})

        assert response.status_code == 200
        assert response.json()["name"] == "Ravi"
        assert response.json()["status"] == "engaged"

    def test_unknown_phone_is_an_authentication_failure(self, client, waiters):
        response = client.post("/api/waiters/login", json={"phone": "0000000000"})

        assert response.status_code == 401
        assert response.json() == {"detail": "waiter not found"}

    def test_phone_required(self, client):
        response = client.post("/api/waiters/login", json={})

        assert response.status_code == 400
        assert response.json()["detail"] == "phone required"


class TestWaiterStatus:
    def test_set_engaged_then_free(self, client, db, waiters):
        asha_id = waiters["asha"].id

        engaged = client.post(f"/api/waiters/{asha_id}/status", json={"status": "engaged"})
        assert engaged.status_code == 200
        assert engaged.json()["status"] == "engaged"

        freed = client.post(f"/api/waiters/{asha_id}/status", json={"status": "free"})
        assert freed.json()["status"] == "free"

    def test_unrecognized_status_becomes_free(self, client, db, waiters):
        ravi_id = waiters["ravi"].id

        for value in ("on-break", 12, None):
            client.post(f"/api/waiters/{ravi_id}/status", json={"status": "engaged"})
            response = client.post(f"/api/waiters/{ravi_id}/status", json={"status": value})
            assert response.status_code == 200
            assert response.json()["status"] == "free"

        db.expire_all()
        assert db.get(Waiter, ravi_id).status is WaiterStatus.FREE

    def test_unknown_waiter(self, client):
        response = client.post("/api/waiters/4242/status", json={"status": "engaged"})

        assert response.status_code == 404
        assert response.json()["detail"] == "waiter not found"


class TestWaiterOrders:
    def test_only_the_waiters_orders_newest_first(self, client, catalog, waiters):
        asha_id, ravi_id = waiters["asha"].id, waiters["ravi"].id
        line = {"item_id": catalog["dosa"].id, "quantity": 2}

        first = client.post("/api/orders", json={"table_number": 1, "waiter_id": asha_id, "items": [line]}).json()
        client.post("/api/orders", json={"table_number": 2, "waiter_id": ravi_id, "items": [line]})
        third = client.post(
            "/api/orders",
            json={"table_number": 3, "waiter_id": asha_id, "customer": {"name": "Dev", "phone": "9111111111"}, "items": [line]},
        ).json()

        orders = client.get(f"/api/waiters/{asha_id}/orders").json()

        assert [o["id"] for o in orders] == [third["id"], first["id"]]
        assert orders[0]["customer_name"] == "Dev"
        assert orders[0]["customer_phone"] == "9111111111"
        assert orders[0]["items"] == [
            {"item_id": catalog["dosa"].id, "name": "Masala Dosa", "quantity": 2, "price_cents_at_order": 15000}
        ]

    def test_limit(self, client, catalog, waiters):
        asha_id = waiters["asha"].id
        line = {"item_id": catalog["coffee"].id, "quantity": 1}
        for table in range(1, 5):
            client.post("/api/orders", json={"table_number": table, "waiter_id": asha_id, "items": [line]})

        orders = client.get(f"/api/waiters/{asha_id}/orders", params={"limit": 2}).json()

        assert [o["table_number"] for o in orders] == [4, 3]

    def test_unknown_waiter(self, client):
        response = client.get("/api/waiters/31337/orders")

        assert response.status_code == 404

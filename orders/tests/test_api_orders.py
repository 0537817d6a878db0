"""API tests for order endpoints: create, update, status changes and cancel."""
import pytest

from orders.models import Order

ORDERS_URL = "/api/orders/"


def order_payload(user, **overrides):
    payload = {
        "user_id": user.pk,
        "table": "T4",
        "order_type": "dine_in",
        "status": "pending",
        "subtotal": "30.00",
        "tax": "3.00",
        "total": "33.00",
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
def test_create_order(api_client, user):
    r = api_client.post(ORDERS_URL, order_payload(user), format="json")
    assert r.status_code == 201
    body = r.json()
    assert body["status"] is True
    assert body["message"] == "Order created successfully"
    assert body["data"]["order_number"].startswith("ORD-")
    assert body["data"]["discount"] == "0.00"
    assert body["data"]["user"]["email"] == user.email


@pytest.mark.django_db
def test_create_order_validation_errors(api_client, user):
    payload = order_payload(user, user_id=9999, order_type="drive_thru", total="-1")
    r = api_client.post(ORDERS_URL, payload, format="json")
    assert r.status_code == 422
    body = r.json()
    assert body["status"] is False
    assert body["message"] == "Validation Error"
    assert {"user_id", "order_type", "total"} <= set(body["errors"])
    assert Order.objects.count() == 0


@pytest.mark.django_db
def test_show_missing_order_returns_404(api_client):
    r = api_client.get(f"{ORDERS_URL}9999/")
    assert r.status_code == 404
    assert r.json() == {"status": False, "message": "Order not found"}


@pytest.mark.django_db
def test_update_order_is_partial(api_client, make_order):
    order = make_order(notes="window seat")
    r = api_client.patch(f"{ORDERS_URL}{order.pk}/", {"table": "T9"}, format="json")
    assert r.status_code == 200
    order.refresh_from_db()
    assert order.table == "T9"
    assert order.notes == "window seat"


@pytest.mark.django_db
def test_update_status_accepts_any_known_status(api_client, make_order):
    order = make_order(status=Order.Status.COMPLETED)
    r = api_client.patch(f"{ORDERS_URL}{order.pk}/status/", {"status": "pending"}, format="json")
    assert r.status_code == 200
    assert r.json()["data"]["status"] == "pending"


@pytest.mark.django_db
def test_update_status_rejects_unknown_status(api_client, order):
    r = api_client.patch(f"{ORDERS_URL}{order.pk}/status/", {"status": "served"}, format="json")
    assert r.status_code == 422
    assert "status" in r.json()["errors"]


@pytest.mark.django_db
def test_cancel_order(api_client, make_order):
    order = make_order(status=Order.Status.PREPARING)
    r = api_client.patch(f"{ORDERS_URL}{order.pk}/cancel/")
    assert r.status_code == 200
    assert r.json()["message"] == "Order cancelled successfully"
    order.refresh_from_db()
    assert order.status == Order.Status.CANCELLED


@pytest.mark.django_db
def test_cancel_completed_order_returns_400(api_client, make_order):
    order = make_order(status=Order.Status.COMPLETED)
    r = api_client.patch(f"{ORDERS_URL}{order.pk}/cancel/")
    assert r.status_code == 400
    assert r.json() == {"status": False, "message": "Completed orders cannot be cancelled"}
    order.refresh_from_db()
    assert order.status == Order.Status.COMPLETED


@pytest.mark.django_db
def test_orders_by_status(api_client, make_order):
    make_order(status=Order.Status.READY)
    make_order(status=Order.Status.PENDING)
    r = api_client.get(f"{ORDERS_URL}status/ready/")
    assert r.status_code == 200
    assert [o["status"] for o in r.json()["data"]] == ["ready"]

    r = api_client.get(f"{ORDERS_URL}status/lost/")
    assert r.status_code == 422
    assert r.json()["message"] == "Invalid status parameter"


@pytest.mark.django_db
def test_orders_cannot_be_deleted(api_client, order):
    r = api_client.delete(f"{ORDERS_URL}{order.pk}/")
    assert r.status_code == 405
    assert Order.objects.filter(pk=order.pk).exists()

"""Tests for Order API endpoints."""


def create_order(client, order_number, **overrides):
    payload = {"orderNumber": order_number, "userId": 1, "totalAmount": 100.0}
    payload.update(overrides)
    response = client.post("/api/v1/orders", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_order_success(client, order_payload):
    """Test creating an order with items."""
    response = client.post("/api/v1/orders", json=order_payload)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["orderNumber"] == "ORD-1001"
    assert data["userId"] == 1
    assert data["totalAmount"] == 59.97
    assert data["status"] == "PENDING"
    assert "orderDate" in data
    assert len(data["items"]) == 2
    assert all(item["orderId"] == data["id"] for item in data["items"])
    assert response.headers["Location"] == f"/api/v1/orders/{data['id']}"


def test_create_order_keeps_given_status(client):
    order = create_order(client, "ORD-1", status="SHIPPED")

    assert order["status"] == "SHIPPED"


def test_any_status_string_is_accepted(client):
    order = create_order(client, "ORD-1", status="ON_HOLD")

    assert order["status"] == "ON_HOLD"


def test_create_order_validation(client):
    assert client.post("/api/v1/orders", json={"orderNumber": "X", "totalAmount": 5.0}).status_code == 400
    assert client.post(
        "/api/v1/orders", json={"orderNumber": "X", "userId": 1, "totalAmount": 0}
    ).status_code == 400
    assert client.post(
        "/api/v1/orders",
        json={
            "orderNumber": "X",
            "userId": 1,
            "totalAmount": 5.0,
            "items": [{"productId": 1, "quantity": 0, "unitPrice": 5.0, "subtotal": 5.0}],
        },
    ).status_code == 400


def test_duplicate_order_number_conflicts(client):
    create_order(client, "ORD-1")

    response = client.post("/api/v1/orders", json={"orderNumber": "ORD-1", "userId": 2, "totalAmount": 1.0})

    assert response.status_code == 409


def test_get_order(client):
    order = create_order(client, "ORD-7")

    by_id = client.get(f"/api/v1/orders/{order['id']}")
    by_number = client.get("/api/v1/orders/number/ORD-7")

    assert by_id.status_code == 200
    assert by_id.json()["data"]["id"] == order["id"]
    assert by_number.json()["data"]["id"] == order["id"]


def test_get_order_not_found(client):
    assert client.get("/api/v1/orders/9999").status_code == 404
    response = client.get("/api/v1/orders/number/NOPE")
    assert response.status_code == 404
    assert response.json()["message"] == "Order not found with number: NOPE"


def test_list_orders_with_filters(client):
    create_order(client, "ORD-1", userId=1, status="PENDING", paymentMethod="CARD")
    create_order(client, "ORD-2", userId=2, status="SHIPPED", paymentMethod="CARD")
    create_order(client, "ORD-3", userId=1, status="SHIPPED", paymentMethod="PAYPAL")

    everyone = client.get("/api/v1/orders")
    filtered = client.get("/api/v1/orders", params={"status": "shipped", "userId": 1})

    assert everyone.headers["X-Total-Count"] == "3"
    assert [o["orderNumber"] for o in filtered.json()["data"]] == ["ORD-3"]
    assert len(client.get("/api/v1/orders", params={"paymentMethod": "card"}).json()["data"]) == 2


def test_orders_by_user_and_status(client):
    create_order(client, "ORD-1", userId=1, status="PENDING")
    create_order(client, "ORD-2", userId=2, status="PENDING")
    create_order(client, "ORD-3", userId=1, status="DELIVERED")

    by_user = client.get("/api/v1/orders/user/1")
    by_status = client.get("/api/v1/orders/status/pending")

    assert [o["orderNumber"] for o in by_user.json()["data"]] == ["ORD-1", "ORD-3"]
    assert [o["orderNumber"] for o in by_status.json()["data"]] == ["ORD-1", "ORD-2"]
    assert by_user.headers["X-Total-Count"] == "2"


def test_statuses_are_distinct_and_sorted(client):
    create_order(client, "ORD-1", status="SHIPPED")
    create_order(client, "ORD-2")
    create_order(client, "ORD-3", status="SHIPPED")

    response = client.get("/api/v1/orders/statuses")

    assert response.json()["data"] == ["PENDING", "SHIPPED"]


def test_update_order_keeps_items_and_order_date(client, order_payload):
    order = client.post("/api/v1/orders", json=order_payload).json()["data"]

    response = client.put(
        f"/api/v1/orders/{order['id']}",
        json={"orderNumber": "ORD-1001", "userId": 1, "totalAmount": 59.97, "status": "SHIPPED"},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "SHIPPED"
    assert data["orderDate"] == order["orderDate"]
    assert data["paymentMethod"] is None
    assert [i["id"] for i in data["items"]] == [i["id"] for i in order["items"]]


def test_update_order_not_found(client):
    response = client.put(
        "/api/v1/orders/9999",
        json={"orderNumber": "X", "userId": 1, "totalAmount": 1.0},
    )

    assert response.status_code == 404


def test_delete_order(client, order_payload):
    order = client.post("/api/v1/orders", json=order_payload).json()["data"]

    response = client.delete(f"/api/v1/orders/{order['id']}")

    assert response.status_code == 200
    assert client.get(f"/api/v1/orders/{order['id']}").status_code == 404
    assert client.delete(f"/api/v1/orders/{order['id']}").status_code == 404

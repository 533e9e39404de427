"""Tests for the update merge."""
from datetime import datetime, timedelta, timezone

from app.domain.order import Order, OrderItem
from app.domain.product import Product
from app.services.merge import merge_update

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
T1 = T0 + timedelta(minutes=5)


def stored_product():
    return Product(
        id=1,
        name="Widget",
        price=9.99,
        description="Small",
        category="Tools",
        stock=4,
        sku="WID-1",
        brand="Acme",
        created_at=T0,
        updated_at=T0,
    )


def test_payload_values_replace_stored_values():
    payload = {
        "name": "Widget XL",
        "price": 19.99,
        "description": "Large",
        "category": "Tools",
        "stock": 8,
        "sku": "WID-2",
        "brand": "Acme",
    }

    merged = merge_update(stored_product(), payload, now=T1)

    assert merged.name == "Widget XL"
    assert merged.price == 19.99
    assert merged.sku == "WID-2"
    assert merged.stock == 8


def test_none_and_missing_keys_clear_fields():
    merged = merge_update(stored_product(), {"name": "Widget", "price": 9.99, "brand": None}, now=T1)

    assert merged.brand is None
    assert merged.category is None
    assert merged.description is None
    assert merged.stock is None


def test_identity_and_timestamps():
    existing = stored_product()

    merged = merge_update(existing, {"id": 99, "created_at": T1, "name": "W", "price": 1.0}, now=T1)

    assert merged.id == 1
    assert merged.created_at == T0
    assert merged.updated_at == T1


def test_existing_record_is_not_modified():
    existing = stored_product()

    merge_update(existing, {"name": "Other", "price": 2.0}, now=T1)

    assert existing.name == "Widget"
    assert existing.updated_at == T0


def test_unknown_payload_keys_are_ignored():
    merged = merge_update(stored_product(), {"name": "W", "price": 1.0, "color": "red"}, now=T1)

    assert not hasattr(merged, "color")


def test_order_preserves_order_date_and_items():
    items = [OrderItem(id=5, order_id=1, product_id=2, quantity=1, unit_price=3.0, subtotal=3.0)]
    existing = Order(
        id=1,
        order_number="ORD-1",
        user_id=7,
        total_amount=3.0,
        status="PENDING",
        payment_method="CARD",
        order_date=T0,
        updated_at=T0,
        items=items,
    )
    payload = {"order_number": "ORD-1", "user_id": 7, "total_amount": 3.0, "status": "SHIPPED"}

    merged = merge_update(existing, payload, now=T1, preserved=("id", "order_date", "items"))

    assert merged.status == "SHIPPED"
    assert merged.payment_method is None
    assert merged.order_date == T0
    assert merged.items == items
    assert merged.updated_at == T1

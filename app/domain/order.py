from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

DEFAULT_ORDER_STATUS = "PENDING"


@dataclass
class OrderItem:
    """A line of an order. Owned by its order and deleted with it."""
    product_id: int
    quantity: int
    unit_price: float
    subtotal: float
    id: Optional[int] = None
    order_id: Optional[int] = None


@dataclass
class Order:
    """
    A customer order.

    status is free text (PENDING, PROCESSING, SHIPPED, DELIVERED, CANCELLED
    are the values clients use); order_date is set once at creation.
    """
    order_number: str
    user_id: int
    total_amount: float
    id: Optional[int] = None
    status: Optional[str] = DEFAULT_ORDER_STATUS
    payment_method: Optional[str] = None
    shipping_address: Optional[str] = None
    order_date: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: List[OrderItem] = field(default_factory=list)

from pydantic import ConfigDict, Field
from datetime import datetime
from typing import List, Optional

from app.schemas.common import CamelModel


class OrderItemCreate(CamelModel):
    """Schema for a line of a new order."""
    product_id: int = Field(..., description="ID of the ordered product")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit_price: float = Field(..., gt=0, description="Price per unit")
    subtotal: float = Field(..., gt=0, description="Line total")


class OrderItemResponse(OrderItemCreate):
    """Schema for an order line in responses."""
    id: int
    order_id: int

    model_config = ConfigDict(from_attributes=True)


class OrderBase(CamelModel):
    """Base schema for Order with common attributes."""
    order_number: str = Field(..., min_length=1, max_length=50, description="Unique order number")
    user_id: int = Field(..., description="ID of the ordering user")
    total_amount: float = Field(..., gt=0, description="Order total (must be positive)")
    status: Optional[str] = Field(None, max_length=30, description="PENDING when omitted on create")
    payment_method: Optional[str] = Field(None, max_length=50, description="Payment method")
    shipping_address: Optional[str] = Field(None, max_length=255, description="Shipping address")


class OrderCreate(OrderBase):
    """Schema for placing a new order."""
    items: List[OrderItemCreate] = Field(default_factory=list, description="Order lines")


class OrderUpdate(OrderBase):
    """
    Schema for updating an order.

    Replaces every field of the stored order; the order's items are kept.
    """
    pass


class OrderResponse(OrderBase):
    """Schema for order response."""
    id: int
    order_date: datetime
    updated_at: datetime
    items: List[OrderItemResponse] = []

    model_config = ConfigDict(from_attributes=True)

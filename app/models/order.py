from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.database import Base


class OrderRow(Base):
    """
    Table mapping for orders.

    Attributes:
        id: Unique identifier for the order
        order_number: Business key, unique
        user_id: Id of the ordering user (not enforced as a foreign key)
        total_amount: Order total (must be positive)
        status: Free-text status, PENDING when created without one
        payment_method: Payment method label
        shipping_address: Delivery address
        order_date: Set once when the order is created
        updated_at: Set on every mutation
        items: Owned order lines, removed together with the order
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    order_number = Column(String(50), nullable=False, unique=True)
    user_id = Column(Integer, nullable=False, index=True)
    total_amount = Column(Float, nullable=False)
    status = Column(String(30))
    payment_method = Column(String(50))
    shipping_address = Column(String(255))
    order_date = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    items = relationship(
        "OrderItemRow",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemRow.id",
    )

    __table_args__ = (
        CheckConstraint('total_amount > 0', name='check_total_amount_positive'),
    )

    def __repr__(self):
        return f"<OrderRow(id={self.id}, order_number='{self.order_number}', status='{self.status}')>"


class OrderItemRow(Base):
    """Table mapping for order lines."""
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Float, nullable=False)
    subtotal = Column(Float, nullable=False)

    order = relationship("OrderRow", back_populates="items")

    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_quantity_positive'),
        CheckConstraint('unit_price > 0', name='check_unit_price_positive'),
        CheckConstraint('subtotal > 0', name='check_subtotal_positive'),
    )

    def __repr__(self):
        return f"<OrderItemRow(id={self.id}, order_id={self.order_id}, product_id={self.product_id})>"

from typing import List, Optional, Protocol

from app.domain.order import Order, OrderItem
from app.models.order import OrderRow, OrderItemRow
from app.repositories.base import EntityStore, SqlAlchemyStore


class OrderStore(EntityStore[Order], Protocol):
    def find_by_order_number(self, order_number: str) -> Optional[Order]: ...

    def find_all_statuses(self) -> List[str]: ...


class OrderRepository(SqlAlchemyStore[Order]):
    """
    SQLAlchemy store for orders and their items.

    Items are written only on create. Deleting an order removes its items
    through the delete-orphan cascade on OrderRow.items.
    """

    model = OrderRow
    entity_name = "Order"

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        return Order(
            id=row.id,
            order_number=row.order_number,
            user_id=row.user_id,
            total_amount=row.total_amount,
            status=row.status,
            payment_method=row.payment_method,
            shipping_address=row.shipping_address,
            order_date=row.order_date,
            updated_at=row.updated_at,
            items=[
                OrderItem(
                    id=item.id,
                    order_id=item.order_id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    subtotal=item.subtotal,
                )
                for item in row.items
            ],
        )

    def _to_row(self, order: Order) -> OrderRow:
        row = OrderRow(order_date=order.order_date)
        self._apply(row, order)
        row.items = [
            OrderItemRow(
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=item.unit_price,
                subtotal=item.subtotal,
            )
            for item in order.items
        ]
        return row

    @staticmethod
    def _apply(row: OrderRow, order: Order) -> None:
        # order_date is written once, in _to_row
        row.order_number = order.order_number
        row.user_id = order.user_id
        row.total_amount = order.total_amount
        row.status = order.status
        row.payment_method = order.payment_method
        row.shipping_address = order.shipping_address
        row.updated_at = order.updated_at

    def find_by_order_number(self, order_number: str) -> Optional[Order]:
        return self._find_one_by(OrderRow.order_number, order_number)

    def find_all_statuses(self) -> List[str]:
        return self._distinct_values(OrderRow.status)

import logging
from datetime import datetime
from typing import Callable, List, Optional

from app.domain.order import DEFAULT_ORDER_STATUS, Order, OrderItem
from app.exceptions import NotFoundError
from app.repositories.order_repository import OrderStore
from app.schemas.order import OrderCreate, OrderUpdate
from app.services.filters import OrderCriteria, apply_filters
from app.services.merge import merge_update, utcnow

logger = logging.getLogger(__name__)

# Fields an order update never touches
ORDER_PRESERVED_FIELDS = ("id", "order_date", "items")


class OrderService:
    """
    Service class for Order operations.

    Status is free text and is not checked against a state machine: any
    string is stored as given, and PENDING is used when a new order has none.
    Updates overwrite the order's own fields and keep its items; deleting an
    order removes its items.

    Concurrent updates of the same order are not coordinated here, the last
    write to reach the store wins.
    """

    def __init__(self, store: OrderStore, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    def list(self, criteria: Optional[OrderCriteria] = None) -> List[Order]:
        orders = self.store.find_all()
        if criteria is None:
            return orders
        return apply_filters(orders, criteria.predicates())

    def get_by_id(self, order_id: int) -> Order:
        order = self.store.find_by_id(order_id)
        if order is None:
            raise NotFoundError("Order", "id", order_id)
        return order

    def get_by_order_number(self, order_number: str) -> Order:
        order = self.store.find_by_order_number(order_number)
        if order is None:
            raise NotFoundError("Order", "number", order_number)
        return order

    def get_by_user(self, user_id: int) -> List[Order]:
        return self.list(OrderCriteria(user_id=user_id))

    def get_by_status(self, status: str) -> List[Order]:
        return self.list(OrderCriteria(status=status))

    def create(self, order_data: OrderCreate) -> Order:
        """
        Place a new order together with its items.

        Args:
            order_data: Order creation data

        Returns:
            Created order with assigned ids for the order and its items

        Raises:
            ConflictError: If the order number is already in use
        """
        now = self.clock()
        fields = order_data.model_dump(exclude={"items"})
        if fields["status"] is None:
            fields["status"] = DEFAULT_ORDER_STATUS

        order = Order(
            **fields,
            order_date=now,
            updated_at=now,
            items=[OrderItem(**item.model_dump()) for item in order_data.items],
        )
        created = self.store.create(order)
        logger.info(
            f"Order #{created.id} ({created.order_number}) created "
            f"with {len(created.items)} item(s)"
        )
        return created

    def update(self, order_id: int, order_data: OrderUpdate) -> Order:
        """
        Replace the fields of an existing order.

        Raises:
            NotFoundError: If no order has this id
            ConflictError: If the new order number is already in use
        """
        existing = self.get_by_id(order_id)
        merged = merge_update(
            existing,
            order_data.model_dump(),
            now=self.clock(),
            preserved=ORDER_PRESERVED_FIELDS,
        )
        updated = self.store.update(merged)
        logger.info(f"Order #{order_id} updated (status={updated.status})")
        return updated

    def delete(self, order_id: int) -> bool:
        """
        Delete an order and its items.

        Returns:
            True if deleted, False if not found
        """
        if not self.store.exists_by_id(order_id):
            return False

        self.store.delete_by_id(order_id)
        logger.info(f"Order #{order_id} deleted")
        return True

    def all_statuses(self) -> List[str]:
        return self.store.find_all_statuses()

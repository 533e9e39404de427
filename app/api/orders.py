import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import (
    GatewayHeaders,
    get_gateway_headers,
    get_order_service,
    set_list_headers,
)
from app.exceptions import NotFoundError
from app.schemas.common import ApiResponse
from app.schemas.order import OrderCreate, OrderUpdate, OrderResponse
from app.services.filters import OrderCriteria
from app.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["Orders"])


def _orders(orders) -> List[OrderResponse]:
    return [OrderResponse.model_validate(o) for o in orders]


@router.get(
    "",
    response_model=ApiResponse[List[OrderResponse]],
    summary="List orders",
    description="Get all orders with optional filters: status, userId, paymentMethod."
)
def list_orders(
    response: Response,
    order_status: Optional[str] = Query(None, alias="status", description="Filter by order status"),
    user_id: Optional[int] = Query(None, alias="userId", description="Filter by user ID"),
    payment_method: Optional[str] = Query(None, alias="paymentMethod", description="Filter by payment method"),
    gateway: GatewayHeaders = Depends(get_gateway_headers),
    service: OrderService = Depends(get_order_service),
):
    if gateway.client_id:
        logger.info(f"Order listing requested by client {gateway.client_id}")

    criteria = OrderCriteria(status=order_status, user_id=user_id, payment_method=payment_method)
    orders = service.list(criteria)
    set_list_headers(response, len(orders), gateway)
    return ApiResponse(message="Orders retrieved successfully", data=_orders(orders))


@router.get(
    "/statuses",
    response_model=ApiResponse[List[str]],
    summary="List order statuses",
    description="Distinct statuses present in stored orders, in ascending order."
)
def list_statuses(service: OrderService = Depends(get_order_service)):
    return ApiResponse(message="Statuses retrieved successfully", data=service.all_statuses())


@router.get("/number/{order_number}", response_model=ApiResponse[OrderResponse], summary="Get order by order number")
def get_order_by_number(order_number: str, service: OrderService = Depends(get_order_service)):
    order = service.get_by_order_number(order_number)
    return ApiResponse(message="Order found", data=OrderResponse.model_validate(order))


@router.get("/user/{user_id}", response_model=ApiResponse[List[OrderResponse]], summary="List orders of a user")
def list_orders_by_user(
    user_id: int,
    response: Response,
    service: OrderService = Depends(get_order_service),
):
    orders = service.get_by_user(user_id)
    set_list_headers(response, len(orders))
    return ApiResponse(message=f"Orders retrieved for user: {user_id}", data=_orders(orders))


@router.get(
    "/status/{order_status}",
    response_model=ApiResponse[List[OrderResponse]],
    summary="List orders by status",
    description="Status is matched case-insensitively (PENDING, PROCESSING, SHIPPED, DELIVERED, CANCELLED)."
)
def list_orders_by_status(
    order_status: str,
    response: Response,
    service: OrderService = Depends(get_order_service),
):
    orders = service.get_by_status(order_status)
    set_list_headers(response, len(orders))
    return ApiResponse(message=f"Orders retrieved for status: {order_status}", data=_orders(orders))


@router.get("/{order_id}", response_model=ApiResponse[OrderResponse], summary="Get order by ID")
def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    order = service.get_by_id(order_id)
    return ApiResponse(message="Order found", data=OrderResponse.model_validate(order))


@router.post(
    "",
    response_model=ApiResponse[OrderResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Place a new order",
    description="Create an order with its items. Status defaults to PENDING."
)
def create_order(
    order_data: OrderCreate,
    response: Response,
    service: OrderService = Depends(get_order_service),
):
    """
    Place an order.

    - **orderNumber**: Unique order number (required)
    - **userId**: Ordering user (required)
    - **totalAmount**: Order total, must be positive (required)
    - **items**: Order lines with positive quantity, unitPrice and subtotal
    """
    order = service.create(order_data)
    response.headers["Location"] = f"/api/v1/orders/{order.id}"
    return ApiResponse(message="Order created successfully", data=OrderResponse.model_validate(order))


@router.put(
    "/{order_id}",
    response_model=ApiResponse[OrderResponse],
    summary="Update an order",
    description="Replace every field of an order. Items are kept as they are."
)
def update_order(
    order_id: int,
    order_data: OrderUpdate,
    service: OrderService = Depends(get_order_service),
):
    order = service.update(order_id, order_data)
    return ApiResponse(message="Order updated successfully", data=OrderResponse.model_validate(order))


@router.delete("/{order_id}", response_model=ApiResponse, summary="Delete an order")
def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    if not service.delete(order_id):
        raise NotFoundError("Order", "id", order_id)
    return ApiResponse(message="Order deleted successfully")

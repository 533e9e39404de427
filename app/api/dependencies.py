from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, Response
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.repositories.order_repository import OrderRepository
from app.repositories.product_repository import ProductRepository
from app.repositories.user_repository import UserRepository
from app.services.order_service import OrderService
from app.services.product_service import ProductService
from app.services.user_service import UserService


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(ProductRepository(db))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(OrderRepository(db))


@dataclass
class GatewayHeaders:
    """Headers an API gateway forwards to the list endpoints."""
    client_id: Optional[str]
    api_version: str


def get_gateway_headers(
    x_client_id: Optional[str] = Header(None, description="Client ID for tracking"),
    x_api_version: Optional[str] = Header(None, description="API version"),
) -> GatewayHeaders:
    return GatewayHeaders(
        client_id=x_client_id,
        api_version=x_api_version or get_settings().API_VERSION,
    )


def set_list_headers(
    response: Response,
    count: int,
    gateway: Optional[GatewayHeaders] = None,
) -> None:
    """Set X-Total-Count, and X-API-Version when gateway headers were read."""
    response.headers["X-Total-Count"] = str(count)
    if gateway is not None:
        response.headers["X-API-Version"] = gateway.api_version

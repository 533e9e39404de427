import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import (
    GatewayHeaders,
    get_gateway_headers,
    get_product_service,
    set_list_headers,
)
from app.config import get_settings
from app.exceptions import NotFoundError
from app.schemas.common import ApiResponse
from app.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from app.services.filters import ProductCriteria
from app.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


def _products(products) -> List[ProductResponse]:
    return [ProductResponse.model_validate(p) for p in products]


@router.get(
    "",
    response_model=ApiResponse[List[ProductResponse]],
    summary="List products",
    description="Get all products with optional filters: category, brand, minPrice, maxPrice, search."
)
def list_products(
    response: Response,
    category: Optional[str] = Query(None, description="Filter by category"),
    brand: Optional[str] = Query(None, description="Filter by brand"),
    min_price: Optional[float] = Query(None, alias="minPrice", description="Minimum price"),
    max_price: Optional[float] = Query(None, alias="maxPrice", description="Maximum price"),
    search: Optional[str] = Query(None, description="Search in product name"),
    gateway: GatewayHeaders = Depends(get_gateway_headers),
    service: ProductService = Depends(get_product_service),
):
    """
    List products.

    String filters are case-insensitive; the price range is inclusive.
    """
    if gateway.client_id:
        logger.info(f"Product listing requested by client {gateway.client_id}")

    criteria = ProductCriteria(
        category=category,
        brand=brand,
        min_price=min_price,
        max_price=max_price,
        search=search,
    )
    products = service.list(criteria)
    set_list_headers(response, len(products), gateway)
    return ApiResponse(message="Products retrieved successfully", data=_products(products))


@router.get(
    "/categories",
    response_model=ApiResponse[List[str]],
    summary="List categories",
    description="Distinct product categories in ascending order."
)
def list_categories(service: ProductService = Depends(get_product_service)):
    return ApiResponse(message="Categories retrieved successfully", data=service.all_categories())


@router.get(
    "/brands",
    response_model=ApiResponse[List[str]],
    summary="List brands",
    description="Distinct product brands in ascending order."
)
def list_brands(service: ProductService = Depends(get_product_service)):
    return ApiResponse(message="Brands retrieved successfully", data=service.all_brands())


@router.get(
    "/low-stock",
    response_model=ApiResponse[List[ProductResponse]],
    summary="List low stock products",
    description="Products whose stock is below the threshold."
)
def list_low_stock_products(
    response: Response,
    threshold: Optional[int] = Query(None, description="Stock threshold (default: 10)"),
    service: ProductService = Depends(get_product_service),
):
    if threshold is None:
        threshold = get_settings().LOW_STOCK_THRESHOLD
    products = service.get_low_stock(threshold)
    set_list_headers(response, len(products))
    return ApiResponse(message="Low stock products retrieved", data=_products(products))


@router.get(
    "/sku/{sku}",
    response_model=ApiResponse[ProductResponse],
    summary="Get product by SKU"
)
def get_product_by_sku(sku: str, service: ProductService = Depends(get_product_service)):
    product = service.get_by_sku(sku)
    return ApiResponse(message="Product found", data=ProductResponse.model_validate(product))


@router.get(
    "/category/{category}",
    response_model=ApiResponse[List[ProductResponse]],
    summary="List products in a category",
    description="Category is matched case-insensitively."
)
def list_products_by_category(
    category: str,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    products = service.get_by_category(category)
    set_list_headers(response, len(products))
    return ApiResponse(
        message=f"Products retrieved for category: {category}", data=_products(products)
    )


@router.get(
    "/brand/{brand}",
    response_model=ApiResponse[List[ProductResponse]],
    summary="List products of a brand",
    description="Brand is matched case-insensitively."
)
def list_products_by_brand(
    brand: str,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    products = service.get_by_brand(brand)
    set_list_headers(response, len(products))
    return ApiResponse(
        message=f"Products retrieved for brand: {brand}", data=_products(products)
    )


@router.get(
    "/{product_id}",
    response_model=ApiResponse[ProductResponse],
    summary="Get product by ID"
)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    product = service.get_by_id(product_id)
    return ApiResponse(message="Product found", data=ProductResponse.model_validate(product))


@router.post(
    "",
    response_model=ApiResponse[ProductResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Add a product to the catalog. The SKU must be unique."
)
def create_product(
    product_data: ProductCreate,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    """
    Create a new product.

    - **name**: Product name (required, not blank)
    - **price**: Product price, must be positive (required)
    """
    product = service.create(product_data)
    response.headers["Location"] = f"/api/v1/products/{product.id}"
    return ApiResponse(
        message="Product created successfully", data=ProductResponse.model_validate(product)
    )


@router.put(
    "/{product_id}",
    response_model=ApiResponse[ProductResponse],
    summary="Update a product",
    description="Replace every field of a product. Omitted optional fields are cleared."
)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    product = service.update(product_id, product_data)
    return ApiResponse(
        message="Product updated successfully", data=ProductResponse.model_validate(product)
    )


@router.delete(
    "/{product_id}",
    response_model=ApiResponse,
    summary="Delete a product"
)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    if not service.delete(product_id):
        raise NotFoundError("Product", "id", product_id)
    return ApiResponse(message="Product deleted successfully")

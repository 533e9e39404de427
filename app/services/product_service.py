import logging
from datetime import datetime
from typing import Callable, List, Optional

from app.domain.product import Product
from app.exceptions import NotFoundError
from app.repositories.product_repository import ProductStore
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.filters import ProductCriteria, apply_filters
from app.services.merge import merge_update, utcnow

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service class for Product operations.

    This service handles:
    - Filtered listing (category, brand, price range, name search, low stock)
    - Lookups by id and SKU
    - Creating, updating and deleting products
    - Distinct category and brand listings

    SKU uniqueness is enforced by the store, which raises ConflictError.
    """

    def __init__(self, store: ProductStore, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    def list(self, criteria: Optional[ProductCriteria] = None) -> List[Product]:
        """
        Get all products matching the criteria, in store order.

        Args:
            criteria: Optional filters; absent or empty values are ignored

        Returns:
            Matching products
        """
        products = self.store.find_all()
        if criteria is None:
            return products
        return apply_filters(products, criteria.predicates())

    def get_by_id(self, product_id: int) -> Product:
        product = self.store.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", "id", product_id)
        return product

    def get_by_sku(self, sku: str) -> Product:
        product = self.store.find_by_sku(sku)
        if product is None:
            raise NotFoundError("Product", "SKU", sku)
        return product

    def get_by_category(self, category: str) -> List[Product]:
        return self.list(ProductCriteria(category=category))

    def get_by_brand(self, brand: str) -> List[Product]:
        return self.list(ProductCriteria(brand=brand))

    def get_low_stock(self, threshold: int) -> List[Product]:
        """Products whose stock is strictly below the threshold."""
        return self.list(ProductCriteria(stock_below=threshold))

    def create(self, product_data: ProductCreate) -> Product:
        """
        Create a new product.

        Args:
            product_data: Product creation data

        Returns:
            Created product with its assigned id

        Raises:
            ConflictError: If the SKU is already in use
        """
        now = self.clock()
        product = Product(**product_data.model_dump(), created_at=now, updated_at=now)
        created = self.store.create(product)
        logger.info(f"Product #{created.id} created (sku={created.sku})")
        return created

    def update(self, product_id: int, product_data: ProductUpdate) -> Product:
        """
        Replace the fields of an existing product.

        Every field takes the value from product_data, including None.
        id and created_at are kept, updated_at is refreshed.

        Raises:
            NotFoundError: If no product has this id
            ConflictError: If the new SKU is already in use
        """
        existing = self.get_by_id(product_id)
        merged = merge_update(existing, product_data.model_dump(), now=self.clock())
        updated = self.store.update(merged)
        logger.info(f"Product #{product_id} updated")
        return updated

    def delete(self, product_id: int) -> bool:
        """
        Delete a product.

        Returns:
            True if deleted, False if not found
        """
        if not self.store.exists_by_id(product_id):
            return False

        self.store.delete_by_id(product_id)
        logger.info(f"Product #{product_id} deleted")
        return True

    def all_categories(self) -> List[str]:
        return self.store.find_all_categories()

    def all_brands(self) -> List[str]:
        return self.store.find_all_brands()

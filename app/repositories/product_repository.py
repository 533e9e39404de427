from typing import List, Optional, Protocol

from app.domain.product import Product
from app.models.product import ProductRow
from app.repositories.base import EntityStore, SqlAlchemyStore


class ProductStore(EntityStore[Product], Protocol):
    def find_by_sku(self, sku: str) -> Optional[Product]: ...

    def find_all_categories(self) -> List[str]: ...

    def find_all_brands(self) -> List[str]: ...


class ProductRepository(SqlAlchemyStore[Product]):
    """SQLAlchemy store for products."""

    model = ProductRow
    entity_name = "Product"

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            description=row.description,
            price=row.price,
            category=row.category,
            stock=row.stock,
            sku=row.sku,
            brand=row.brand,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_row(self, product: Product) -> ProductRow:
        row = ProductRow()
        self._apply(row, product)
        return row

    @staticmethod
    def _apply(row: ProductRow, product: Product) -> None:
        row.name = product.name
        row.description = product.description
        row.price = product.price
        row.category = product.category
        row.stock = product.stock
        row.sku = product.sku
        row.brand = product.brand
        row.created_at = product.created_at
        row.updated_at = product.updated_at

    def find_by_sku(self, sku: str) -> Optional[Product]:
        return self._find_one_by(ProductRow.sku, sku)

    def find_all_categories(self) -> List[str]:
        return self._distinct_values(ProductRow.category)

    def find_all_brands(self) -> List[str]:
        return self._distinct_values(ProductRow.brand)

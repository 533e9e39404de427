from sqlalchemy import Column, Integer, String, Float, DateTime, CheckConstraint

from app.database import Base


class ProductRow(Base):
    """
    Table mapping for products.

    Attributes:
        id: Unique identifier for the product
        name: Product name
        description: Free-text description
        price: Product price (must be positive)
        category: Catalog category
        stock: Available quantity
        sku: Stock keeping unit, unique when present
        brand: Brand name
        created_at: Set by the service when the product is created
        updated_at: Set by the service on every mutation
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(String(500))
    price = Column(Float, nullable=False)
    category = Column(String(255), index=True)
    stock = Column(Integer)
    sku = Column(String(50), unique=True)
    brand = Column(String(100))
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        CheckConstraint('price > 0', name='check_price_positive'),
    )

    def __repr__(self):
        return f"<ProductRow(id={self.id}, name='{self.name}', sku='{self.sku}')>"

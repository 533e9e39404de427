from pydantic import ConfigDict, Field, field_validator
from datetime import datetime
from typing import Optional

from app.schemas.common import CamelModel


class ProductBase(CamelModel):
    """Base schema for Product with common attributes."""
    name: str = Field(..., max_length=255, description="Product name")
    description: Optional[str] = Field(None, max_length=500, description="Product description")
    price: float = Field(..., gt=0, description="Product price (must be positive)")
    category: Optional[str] = Field(None, max_length=255, description="Catalog category")
    stock: Optional[int] = Field(None, description="Available stock")
    sku: Optional[str] = Field(None, max_length=50, description="Unique stock keeping unit")
    brand: Optional[str] = Field(None, max_length=100, description="Brand name")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Product name is required")
        return value


class ProductCreate(ProductBase):
    """Schema for creating a new product."""
    pass


class ProductUpdate(ProductBase):
    """
    Schema for updating a product.

    The body replaces every field of the stored product; omitted optional
    fields are cleared.
    """
    pass


class ProductResponse(ProductBase):
    """Schema for product response including all fields."""
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

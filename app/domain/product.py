from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Product:
    """
    A catalog product.

    id and created_at are assigned once at creation; updated_at is refreshed
    by ProductService on every mutation.
    """
    name: str
    price: float
    id: Optional[int] = None
    description: Optional[str] = None
    category: Optional[str] = None
    stock: Optional[int] = None
    sku: Optional[str] = None
    brand: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

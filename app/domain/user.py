from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """A registered user. username and email are unique in the store."""
    username: str
    email: str
    id: Optional[int] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    # ACTIVE / INACTIVE by convention, not enforced
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

from pydantic import ConfigDict, Field, field_validator
from datetime import datetime
from typing import Optional

from app.schemas.common import CamelModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class UserBase(CamelModel):
    """Base schema for User with common attributes."""
    username: str = Field(..., max_length=50, description="Unique username")
    email: str = Field(..., max_length=100, pattern=EMAIL_PATTERN, description="Unique email address")
    full_name: Optional[str] = Field(None, max_length=100, description="Full name")
    phone: Optional[str] = Field(None, max_length=20, description="Phone number")
    address: Optional[str] = Field(None, max_length=255, description="Street address")
    city: Optional[str] = Field(None, max_length=50, description="City")
    country: Optional[str] = Field(None, max_length=50, description="Country")
    status: Optional[str] = Field(None, max_length=20, description="ACTIVE or INACTIVE")

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Username is required")
        return value


class UserCreate(UserBase):
    """Schema for registering a new user."""
    pass


class UserUpdate(UserBase):
    """Schema for updating a user. Replaces every field of the stored user."""
    pass


class UserResponse(UserBase):
    """Schema for user response including all fields."""
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ExistsResponse(CamelModel):
    """Result of a username or email availability check."""
    exists: bool

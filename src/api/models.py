"""Pydantic models for API request/response.

JSON bodies use camelCase keys; snake_case is accepted on input too.
"""

import re
from datetime import datetime
from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictInt, field_validator
from pydantic.alias_generators import to_camel

PRICE_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")


def _check_email(value: str) -> str:
    """Validate address syntax but keep the value exactly as submitted."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email address: {e}")
    return value


Email = Annotated[str, AfterValidator(_check_email)]


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _check_price(value: Optional[str]) -> Optional[str]:
    if value is not None and not PRICE_PATTERN.fullmatch(value):
        raise ValueError("Price must be a non-negative decimal string, e.g. '9.99'")
    return value


# ── auth ──────────────────────────────────────────────────


class LoginRequest(CamelModel):
    """Request model for user login."""
    email: Email
    password: str = Field(..., min_length=1)


# ── users ─────────────────────────────────────────────────


class UserCreate(CamelModel):
    """Request model for creating a user."""
    email: Email
    password: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    role: Optional[str] = Field(None, description="admin, manager or user (default)")
    status: Optional[str] = Field(None, description="Defaults to active")
    avatar: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None


class UserUpdate(CamelModel):
    """Partial user update. Every field is optional; supplied ones follow UserCreate rules."""
    email: Optional[Email] = None
    password: Optional[str] = Field(None, min_length=1)
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    role: Optional[str] = None
    status: Optional[str] = None
    avatar: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None

    @field_validator("email", "password", "first_name", "last_name", "role", "status", mode="before")
    @classmethod
    def reject_null(cls, v):
        """Required fields may be omitted but not cleared."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class UserResponse(CamelModel):
    """Response model for user. Never carries the password."""
    id: str
    email: str
    first_name: str
    last_name: str
    role: str
    status: str
    avatar: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    last_login: Optional[datetime] = None
    created_at: datetime


class LoginResponse(BaseModel):
    """Response model for login."""
    user: UserResponse


# ── products ──────────────────────────────────────────────


class ProductCreate(CamelModel):
    """Request model for creating a product."""
    name: str = Field(..., min_length=1)
    price: str = Field(..., description="Decimal as string")
    sku: str = Field(..., min_length=1)
    stock: Optional[StrictInt] = Field(None, ge=0)
    description: Optional[str] = None
    image: Optional[str] = None
    status: Optional[str] = Field(None, description="Defaults to active")

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        return _check_price(v)


class ProductUpdate(CamelModel):
    """Partial product update."""
    name: Optional[str] = Field(None, min_length=1)
    price: Optional[str] = None
    sku: Optional[str] = Field(None, min_length=1)
    stock: Optional[StrictInt] = Field(None, ge=0)
    description: Optional[str] = None
    image: Optional[str] = None
    status: Optional[str] = None

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        return _check_price(v)

    @field_validator("name", "price", "sku", "stock", "status", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class ProductResponse(CamelModel):
    """Response model for product."""
    id: str
    name: str
    description: Optional[str] = None
    price: str
    stock: int
    sku: str
    image: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime


# ── analytics ─────────────────────────────────────────────


class StatsResponse(CamelModel):
    """Dashboard statistics; revenue and session metrics are placeholders."""
    total_users: int
    total_products: int
    active_products: int
    total_stock: int
    revenue: int
    orders: int
    conversion_rate: float
    avg_session_duration: str
    bounce_rate: float


class RevenuePoint(BaseModel):
    month: str
    revenue: int
    users: int


class SalesPoint(BaseModel):
    name: str
    sales: int
    orders: int


class TrafficSource(BaseModel):
    name: str
    value: int
    color: str

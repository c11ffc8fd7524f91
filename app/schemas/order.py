# app/schemas/order.py
"""Pydantic schemas for coconut-oil order submissions and cart quotes"""
from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import ConfigDict, EmailStr, Field

from app.schemas.common import CamelModel

REQUIRED_ORDER_FIELDS = (
    "name",
    "email",
    "phone",
    "address",
    "city",
    "state",
    "pincode",
    "items",
    "total",
)


class OrderStatus(str, Enum):
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"


class OrderItem(CamelModel):
    """A single line in the cart"""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    size: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, description="Unit price")
    quantity: int = Field(..., ge=1)


class OrderCreate(CamelModel):
    """Checkout form payload"""
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: str = Field(..., min_length=5, max_length=30)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    pincode: str = Field(..., min_length=3, max_length=12)
    items: List[OrderItem] = Field(..., min_length=1)
    subtotal: Optional[float] = Field(None, ge=0)
    delivery_charge: Optional[float] = Field(None, ge=0)
    total: float = Field(..., gt=0)
    payment_method: Literal["cod", "gpay"] = "cod"
    status: Optional[str] = None
    created_at: Optional[datetime] = None


class CartItem(CamelModel):
    id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)


class CartQuoteRequest(CamelModel):
    items: List[CartItem] = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [
                    {"id": "half-liter", "quantity": 2},
                    {"id": "one-liter", "quantity": 1},
                ]
            }
        }
    )


class QuotedItem(CamelModel):
    id: str
    name: str
    size: str
    price: float
    quantity: int
    line_total: float


class CartQuoteResponse(CamelModel):
    items: List[QuotedItem]
    subtotal: float
    delivery_charge: float
    total: float

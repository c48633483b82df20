# shopcart/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime


class ItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")
    quantity: int = Field(1, ge=1, description="Ilość produktu (musi być >= 1)")


class CartItemOut(BaseModel):
    """Pozycja koszyka z aktualna cena z katalogu."""

    id: int
    product_id: int
    product_name: str
    product_price: Decimal
    quantity: int
    subtotal: Decimal


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    id: int
    user_id: int
    items: List[CartItemOut]
    total: Decimal
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class CartTotalOut(BaseModel):
    user_id: int
    total: Decimal


class UserCreate(BaseModel):
    """Schema dla tworzenia użytkownika."""

    id: int = Field(..., gt=0, description="ID użytkownika (musi być > 0)")
    name: str = Field(..., min_length=1, max_length=100, description="Imię użytkownika")


class UserRead(BaseModel):
    """Schema dla użytkownika (response)."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class ProductIn(BaseModel):
    """Schema dla tworzenia / edycji produktu."""

    name: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    description: str | None = None


class ProductOut(BaseModel):
    id: int
    name: str
    price: Decimal
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class OrderItemOut(BaseModel):
    """Snapshot produktu z chwili zlozenia zamowienia."""

    id: int
    product_id: int
    product_name: str
    product_price: Decimal
    quantity: int
    subtotal: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamówienia (response)."""

    id: int
    user_id: int
    status: str
    total_amount: Decimal
    created_at: datetime
    items: List[OrderItemOut]

    model_config = ConfigDict(from_attributes=True)

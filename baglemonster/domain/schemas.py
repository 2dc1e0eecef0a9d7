# baglemonster/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from datetime import datetime

from baglemonster.domain.enums import CartStatus, UserRole


class CartRequest(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")
    store_id: int = Field(..., gt=0, description="ID sklepu (musi być > 0)")
    quantity: int = Field(..., gt=0, description="Ilość produktu (musi być > 0)")


class OrderRequest(BaseModel):
    """Schema dla zlozenia zamowienia z koszyka."""

    delivery_address: str = Field(..., min_length=1, max_length=255, description="Adres dostawy")
    phone_number: str = Field(..., min_length=1, max_length=30, description="Telefon kontaktowy")
    request_message: str | None = Field(None, max_length=500, description="Uwagi do zamówienia")


class CartProductOut(BaseModel):
    """Schema dla pozycji koszyka (response)."""

    cart_id: int
    product_id: int
    name: str
    price: int
    quantity: int


class CartItemOut(BaseModel):
    product_id: int
    name: str
    price: int
    quantity: int
    line_total: int


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    cart_id: int
    user_id: int
    store_id: int
    store_name: str
    status: CartStatus
    ordered: bool
    items: List[CartItemOut]
    total_price: int
    delivery_address: str | None = None
    phone_number: str | None = None
    request_message: str | None = None
    ordered_at: datetime | None = None


class StoreRequest(BaseModel):
    """Schema dla tworzenia i edycji sklepu."""

    name: str = Field(..., min_length=1, max_length=100, description="Nazwa sklepu")
    description: str | None = Field(None, description="Opis sklepu")
    address: str | None = Field(None, max_length=255)
    phone_number: str | None = Field(None, max_length=30)


class StoreOut(BaseModel):
    id: int
    user_id: int
    name: str
    description: str | None = None
    address: str | None = None
    phone_number: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ProductRequest(BaseModel):
    """Schema dla dodawania produktu do sklepu."""

    name: str = Field(..., min_length=1, max_length=100, description="Nazwa produktu")
    price: int = Field(..., ge=0, description="Cena w najmniejszej jednostce waluty")
    description: str | None = None


class ProductOut(BaseModel):
    id: int
    store_id: int
    name: str
    price: int
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class UserCreate(BaseModel):
    """Schema dla tworzenia użytkownika."""

    name: str = Field(..., min_length=1, max_length=100, description="Imię użytkownika")
    role: UserRole = UserRole.CONSUMER


class UserRead(BaseModel):
    """Schema dla użytkownika (response)."""

    id: int
    name: str
    role: UserRole

    model_config = ConfigDict(from_attributes=True)


class MessageOut(BaseModel):
    message: str

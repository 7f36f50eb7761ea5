# ezelectronics/db/schemas.py
from datetime import date
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

from ezelectronics.db.models import RoleEnum, CategoryEnum

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CamelModel(BaseModel):
    """Base schema speaking camelCase on the wire and snake_case in Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def _empty_to_none(value):
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


# Users
class UserCreate(CamelModel):
    username: NonEmptyStr
    name: NonEmptyStr
    surname: NonEmptyStr
    password: NonEmptyStr
    role: RoleEnum


class UserUpdate(CamelModel):
    name: NonEmptyStr
    surname: NonEmptyStr
    address: NonEmptyStr
    birthdate: date


class UserSchema(CamelModel):
    username: str
    name: str
    surname: str
    role: RoleEnum
    address: Optional[str] = None
    birthdate: Optional[date] = None


class LoginRequest(CamelModel):
    username: NonEmptyStr
    password: NonEmptyStr


# Products
class ProductCreate(CamelModel):
    model: NonEmptyStr
    category: CategoryEnum
    quantity: int = Field(ge=0)
    details: Optional[str] = None
    selling_price: float = Field(gt=0)
    arrival_date: Optional[date] = None

    @field_validator("arrival_date", mode="before")
    @classmethod
    def blank_date(cls, value):
        return _empty_to_none(value)


class ProductRestock(CamelModel):
    quantity: int = Field(gt=0)
    change_date: Optional[date] = None

    @field_validator("change_date", mode="before")
    @classmethod
    def blank_date(cls, value):
        return _empty_to_none(value)


class ProductSell(CamelModel):
    quantity: int = Field(gt=0)
    selling_date: Optional[date] = None

    @field_validator("selling_date", mode="before")
    @classmethod
    def blank_date(cls, value):
        return _empty_to_none(value)


class ProductSchema(CamelModel):
    model: str
    category: CategoryEnum
    quantity: int
    details: Optional[str] = None
    selling_price: float
    arrival_date: date


class QuantityResponse(CamelModel):
    quantity: int


# Carts
class CartAdd(CamelModel):
    model: NonEmptyStr


class ProductInCartSchema(CamelModel):
    model: str
    quantity: int
    category: CategoryEnum
    price: float


class CartSchema(CamelModel):
    customer: str
    paid: bool = False
    payment_date: Optional[date] = None
    total: float = 0.0
    products: List[ProductInCartSchema] = []


# Reviews
class ReviewCreate(CamelModel):
    score: int = Field(ge=1, le=5)
    comment: NonEmptyStr


class ReviewSchema(CamelModel):
    model: str
    user: str
    score: int
    date: date
    comment: str

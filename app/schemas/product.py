from decimal import Decimal
from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, Field

from app.models.enums import ProductType
from app.schemas.common import PageMeta


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1)
    type: ProductType

    price: Decimal = Field(
        ...,
        gt=0,
        lt=100_000_000,
        max_digits=10,
        decimal_places=2,
        description="Price must be below 100 million, at most 2 decimal places"
    )

    unit: str = Field(..., min_length=1)
    current_stock: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    is_active: bool = True


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    type: ProductType | None = None
    price: Decimal | None = Field(None, gt=0, lt=100_000_000, max_digits=10, decimal_places=2)
    unit: str | None = None
    is_active: bool | None = None

class StockUpdate(BaseModel):
    quantity: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    operation: Literal["add", "subtract"]

class ProductResponse(BaseModel):
    id: int
    name: str
    type: ProductType
    price: Decimal
    unit: str
    current_stock: Decimal
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True

class ProductListResponse(BaseModel):
    data: List[ProductResponse]
    meta: PageMeta

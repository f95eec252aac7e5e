# schemas/sale.py

from pydantic import BaseModel, Field
from datetime import datetime
from typing import List
from decimal import Decimal

from app.models.enums import PaymentType
from app.schemas.common import PageMeta


class SaleItemCreate(BaseModel):
    product_id: int
    quantity: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    unit_price: Decimal = Field(..., gt=0, lt=100_000_000, max_digits=10, decimal_places=2)

class SaleCreate(BaseModel):
    customer_id: int
    items: List[SaleItemCreate]
    payment_type: PaymentType = PaymentType.CASH
    paid_amount: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    notes: str | None = None

class ReturnItemRequest(BaseModel):
    sale_item_id: int
    return_quantity: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    reason: str | None = None


class SaleCustomerResponse(BaseModel):
    id: int
    name: str
    current_debt: Decimal

    class Config:
        from_attributes = True

class SaleItemResponse(BaseModel):
    id: int
    product_id: int
    quantity: Decimal
    unit_price: Decimal
    total_price: Decimal
    returned_quantity: Decimal

    class Config:
        from_attributes = True

class SaleResponse(BaseModel):
    id: int
    customer_id: int
    total_amount: Decimal
    paid_amount: Decimal
    remaining_amount: Decimal
    payment_type: PaymentType
    notes: str | None
    created_by_id: int
    created_at: datetime
    customer: SaleCustomerResponse
    items: List[SaleItemResponse]

    class Config:
        from_attributes = True

class SaleListResponse(BaseModel):
    data: List[SaleResponse]
    meta: PageMeta

class TodaySalesResponse(BaseModel):
    total_sales: int
    total_amount: Decimal

# schemas/customer.py

from decimal import Decimal
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from app.models.enums import PaymentMethod
from app.schemas.common import PageMeta


class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=1)
    company_name: str | None = None
    phone_number: str | None = None
    address: str | None = None

class CustomerUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    company_name: str | None = None
    phone_number: str | None = None
    address: str | None = None
    is_active: bool | None = None

class CustomerResponse(BaseModel):
    id: int
    name: str
    company_name: str | None
    phone_number: str | None
    address: str | None
    current_debt: Decimal
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True

class CustomerListResponse(BaseModel):
    data: List[CustomerResponse]
    meta: PageMeta


class PaymentCreate(BaseModel):
    customer_id: int
    sale_id: int | None = None
    amount: Decimal = Field(..., gt=0, lt=100_000_000, max_digits=10, decimal_places=2)
    method: PaymentMethod = PaymentMethod.CASH
    notes: str | None = None

class PaymentResponse(BaseModel):
    id: int
    customer_id: int
    sale_id: int | None
    amount: Decimal
    method: PaymentMethod
    notes: str | None
    received_by_id: int
    created_at: datetime

    class Config:
        from_attributes = True

class PaymentListResponse(BaseModel):
    data: List[PaymentResponse]
    meta: PageMeta


class DebtReconciliationResponse(BaseModel):
    customer_id: int
    current_debt: Decimal
    outstanding_sales_total: Decimal
    difference: Decimal

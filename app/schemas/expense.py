# schemas/expense.py

from datetime import date as date_type, datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field

from app.models.enums import ExpenseCategory
from app.schemas.common import PageMeta


class ExpenseCreate(BaseModel):
    description: str = Field(..., min_length=1)
    category: ExpenseCategory = ExpenseCategory.OTHER
    amount: Decimal = Field(..., gt=0, lt=100_000_000, max_digits=10, decimal_places=2)
    date: date_type
    notes: str | None = None

class ExpenseUpdate(BaseModel):
    description: str | None = Field(None, min_length=1)
    category: ExpenseCategory | None = None
    amount: Decimal | None = Field(None, gt=0, lt=100_000_000, max_digits=10, decimal_places=2)
    date: date_type | None = None
    notes: str | None = None

class ExpenseResponse(BaseModel):
    id: int
    description: str
    category: ExpenseCategory
    amount: Decimal
    date: date_type
    notes: str | None
    created_by_id: int
    created_at: datetime

    class Config:
        from_attributes = True

class ExpenseListResponse(BaseModel):
    data: List[ExpenseResponse]
    meta: PageMeta

# schemas/warehouse.py

from decimal import Decimal
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from app.models.enums import MaterialType, MovementType
from app.schemas.common import PageMeta


class RawMaterialCreate(BaseModel):
    name: str = Field(..., min_length=1)
    type: MaterialType = MaterialType.OTHER
    unit: str = Field(..., min_length=1)
    current_stock: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    min_stock_level: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    cost_per_unit: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)

class RawMaterialUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    type: MaterialType | None = None
    unit: str | None = None
    min_stock_level: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    cost_per_unit: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)

class RawMaterialResponse(BaseModel):
    id: int
    name: str
    type: MaterialType
    unit: str
    current_stock: Decimal
    min_stock_level: Decimal
    cost_per_unit: Decimal
    created_at: datetime

    class Config:
        from_attributes = True

class RawMaterialListResponse(BaseModel):
    data: List[RawMaterialResponse]
    meta: PageMeta


class MovementCreate(BaseModel):
    raw_material_id: int
    type: MovementType
    quantity: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    unit_cost: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    notes: str | None = None

class MovementResponse(BaseModel):
    id: int
    raw_material_id: int
    type: MovementType
    quantity: Decimal
    unit_cost: Decimal | None
    notes: str | None
    created_by_id: int
    created_at: datetime

    class Config:
        from_attributes = True

class MovementListResponse(BaseModel):
    data: List[MovementResponse]
    meta: PageMeta

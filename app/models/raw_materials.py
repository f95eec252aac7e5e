# app/models/raw_materials.py

from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, Numeric, String

from app.database import Base
from app.models.enums import MaterialType, check_in


class RawMaterial(Base):
    __tablename__ = "raw_materials"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False, default=MaterialType.OTHER.value)
    unit = Column(String, nullable=False)

    current_stock = Column(Numeric(10, 2), nullable=False, default=0)
    min_stock_level = Column(Numeric(10, 2), nullable=False, default=0)
    cost_per_unit = Column(Numeric(10, 2), nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    __table_args__ = (
        CheckConstraint(check_in("type", MaterialType), name="ck_material_type_valid"),
        CheckConstraint("current_stock >= 0", name="ck_material_stock_non_negative"),
        CheckConstraint("min_stock_level >= 0", name="ck_material_min_stock_non_negative"),
        CheckConstraint("cost_per_unit >= 0", name="ck_material_cost_non_negative"),
    )

# app/models/warehouse_movements.py

from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.enums import MovementType, check_in


class WarehouseMovement(Base):
    __tablename__ = "warehouse_movements"

    id = Column(Integer, primary_key=True, index=True)

    raw_material_id = Column(
        Integer,
        ForeignKey("raw_materials.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    type = Column(String, nullable=False)
    quantity = Column(Numeric(10, 2), nullable=False)
    unit_cost = Column(Numeric(10, 2), nullable=True)
    notes = Column(Text, nullable=True)

    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=datetime.now, nullable=False, index=True)

    raw_material = relationship("RawMaterial")

    __table_args__ = (
        CheckConstraint(check_in("type", MovementType), name="ck_movement_type_valid"),
        CheckConstraint("quantity > 0", name="ck_movement_quantity_positive"),
    )

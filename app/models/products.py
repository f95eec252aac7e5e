# app/models/products.py

from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, Numeric, String, UniqueConstraint

from app.database import Base
from app.models.enums import ProductType, check_in


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    unit = Column(String, nullable=False)  # piece, bottle, kg
    current_stock = Column(Numeric(10, 2), nullable=False, default=0)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    __table_args__ = (
        UniqueConstraint("name", name="uq_product_name"),
        CheckConstraint(check_in("type", ProductType), name="ck_product_type_valid"),
        CheckConstraint("price > 0", name="ck_product_price_positive"),
        CheckConstraint("current_stock >= 0", name="ck_product_stock_non_negative"),
    )

# models/sales.py

from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.enums import PaymentType, check_in


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)

    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)

    total_amount = Column(Numeric(10, 2), nullable=False)
    paid_amount = Column(Numeric(10, 2), nullable=False, default=0)
    remaining_amount = Column(Numeric(10, 2), nullable=False, default=0)

    payment_type = Column(String, nullable=False, default=PaymentType.CASH.value)
    notes = Column(Text, nullable=True)

    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=datetime.now, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    items = relationship(
        "SaleItem",
        back_populates="sale",
        cascade="all, delete-orphan",
        order_by="SaleItem.id",
    )

    customer = relationship("Customer")
    created_by = relationship("User")

    __table_args__ = (
        Index("ix_sales_customer_created", "customer_id", "created_at"),
        CheckConstraint(check_in("payment_type", PaymentType), name="ck_sale_payment_type_valid"),
        CheckConstraint("total_amount >= 0", name="ck_sale_total_non_negative"),
        CheckConstraint("paid_amount >= 0", name="ck_sale_paid_non_negative"),
        CheckConstraint("remaining_amount >= 0", name="ck_sale_remaining_non_negative"),
    )

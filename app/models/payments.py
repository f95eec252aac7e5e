# app/models/payments.py

from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.enums import PaymentMethod, check_in


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)

    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)

    # Null for a general payment against the customer's debt
    sale_id = Column(Integer, ForeignKey("sales.id"), nullable=True, index=True)

    amount = Column(Numeric(10, 2), nullable=False)
    method = Column(String, nullable=False, default=PaymentMethod.CASH.value)
    notes = Column(Text, nullable=True)

    received_by_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=datetime.now, nullable=False)

    received_by = relationship("User")

    __table_args__ = (
        Index("ix_payments_customer_created", "customer_id", "created_at"),
        CheckConstraint(check_in("method", PaymentMethod), name="ck_payment_method_valid"),
        CheckConstraint("amount > 0", name="ck_payment_amount_positive"),
    )

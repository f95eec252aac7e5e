# app/models/customers.py

from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, Numeric, String, Text

from app.database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    company_name = Column(String, nullable=True)
    phone_number = Column(String, nullable=True)
    address = Column(Text, nullable=True)

    # Outstanding balance across all sales, mutated only by sales, payments and returns
    current_debt = Column(Numeric(10, 2), nullable=False, default=0)

    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    __table_args__ = (
        CheckConstraint("current_debt >= 0", name="ck_customer_debt_non_negative"),
    )

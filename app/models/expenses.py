# app/models/expenses.py

from datetime import datetime

from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text

from app.database import Base
from app.models.enums import ExpenseCategory, check_in


class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String, nullable=False)
    category = Column(String, nullable=False, default=ExpenseCategory.OTHER.value, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)

    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=datetime.now, nullable=False)

    __table_args__ = (
        CheckConstraint(check_in("category", ExpenseCategory), name="ck_expense_category_valid"),
        CheckConstraint("amount > 0", name="ck_expense_amount_positive"),
    )

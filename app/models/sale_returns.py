# models/sale_returns.py

from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, Text

from app.database import Base


class SaleReturn(Base):
    """Audit row for every accepted return against a sale line."""

    __tablename__ = "sale_returns"

    id = Column(Integer, primary_key=True, index=True)

    sale_id = Column(Integer, ForeignKey("sales.id", ondelete="CASCADE"), nullable=False, index=True)
    sale_item_id = Column(Integer, ForeignKey("sale_items.id", ondelete="CASCADE"), nullable=False)

    quantity = Column(Numeric(10, 2), nullable=False)
    refund_amount = Column(Numeric(10, 2), nullable=False)

    # Part of the refund that was taken off the customer's debt
    debt_reduction = Column(Numeric(10, 2), nullable=False, default=0)

    reason = Column(Text, nullable=True)

    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_sale_return_quantity_positive"),
    )

# =========================================================
# REPORTS SERVICE (READ ONLY)
#
# Dashboard stats and the monthly sales vs expenses report.
# Day windows use server-local midnight boundaries.
# =========================================================

from datetime import date, datetime, timedelta
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.customers import Customer
from app.models.enums import ProductType
from app.models.products import Product
from app.models.sale_items import SaleItem
from app.models.sales import Sale
from app.services.expenses import month_bounds, period_label, sum_expenses
from app.services.sales import day_bounds

CENT = Decimal("0.01")
TOP_DEBTORS_LIMIT = 5
SALES_CHART_DAYS = 7


def _decimal(value) -> Decimal:
    return Decimal(str(value or 0)).quantize(CENT)


def _sales_summary(db: Session, start_dt: datetime, end_dt: datetime):
    total_amount, total_count = (
        db.query(
            func.coalesce(func.sum(Sale.total_amount), 0),
            func.count(Sale.id),
        )
        .filter(Sale.created_at.between(start_dt, end_dt))
        .one()
    )
    return _decimal(total_amount), total_count or 0


def get_dashboard_stats(db: Session, today: date | None = None) -> dict:
    today = today or date.today()
    start_dt, end_dt = day_bounds(today)

    # Today's sales
    total_amount, total_count = _sales_summary(db, start_dt, end_dt)

    total_quantity = (
        db.query(func.coalesce(func.sum(SaleItem.quantity), 0))
        .join(Sale, SaleItem.sale_id == Sale.id)
        .filter(Sale.created_at.between(start_dt, end_dt))
        .scalar()
    )

    # Current stock per product type
    stock_rows = (
        db.query(Product.type, func.coalesce(func.sum(Product.current_stock), 0))
        .group_by(Product.type)
        .all()
    )
    current_stock = {product_type.value: Decimal("0.00") for product_type in ProductType}
    for product_type, total in stock_rows:
        current_stock[product_type] = _decimal(total)

    # Top debtors
    debtors = (
        db.query(Customer)
        .filter(Customer.current_debt > 0)
        .order_by(Customer.current_debt.desc(), Customer.id.asc())
        .limit(TOP_DEBTORS_LIMIT)
        .all()
    )

    # Sales for the last 7 days, oldest first
    sales_chart = []
    for i in range(SALES_CHART_DAYS - 1, -1, -1):
        day = today - timedelta(days=i)
        day_total, _ = _sales_summary(db, *day_bounds(day))
        sales_chart.append({"date": day, "sales": day_total})

    return {
        "today_sales": {
            "total_amount": total_amount,
            "total_count": total_count,
            "total_quantity": _decimal(total_quantity),
        },
        "current_stock": current_stock,
        "top_debtors": [
            {
                "customer_id": customer.id,
                "customer_name": customer.name,
                "debt": customer.current_debt,
            }
            for customer in debtors
        ],
        "sales_chart": sales_chart,
    }


def get_monthly_report(db: Session, year: int, month: int) -> dict:
    start_date, end_date = month_bounds(year, month)

    start_dt = datetime.combine(start_date, datetime.min.time())
    end_dt = datetime.combine(end_date, datetime.max.time())

    total_sales, total_transactions = _sales_summary(db, start_dt, end_dt)
    total_expenses = sum_expenses(db, start_date, end_date)

    return {
        "period": period_label(year, month),
        "start_date": start_date,
        "end_date": end_date,
        "total_sales": total_sales,
        "total_expenses": total_expenses,
        "profit": total_sales - total_expenses,
        "total_transactions": total_transactions,
    }

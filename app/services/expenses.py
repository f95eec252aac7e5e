# app/services/expenses.py

from calendar import monthrange
from datetime import MAXYEAR, MINYEAR, date
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.exceptions import InvalidInputError, NotFoundError
from app.core.pagination import paginate
from app.models.enums import ExpenseCategory
from app.models.expenses import Expense
from app.models.users import User
from app.schemas.expense import ExpenseCreate, ExpenseUpdate


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of the month, both inclusive."""
    if not 1 <= month <= 12:
        raise InvalidInputError("Month must be between 1 and 12")

    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidInputError(f"Year must be between {MINYEAR} and {MAXYEAR}")

    last_day = monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def period_label(year: int, month: int) -> str:
    return f"{year}-{month:02d}"


def create_expense(db: Session, data: ExpenseCreate, user: User) -> Expense:
    payload = data.model_dump()
    payload["category"] = data.category.value

    expense = Expense(**payload, created_by_id=user.id)

    db.add(expense)
    db.commit()
    db.refresh(expense)

    return expense


def list_expenses(db: Session, page: int = 1, limit: int = 10) -> dict:
    query = db.query(Expense).order_by(Expense.date.desc(), Expense.id.desc())
    return paginate(query, page, limit)


def get_expense(db: Session, expense_id: int) -> Expense:
    expense = db.query(Expense).filter(Expense.id == expense_id).first()

    if not expense:
        raise NotFoundError(f"Expense with ID {expense_id} not found")

    return expense


def update_expense(db: Session, expense_id: int, data: ExpenseUpdate) -> Expense:
    expense = get_expense(db, expense_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        if field == "category" and value is not None:
            value = value.value
        setattr(expense, field, value)

    db.commit()
    db.refresh(expense)

    return expense


def delete_expense(db: Session, expense_id: int) -> None:
    expense = get_expense(db, expense_id)

    db.delete(expense)
    db.commit()


def list_expenses_by_category(db: Session, category: ExpenseCategory, page: int = 1, limit: int = 10) -> dict:
    query = (
        db.query(Expense)
        .filter(Expense.category == category.value)
        .order_by(Expense.date.desc(), Expense.id.desc())
    )
    return paginate(query, page, limit)


def list_expenses_by_date_range(db: Session, start_date: date, end_date: date) -> list[Expense]:
    if end_date < start_date:
        raise InvalidInputError("End date must not be before start date")

    return (
        db.query(Expense)
        .filter(Expense.date.between(start_date, end_date))
        .order_by(Expense.date.desc(), Expense.id.desc())
        .all()
    )


def sum_expenses(db: Session, start_date: date, end_date: date) -> Decimal:
    total = (
        db.query(func.coalesce(func.sum(Expense.amount), 0))
        .filter(Expense.date.between(start_date, end_date))
        .scalar()
    )
    return Decimal(str(total or 0)).quantize(Decimal("0.01"))


def get_monthly_expenses(db: Session, year: int, month: int) -> dict:
    start_date, end_date = month_bounds(year, month)

    rows = (
        db.query(
            Expense.category.label("category"),
            func.coalesce(func.sum(Expense.amount), 0).label("total"),
            func.count(Expense.id).label("count"),
        )
        .filter(Expense.date.between(start_date, end_date))
        .group_by(Expense.category)
        .order_by(Expense.category.asc())
        .all()
    )

    return {
        "period": period_label(year, month),
        "start_date": start_date,
        "end_date": end_date,
        "total_amount": sum_expenses(db, start_date, end_date),
        "categories": [
            {
                "category": row.category,
                "total": Decimal(str(row.total or 0)).quantize(Decimal("0.01")),
                "count": row.count,
            }
            for row in rows
        ],
    }

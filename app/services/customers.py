# =========================================================
# CUSTOMERS & DEBT SERVICE
#
# Customer records, payments against a customer or a sale,
# debtor listings and a debt reconciliation check.
# =========================================================

import logging
from decimal import Decimal

from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import AppError, ConflictError, InvalidAmountError, NotFoundError
from app.core.pagination import paginate
from app.models.customers import Customer
from app.models.payments import Payment
from app.models.sales import Sale
from app.models.users import User
from app.schemas.customer import CustomerCreate, CustomerUpdate, PaymentCreate

logger = logging.getLogger("app")

ZERO = Decimal("0.00")


def _search_filter(search: str):
    pattern = f"%{search}%"
    return or_(
        Customer.name.ilike(pattern),
        Customer.company_name.ilike(pattern),
        Customer.phone_number.ilike(pattern),
    )


# =========================================================
# CUSTOMER CRUD
# =========================================================
def create_customer(db: Session, data: CustomerCreate) -> Customer:
    customer = Customer(**data.model_dump(), current_debt=ZERO)

    db.add(customer)
    db.commit()
    db.refresh(customer)

    return customer


def list_customers(db: Session, page: int = 1, limit: int = 10, search: str | None = None) -> dict:
    query = db.query(Customer)

    if search:
        query = query.filter(_search_filter(search))

    return paginate(query.order_by(Customer.name.asc(), Customer.id.asc()), page, limit)


def search_customers(db: Session, search: str) -> list[Customer]:
    return (
        db.query(Customer)
        .filter(_search_filter(search))
        .order_by(Customer.name.asc())
        .limit(10)
        .all()
    )


def get_customer(db: Session, customer_id: int) -> Customer:
    customer = db.query(Customer).filter(Customer.id == customer_id).first()

    if not customer:
        raise NotFoundError(f"Customer with ID {customer_id} not found")

    return customer


def update_customer(db: Session, customer_id: int, data: CustomerUpdate) -> Customer:
    customer = get_customer(db, customer_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(customer, field, value)

    db.commit()
    db.refresh(customer)

    return customer


def delete_customer(db: Session, customer_id: int) -> None:
    customer = get_customer(db, customer_id)

    sales_count = db.query(func.count(Sale.id)).filter(Sale.customer_id == customer_id).scalar()
    if sales_count:
        raise ConflictError("Cannot delete customer with existing sales records")

    if customer.current_debt > 0:
        raise ConflictError("Cannot delete customer with outstanding debt")

    db.delete(customer)
    db.commit()


# =========================================================
# PAYMENTS
# =========================================================
def add_payment(db: Session, data: PaymentCreate, user: User) -> Payment:
    try:
        customer = (
            db.query(Customer)
            .filter(Customer.id == data.customer_id)
            .with_for_update()
            .first()
        )

        if not customer:
            raise NotFoundError(f"Customer with ID {data.customer_id} not found")

        sale = None
        if data.sale_id is not None:
            sale = (
                db.query(Sale)
                .filter(
                    Sale.id == data.sale_id,
                    Sale.customer_id == customer.id,
                )
                .with_for_update()
                .first()
            )

            if not sale:
                raise NotFoundError(f"Sale with ID {data.sale_id} not found for this customer")

            if data.amount > sale.remaining_amount:
                raise InvalidAmountError("Payment amount exceeds remaining sale amount")

        elif data.amount > customer.current_debt:
            raise InvalidAmountError("Payment amount exceeds customer debt")

        payment = Payment(
            customer_id=customer.id,
            sale_id=sale.id if sale else None,
            amount=data.amount,
            method=data.method.value,
            notes=data.notes,
            received_by_id=user.id,
        )
        db.add(payment)

        customer.current_debt = max(ZERO, customer.current_debt - data.amount)

        if sale:
            sale.paid_amount += data.amount
            sale.remaining_amount -= data.amount

        db.commit()
        db.refresh(payment)

    except AppError:
        db.rollback()
        raise

    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Payment for customer {data.customer_id} failed")
        raise

    logger.info(
        f"Payment {payment.id} of {data.amount} recorded for customer {data.customer_id}"
        + (f" against sale {data.sale_id}" if data.sale_id else "")
    )

    return payment


def get_customer_payments(db: Session, customer_id: int, page: int = 1, limit: int = 10) -> dict:
    get_customer(db, customer_id)

    query = (
        db.query(Payment)
        .filter(Payment.customer_id == customer_id)
        .order_by(Payment.created_at.desc(), Payment.id.desc())
    )
    return paginate(query, page, limit)


def get_customers_with_debt(db: Session) -> list[Customer]:
    return (
        db.query(Customer)
        .filter(Customer.current_debt > 0)
        .order_by(Customer.current_debt.desc(), Customer.id.asc())
        .all()
    )


def get_debt_reconciliation(db: Session, customer_id: int) -> dict:
    """Compare booked debt with the unpaid remainder of the customer's sales.

    General payments reduce debt without touching any sale, so a non-zero
    difference is expected for customers who paid that way.
    """
    customer = get_customer(db, customer_id)

    outstanding = (
        db.query(func.coalesce(func.sum(Sale.remaining_amount), 0))
        .filter(Sale.customer_id == customer_id)
        .scalar()
    )
    outstanding = Decimal(str(outstanding or 0)).quantize(Decimal("0.01"))

    return {
        "customer_id": customer.id,
        "current_debt": customer.current_debt,
        "outstanding_sales_total": outstanding,
        "difference": outstanding - customer.current_debt,
    }

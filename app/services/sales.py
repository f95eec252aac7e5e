# =========================================================
# SALE TRANSACTION SERVICE
#
# - create_sale: persists sale + items, takes stock, books debt
# - return_items: restocks a line and reverses its debt
# - today's aggregate and paginated listings
#
# Every mutation runs in one transaction: rows it changes are
# locked FOR UPDATE, committed once, rolled back on any error.
# =========================================================

import logging
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.core.exceptions import (
    AppError,
    InsufficientStockError,
    InvalidAmountError,
    InvalidInputError,
    InvalidQuantityError,
    NotFoundError,
)
from app.core.pagination import paginate
from app.models.customers import Customer
from app.models.products import Product
from app.models.sale_items import SaleItem
from app.models.sale_returns import SaleReturn
from app.models.sales import Sale
from app.models.users import User
from app.schemas.sale import ReturnItemRequest, SaleCreate

logger = logging.getLogger("app")

ZERO = Decimal("0.00")
CENT = Decimal("0.01")


def _money(value) -> Decimal:
    return Decimal(str(value)).quantize(CENT)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """First and last instant of ``day`` in server-local time."""
    return (
        datetime.combine(day, datetime.min.time()),
        datetime.combine(day, datetime.max.time()),
    )


def _sale_query(db: Session):
    return (
        db.query(Sale)
        .options(
            joinedload(Sale.items),
            joinedload(Sale.customer),
        )
    )


# =========================================================
# CREATE SALE
# =========================================================
def create_sale(db: Session, data: SaleCreate, user: User) -> Sale:
    try:
        customer = (
            db.query(Customer)
            .filter(Customer.id == data.customer_id)
            .with_for_update()
            .first()
        )

        if not customer:
            raise NotFoundError(f"Customer with ID {data.customer_id} not found")

        if not data.items:
            raise InvalidInputError("Sale must contain items")

        total_amount = ZERO
        sale_items = []

        for item in data.items:
            product = (
                db.query(Product)
                .filter(Product.id == item.product_id)
                .with_for_update()
                .first()
            )

            if not product:
                raise NotFoundError(f"Product with ID {item.product_id} not found")

            # Earlier lines for the same product have already been taken off
            if product.current_stock < item.quantity:
                raise InsufficientStockError(f"Insufficient stock for product {product.name}")

            line_total = _money(item.quantity * item.unit_price)
            total_amount += line_total

            product.current_stock -= item.quantity

            sale_items.append(
                SaleItem(
                    product_id=product.id,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    total_price=line_total,
                    returned_quantity=ZERO,
                )
            )

        paid_amount = _money(data.paid_amount)

        if paid_amount > total_amount:
            raise InvalidAmountError("Paid amount exceeds sale total")

        remaining_amount = total_amount - paid_amount

        sale = Sale(
            customer_id=customer.id,
            total_amount=total_amount,
            paid_amount=paid_amount,
            remaining_amount=remaining_amount,
            payment_type=data.payment_type.value,
            notes=data.notes,
            created_by_id=user.id,
            items=sale_items,
        )
        db.add(sale)

        if remaining_amount > 0:
            customer.current_debt += remaining_amount

        db.commit()

    except AppError:
        db.rollback()
        raise

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Sale creation failed")
        raise

    logger.info(
        f"Sale {sale.id} created for customer {customer.id}: "
        f"total={total_amount} paid={paid_amount} remaining={remaining_amount}"
    )

    return get_sale(db, sale.id)


# =========================================================
# READS
# =========================================================
def get_sale(db: Session, sale_id: int) -> Sale:
    sale = _sale_query(db).filter(Sale.id == sale_id).first()

    if not sale:
        raise NotFoundError(f"Sale with ID {sale_id} not found")

    return sale


def list_sales(db: Session, page: int = 1, limit: int = 10) -> dict:
    query = _sale_query(db).order_by(Sale.created_at.desc(), Sale.id.desc())
    return paginate(query, page, limit)


def list_customer_sales(db: Session, customer_id: int, page: int = 1, limit: int = 10) -> dict:
    query = (
        _sale_query(db)
        .filter(Sale.customer_id == customer_id)
        .order_by(Sale.created_at.desc(), Sale.id.desc())
    )
    return paginate(query, page, limit)


def get_todays_sales(db: Session, day: date | None = None) -> dict:
    start_dt, end_dt = day_bounds(day or date.today())

    total_sales, total_amount = (
        db.query(
            func.count(Sale.id),
            func.coalesce(func.sum(Sale.total_amount), 0),
        )
        .filter(Sale.created_at.between(start_dt, end_dt))
        .one()
    )

    return {
        "total_sales": total_sales or 0,
        "total_amount": _money(total_amount or 0),
    }


# =========================================================
# RETURN ITEMS
# =========================================================
def return_items(db: Session, sale_id: int, data: ReturnItemRequest, user: User) -> Sale:
    try:
        sale = (
            db.query(Sale)
            .filter(Sale.id == sale_id)
            .with_for_update()
            .first()
        )

        if not sale:
            raise NotFoundError(f"Sale with ID {sale_id} not found")

        sale_item = (
            db.query(SaleItem)
            .filter(
                SaleItem.id == data.sale_item_id,
                SaleItem.sale_id == sale.id,
            )
            .with_for_update()
            .first()
        )

        if not sale_item:
            raise NotFoundError(f"Sale item with ID {data.sale_item_id} not found in this sale")

        returnable = sale_item.quantity - sale_item.returned_quantity
        if data.return_quantity > returnable:
            raise InvalidQuantityError("Return quantity exceeds available quantity")

        product = (
            db.query(Product)
            .filter(Product.id == sale_item.product_id)
            .with_for_update()
            .first()
        )
        customer = (
            db.query(Customer)
            .filter(Customer.id == sale.customer_id)
            .with_for_update()
            .first()
        )

        sale_item.returned_quantity += data.return_quantity
        product.current_stock += data.return_quantity

        refund_amount = _money(data.return_quantity * sale_item.unit_price)

        previous_remaining = sale.remaining_amount
        sale.total_amount -= refund_amount
        sale.remaining_amount = max(ZERO, sale.total_amount - sale.paid_amount)

        # Only the unpaid part of the refund was ever booked as debt
        debt_reduction = previous_remaining - sale.remaining_amount
        customer.current_debt = max(ZERO, customer.current_debt - debt_reduction)

        db.add(
            SaleReturn(
                sale_id=sale.id,
                sale_item_id=sale_item.id,
                quantity=data.return_quantity,
                refund_amount=refund_amount,
                debt_reduction=debt_reduction,
                reason=data.reason,
                created_by_id=user.id,
            )
        )

        db.commit()

    except AppError:
        db.rollback()
        raise

    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Return on sale {sale_id} failed")
        raise

    logger.info(
        f"Return on sale {sale_id}: item={data.sale_item_id} qty={data.return_quantity} "
        f"refund={refund_amount} debt_reduction={debt_reduction}"
    )

    return get_sale(db, sale_id)

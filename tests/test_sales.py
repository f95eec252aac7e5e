from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.core.exceptions import (
    InsufficientStockError,
    InvalidAmountError,
    InvalidInputError,
    InvalidQuantityError,
    NotFoundError,
)
from app.models.sale_returns import SaleReturn
from app.models.sales import Sale
from app.schemas.customer import PaymentCreate
from app.schemas.sale import ReturnItemRequest, SaleCreate, SaleItemCreate
from app.services import customers as customers_service
from app.services import sales as sales_service


def _sale(customer, product, quantity, unit_price, paid="0"):
    return SaleCreate(
        customer_id=customer.id,
        items=[SaleItemCreate(product_id=product.id, quantity=quantity, unit_price=unit_price)],
        paid_amount=Decimal(paid),
    )


def test_create_sale_books_remaining_as_debt(db, admin_user, customer, bread):
    sale = sales_service.create_sale(db, _sale(customer, bread, 10, 5, paid="20"), admin_user)

    assert sale.total_amount == Decimal("50.00")
    assert sale.paid_amount == Decimal("20.00")
    assert sale.remaining_amount == Decimal("30.00")
    assert len(sale.items) == 1
    assert sale.items[0].total_price == Decimal("50.00")
    assert sale.items[0].returned_quantity == 0

    db.refresh(customer)
    db.refresh(bread)
    assert customer.current_debt == Decimal("30.00")
    assert bread.current_stock == Decimal("90")


def test_fully_paid_sale_leaves_debt_untouched(db, admin_user, customer, bread):
    sale = sales_service.create_sale(db, _sale(customer, bread, 2, 5, paid="10"), admin_user)

    assert sale.remaining_amount == 0
    db.refresh(customer)
    assert customer.current_debt == 0


def test_sale_totals_sum_all_lines(db, admin_user, customer, bread, water):
    data = SaleCreate(
        customer_id=customer.id,
        items=[
            SaleItemCreate(product_id=bread.id, quantity=3, unit_price=Decimal("4.50")),
            SaleItemCreate(product_id=water.id, quantity=4, unit_price=Decimal("0.75")),
        ],
    )

    sale = sales_service.create_sale(db, data, admin_user)

    assert sale.total_amount == Decimal("16.50")
    assert [item.product_id for item in sale.items] == [bread.id, water.id]
    db.refresh(customer)
    assert customer.current_debt == Decimal("16.50")


def test_insufficient_stock_changes_nothing(db, admin_user, customer, bread):
    with pytest.raises(InsufficientStockError):
        sales_service.create_sale(db, _sale(customer, bread, 1000, 5), admin_user)

    db.refresh(bread)
    db.refresh(customer)
    assert bread.current_stock == Decimal("100")
    assert customer.current_debt == 0
    assert db.query(Sale).count() == 0


def test_failing_second_line_rolls_back_first(db, admin_user, customer, bread, water):
    data = SaleCreate(
        customer_id=customer.id,
        items=[
            SaleItemCreate(product_id=bread.id, quantity=10, unit_price=5),
            SaleItemCreate(product_id=water.id, quantity=21, unit_price=1),
        ],
    )

    with pytest.raises(InsufficientStockError):
        sales_service.create_sale(db, data, admin_user)

    db.refresh(bread)
    db.refresh(water)
    assert bread.current_stock == Decimal("100")
    assert water.current_stock == Decimal("20")


def test_repeated_product_lines_share_stock(db, admin_user, customer, water):
    data = SaleCreate(
        customer_id=customer.id,
        items=[
            SaleItemCreate(product_id=water.id, quantity=15, unit_price=1),
            SaleItemCreate(product_id=water.id, quantity=10, unit_price=1),
        ],
    )

    with pytest.raises(InsufficientStockError):
        sales_service.create_sale(db, data, admin_user)

    db.refresh(water)
    assert water.current_stock == Decimal("20")


def test_unknown_customer_or_product(db, admin_user, customer, bread):
    missing_customer = SaleCreate(
        customer_id=9999,
        items=[SaleItemCreate(product_id=bread.id, quantity=1, unit_price=5)],
    )
    with pytest.raises(NotFoundError):
        sales_service.create_sale(db, missing_customer, admin_user)

    missing_product = SaleCreate(
        customer_id=customer.id,
        items=[SaleItemCreate(product_id=9999, quantity=1, unit_price=5)],
    )
    with pytest.raises(NotFoundError):
        sales_service.create_sale(db, missing_product, admin_user)


def test_empty_sale_is_rejected(db, admin_user, customer):
    with pytest.raises(InvalidInputError):
        sales_service.create_sale(db, SaleCreate(customer_id=customer.id, items=[]), admin_user)


def test_overpaid_sale_is_rejected(db, admin_user, customer, bread):
    with pytest.raises(InvalidAmountError):
        sales_service.create_sale(db, _sale(customer, bread, 1, 5, paid="6"), admin_user)

    db.refresh(bread)
    assert bread.current_stock == Decimal("100")


def test_payment_then_return_keeps_debt_consistent(db, admin_user, customer, bread):
    sale = sales_service.create_sale(db, _sale(customer, bread, 10, 5, paid="20"), admin_user)

    customers_service.add_payment(
        db,
        PaymentCreate(customer_id=customer.id, sale_id=sale.id, amount=Decimal("30")),
        admin_user,
    )
    db.refresh(sale)
    assert sale.paid_amount == Decimal("50.00")
    assert sale.remaining_amount == 0

    sale = sales_service.return_items(
        db,
        sale.id,
        ReturnItemRequest(sale_item_id=sale.items[0].id, return_quantity=Decimal("2")),
        admin_user,
    )

    db.refresh(customer)
    db.refresh(bread)
    assert sale.total_amount == Decimal("40.00")
    assert sale.remaining_amount == 0
    assert sale.items[0].returned_quantity == Decimal("2")
    assert bread.current_stock == Decimal("92")
    assert customer.current_debt == 0

    record = db.query(SaleReturn).one()
    assert record.refund_amount == Decimal("10.00")
    assert record.debt_reduction == 0


def test_return_on_unpaid_sale_reduces_debt(db, admin_user, customer, bread):
    sale = sales_service.create_sale(db, _sale(customer, bread, 10, 5, paid="20"), admin_user)

    sale = sales_service.return_items(
        db,
        sale.id,
        ReturnItemRequest(sale_item_id=sale.items[0].id, return_quantity=Decimal("2"), reason="stale"),
        admin_user,
    )

    db.refresh(customer)
    assert sale.total_amount == Decimal("40.00")
    assert sale.remaining_amount == Decimal("20.00")
    assert customer.current_debt == Decimal("20.00")

    record = db.query(SaleReturn).one()
    assert record.debt_reduction == Decimal("10.00")
    assert record.reason == "stale"


def test_return_beyond_available_quantity_changes_nothing(db, admin_user, customer, bread):
    sale = sales_service.create_sale(db, _sale(customer, bread, 10, 5), admin_user)
    item_id = sale.items[0].id

    sales_service.return_items(
        db, sale.id, ReturnItemRequest(sale_item_id=item_id, return_quantity=Decimal("6")), admin_user
    )

    with pytest.raises(InvalidQuantityError):
        sales_service.return_items(
            db, sale.id, ReturnItemRequest(sale_item_id=item_id, return_quantity=Decimal("5")), admin_user
        )

    sale = sales_service.get_sale(db, sale.id)
    db.refresh(bread)
    db.refresh(customer)
    assert sale.items[0].returned_quantity == Decimal("6")
    assert sale.total_amount == Decimal("20.00")
    assert bread.current_stock == Decimal("96")
    assert customer.current_debt == Decimal("20.00")
    assert db.query(SaleReturn).count() == 1


def test_return_requires_item_of_the_same_sale(db, admin_user, customer, bread):
    first = sales_service.create_sale(db, _sale(customer, bread, 2, 5), admin_user)
    second = sales_service.create_sale(db, _sale(customer, bread, 2, 5), admin_user)

    with pytest.raises(NotFoundError):
        sales_service.return_items(
            db,
            second.id,
            ReturnItemRequest(sale_item_id=first.items[0].id, return_quantity=Decimal("1")),
            admin_user,
        )

    with pytest.raises(NotFoundError):
        sales_service.return_items(
            db, 9999, ReturnItemRequest(sale_item_id=1, return_quantity=Decimal("1")), admin_user
        )


def test_todays_sales_ignores_other_days(db, admin_user, customer, bread):
    sales_service.create_sale(db, _sale(customer, bread, 2, 5), admin_user)
    old = sales_service.create_sale(db, _sale(customer, bread, 4, 5), admin_user)

    old.created_at = datetime.now() - timedelta(days=1)
    db.commit()

    summary = sales_service.get_todays_sales(db, date.today())

    assert summary["total_sales"] == 1
    assert summary["total_amount"] == Decimal("10.00")


def test_list_sales_newest_first(db, admin_user, customer, other_customer, bread):
    first = sales_service.create_sale(db, _sale(customer, bread, 1, 5), admin_user)
    second = sales_service.create_sale(db, _sale(other_customer, bread, 1, 5), admin_user)
    first.created_at = datetime.now() - timedelta(hours=1)
    db.commit()

    page = sales_service.list_sales(db, page=1, limit=10)
    assert [sale.id for sale in page["data"]] == [second.id, first.id]
    assert page["meta"]["total"] == 2

    page = sales_service.list_customer_sales(db, customer.id)
    assert [sale.id for sale in page["data"]] == [first.id]


def test_sub_cent_quantities_never_reach_the_ledger():
    with pytest.raises(ValidationError):
        SaleItemCreate(product_id=1, quantity=Decimal("0.004"), unit_price=Decimal("1"))

    with pytest.raises(ValidationError):
        SaleCreate(customer_id=1, items=[], paid_amount=Decimal("10.001"))

    with pytest.raises(ValidationError):
        ReturnItemRequest(sale_item_id=1, return_quantity=Decimal("1.125"))

from decimal import Decimal

import pytest

from app.core.exceptions import ConflictError, InvalidAmountError, NotFoundError
from app.models.customers import Customer
from app.models.payments import Payment
from app.schemas.customer import CustomerCreate, CustomerUpdate, PaymentCreate
from app.schemas.sale import SaleCreate, SaleItemCreate
from app.services import customers as customers_service
from app.services import sales as sales_service


def _credit_sale(db, user, customer, product, quantity=10, unit_price=5):
    return sales_service.create_sale(
        db,
        SaleCreate(
            customer_id=customer.id,
            items=[SaleItemCreate(product_id=product.id, quantity=quantity, unit_price=unit_price)],
        ),
        user,
    )


def test_create_customer_starts_without_debt(db):
    customer = customers_service.create_customer(
        db, CustomerCreate(name="Baker Street Market", company_name="BSM LLC")
    )

    assert customer.id is not None
    assert customer.current_debt == 0
    assert customer.is_active is True


def test_update_customer_changes_only_given_fields(db, customer):
    updated = customers_service.update_customer(db, customer.id, CustomerUpdate(address="Main st. 4"))

    assert updated.address == "Main st. 4"
    assert updated.name == "Corner Shop"


def test_search_matches_name_company_and_phone(db, customer, other_customer):
    assert [c.id for c in customers_service.search_customers(db, "corner")] == [customer.id]
    assert [c.id for c in customers_service.search_customers(db, "1112233")] == [customer.id]

    page = customers_service.list_customers(db, page=1, limit=10, search="cafe")
    assert [c.id for c in page["data"]] == [other_customer.id]
    assert page["meta"]["total"] == 1


def test_general_payment_reduces_debt(db, admin_user, customer, bread):
    _credit_sale(db, admin_user, customer, bread)

    payment = customers_service.add_payment(
        db, PaymentCreate(customer_id=customer.id, amount=Decimal("15")), admin_user
    )

    db.refresh(customer)
    assert payment.sale_id is None
    assert payment.received_by_id == admin_user.id
    assert customer.current_debt == Decimal("35.00")


def test_payment_against_sale_updates_the_sale(db, admin_user, customer, bread):
    sale = _credit_sale(db, admin_user, customer, bread)

    customers_service.add_payment(
        db, PaymentCreate(customer_id=customer.id, sale_id=sale.id, amount=Decimal("20")), admin_user
    )

    db.refresh(sale)
    db.refresh(customer)
    assert sale.paid_amount == Decimal("20.00")
    assert sale.remaining_amount == Decimal("30.00")
    assert customer.current_debt == Decimal("30.00")


def test_payment_above_sale_remaining_is_rejected(db, admin_user, customer, bread):
    sale = _credit_sale(db, admin_user, customer, bread)

    with pytest.raises(InvalidAmountError):
        customers_service.add_payment(
            db, PaymentCreate(customer_id=customer.id, sale_id=sale.id, amount=Decimal("60")), admin_user
        )

    db.refresh(customer)
    assert customer.current_debt == Decimal("50.00")
    assert db.query(Payment).count() == 0


def test_general_payment_above_debt_is_rejected(db, admin_user, customer):
    with pytest.raises(InvalidAmountError):
        customers_service.add_payment(
            db, PaymentCreate(customer_id=customer.id, amount=Decimal("1")), admin_user
        )


def test_payment_for_another_customers_sale(db, admin_user, customer, other_customer, bread):
    sale = _credit_sale(db, admin_user, customer, bread)

    with pytest.raises(NotFoundError):
        customers_service.add_payment(
            db,
            PaymentCreate(customer_id=other_customer.id, sale_id=sale.id, amount=Decimal("5")),
            admin_user,
        )

    with pytest.raises(NotFoundError):
        customers_service.add_payment(
            db, PaymentCreate(customer_id=9999, amount=Decimal("5")), admin_user
        )


def test_customer_payments_newest_first(db, admin_user, customer, bread):
    _credit_sale(db, admin_user, customer, bread)
    first = customers_service.add_payment(
        db, PaymentCreate(customer_id=customer.id, amount=Decimal("5")), admin_user
    )
    second = customers_service.add_payment(
        db, PaymentCreate(customer_id=customer.id, amount=Decimal("7")), admin_user
    )

    page = customers_service.get_customer_payments(db, customer.id)

    assert [p.id for p in page["data"]] == [second.id, first.id]
    assert page["meta"] == {"page": 1, "limit": 10, "total": 2, "total_pages": 1}


def test_customers_with_debt_sorted_by_debt(db, admin_user, customer, other_customer, bread):
    _credit_sale(db, admin_user, customer, bread, quantity=2)
    _credit_sale(db, admin_user, other_customer, bread, quantity=6)
    db.add(Customer(name="Paid Up", current_debt=Decimal("0")))
    db.commit()

    debtors = customers_service.get_customers_with_debt(db)

    assert [c.id for c in debtors] == [other_customer.id, customer.id]


def test_reconciliation_reports_general_payments(db, admin_user, customer, bread):
    sale = _credit_sale(db, admin_user, customer, bread)
    customers_service.add_payment(
        db, PaymentCreate(customer_id=customer.id, sale_id=sale.id, amount=Decimal("10")), admin_user
    )

    result = customers_service.get_debt_reconciliation(db, customer.id)
    assert result["current_debt"] == Decimal("40.00")
    assert result["outstanding_sales_total"] == Decimal("40.00")
    assert result["difference"] == 0

    customers_service.add_payment(
        db, PaymentCreate(customer_id=customer.id, amount=Decimal("15")), admin_user
    )

    result = customers_service.get_debt_reconciliation(db, customer.id)
    assert result["current_debt"] == Decimal("25.00")
    assert result["difference"] == Decimal("15.00")


def test_delete_customer_guards(db, admin_user, customer, other_customer, bread):
    _credit_sale(db, admin_user, customer, bread)

    with pytest.raises(ConflictError):
        customers_service.delete_customer(db, customer.id)

    customers_service.delete_customer(db, other_customer.id)
    with pytest.raises(NotFoundError):
        customers_service.get_customer(db, other_customer.id)

# =========================================================
# CUSTOMERS ROUTER
#
# Customer records, payments and debt views
# =========================================================

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.auth import get_admin_user, get_current_user
from app.core.pagination import PageParams
from app.schemas.customer import (
    CustomerCreate,
    CustomerListResponse,
    CustomerResponse,
    CustomerUpdate,
    DebtReconciliationResponse,
    PaymentCreate,
    PaymentListResponse,
    PaymentResponse,
)
from app.services import customers as customers_service

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    customer_data: CustomerCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return customers_service.create_customer(db, customer_data)


@router.get("", response_model=CustomerListResponse)
def list_customers(
    pagination: PageParams = Depends(),
    search: str | None = Query(None),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return customers_service.list_customers(db, pagination.page, pagination.limit, search)


@router.get("/search", response_model=list[CustomerResponse])
def search_customers(
    q: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return customers_service.search_customers(db, q)


@router.get("/with-debt", response_model=list[CustomerResponse])
def customers_with_debt(
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return customers_service.get_customers_with_debt(db)


# =========================================================
# PAYMENTS
# =========================================================
@router.post("/payments", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def add_payment(
    payment_data: PaymentCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return customers_service.add_payment(db, payment_data, current_user)


@router.get("/{customer_id}/payments", response_model=PaymentListResponse)
def customer_payments(
    customer_id: int,
    pagination: PageParams = Depends(),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return customers_service.get_customer_payments(db, customer_id, pagination.page, pagination.limit)


@router.get("/{customer_id}/reconciliation", response_model=DebtReconciliationResponse)
def debt_reconciliation(
    customer_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return customers_service.get_debt_reconciliation(db, customer_id)


# =========================================================
# SINGLE CUSTOMER
# =========================================================
@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return customers_service.get_customer(db, customer_id)


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: int,
    customer_data: CustomerUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return customers_service.update_customer(db, customer_id, customer_data)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: int,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_user),
):
    customers_service.delete_customer(db, customer_id)
    return None

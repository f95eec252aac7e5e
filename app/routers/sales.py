# =========================================================
# SALES ROUTER
#
# - Create sale (stock + debt in one transaction)
# - Paginated history, per customer history, today's total
# - Return items from a sale
# =========================================================

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.auth import get_current_user
from app.core.pagination import PageParams
from app.core.rate_limiter import limiter
from app.schemas.sale import (
    ReturnItemRequest,
    SaleCreate,
    SaleListResponse,
    SaleResponse,
    TodaySalesResponse,
)
from app.services import sales as sales_service

router = APIRouter(prefix="/sales", tags=["Sales"])


# =========================================================
# CREATE SALE
# =========================================================
@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("30/minute")
def create_sale(
    request: Request,
    sale_data: SaleCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return sales_service.create_sale(db, sale_data, current_user)


# =========================================================
# LIST SALES
# =========================================================
@router.get("", response_model=SaleListResponse)
def list_sales(
    pagination: PageParams = Depends(),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return sales_service.list_sales(db, pagination.page, pagination.limit)


# =========================================================
# TODAY'S SUMMARY
# =========================================================
@router.get("/today", response_model=TodaySalesResponse)
def todays_sales(
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return sales_service.get_todays_sales(db)


@router.get("/customer/{customer_id}", response_model=SaleListResponse)
def customer_sales(
    customer_id: int,
    pagination: PageParams = Depends(),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return sales_service.list_customer_sales(db, customer_id, pagination.page, pagination.limit)


@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(
    sale_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return sales_service.get_sale(db, sale_id)


# =========================================================
# RETURN ITEMS
# =========================================================
@router.patch("/{sale_id}/return", response_model=SaleResponse)
def return_items(
    sale_id: int,
    return_data: ReturnItemRequest,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return sales_service.return_items(db, sale_id, return_data, current_user)

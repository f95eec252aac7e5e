# app/routers/products.py

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.auth import get_admin_user, get_current_user, get_manager_user
from app.core.pagination import PageParams
from app.models.enums import ProductType
from app.schemas.product import (
    ProductCreate,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
    StockUpdate,
)
from app.services import products as products_service

router = APIRouter(
    prefix="/products",
    tags=["Products"],
)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_manager_user),
):
    return products_service.create_product(db, product_data)


@router.get("", response_model=ProductListResponse)
def list_products(
    pagination: PageParams = Depends(),
    type: ProductType | None = Query(None),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return products_service.list_products(db, pagination.page, pagination.limit, type)


@router.get("/active", response_model=list[ProductResponse])
def list_active_products(
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return products_service.list_active_products(db)


@router.get("/type/{product_type}", response_model=list[ProductResponse])
def list_products_by_type(
    product_type: ProductType,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return products_service.list_active_products(db, product_type)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return products_service.get_product(db, product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_manager_user),
):
    return products_service.update_product(db, product_id, product_data)


@router.patch("/{product_id}/stock", response_model=ProductResponse)
def update_stock(
    product_id: int,
    stock_data: StockUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_manager_user),
):
    return products_service.update_stock(db, product_id, stock_data.quantity, stock_data.operation)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_user),
):
    products_service.delete_product(db, product_id)
    return None

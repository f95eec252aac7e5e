# app/routers/warehouse.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.auth import get_admin_user, get_current_user, get_manager_user
from app.core.pagination import PageParams
from app.schemas.warehouse import (
    MovementCreate,
    MovementListResponse,
    MovementResponse,
    RawMaterialCreate,
    RawMaterialListResponse,
    RawMaterialResponse,
    RawMaterialUpdate,
)
from app.services import warehouse as warehouse_service

router = APIRouter(
    prefix="/warehouse",
    tags=["Warehouse"],
)


# =========================================================
# RAW MATERIALS
# =========================================================
@router.post("/materials", response_model=RawMaterialResponse, status_code=status.HTTP_201_CREATED)
def create_raw_material(
    material_data: RawMaterialCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_manager_user),
):
    return warehouse_service.create_raw_material(db, material_data)


@router.get("/materials", response_model=RawMaterialListResponse)
def list_raw_materials(
    pagination: PageParams = Depends(),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return warehouse_service.list_raw_materials(db, pagination.page, pagination.limit)


@router.get("/materials/low-stock", response_model=list[RawMaterialResponse])
def low_stock_materials(
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return warehouse_service.get_low_stock_items(db)


@router.get("/materials/{material_id}", response_model=RawMaterialResponse)
def get_raw_material(
    material_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return warehouse_service.get_raw_material(db, material_id)


@router.put("/materials/{material_id}", response_model=RawMaterialResponse)
def update_raw_material(
    material_id: int,
    material_data: RawMaterialUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_manager_user),
):
    return warehouse_service.update_raw_material(db, material_id, material_data)


@router.delete("/materials/{material_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_raw_material(
    material_id: int,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_user),
):
    warehouse_service.delete_raw_material(db, material_id)
    return None


# =========================================================
# MOVEMENTS
# =========================================================
@router.post("/movements", response_model=MovementResponse, status_code=status.HTTP_201_CREATED)
def add_movement(
    movement_data: MovementCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_manager_user),
):
    return warehouse_service.add_movement(db, movement_data, current_user)


@router.get("/movements", response_model=MovementListResponse)
def list_movements(
    pagination: PageParams = Depends(),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return warehouse_service.list_movements(db, pagination.page, pagination.limit)


@router.get("/movements/material/{material_id}", response_model=MovementListResponse)
def list_material_movements(
    material_id: int,
    pagination: PageParams = Depends(),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return warehouse_service.list_material_movements(db, material_id, pagination.page, pagination.limit)

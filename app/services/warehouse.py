# =========================================================
# WAREHOUSE SERVICE
#
# Raw material records and IN/OUT movements. A movement row
# and its stock change are committed together or not at all.
# =========================================================

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import AppError, InsufficientStockError, NotFoundError
from app.core.pagination import paginate
from app.models.enums import MovementType
from app.models.raw_materials import RawMaterial
from app.models.users import User
from app.models.warehouse_movements import WarehouseMovement
from app.schemas.warehouse import MovementCreate, RawMaterialCreate, RawMaterialUpdate

logger = logging.getLogger("app")


# =========================================================
# RAW MATERIALS
# =========================================================
def create_raw_material(db: Session, data: RawMaterialCreate) -> RawMaterial:
    payload = data.model_dump()
    payload["type"] = data.type.value

    material = RawMaterial(**payload)

    db.add(material)
    db.commit()
    db.refresh(material)

    return material


def list_raw_materials(db: Session, page: int = 1, limit: int = 10) -> dict:
    query = db.query(RawMaterial).order_by(RawMaterial.name.asc(), RawMaterial.id.asc())
    return paginate(query, page, limit)


def get_raw_material(db: Session, material_id: int) -> RawMaterial:
    material = db.query(RawMaterial).filter(RawMaterial.id == material_id).first()

    if not material:
        raise NotFoundError(f"Raw material with ID {material_id} not found")

    return material


def update_raw_material(db: Session, material_id: int, data: RawMaterialUpdate) -> RawMaterial:
    material = get_raw_material(db, material_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        if field == "type" and value is not None:
            value = value.value
        setattr(material, field, value)

    db.commit()
    db.refresh(material)

    return material


def delete_raw_material(db: Session, material_id: int) -> None:
    material = get_raw_material(db, material_id)

    db.query(WarehouseMovement).filter(WarehouseMovement.raw_material_id == material_id).delete()
    db.delete(material)
    db.commit()


def get_low_stock_items(db: Session) -> list[RawMaterial]:
    return (
        db.query(RawMaterial)
        .filter(RawMaterial.current_stock <= RawMaterial.min_stock_level)
        .order_by(RawMaterial.name.asc(), RawMaterial.id.asc())
        .all()
    )


# =========================================================
# MOVEMENTS
# =========================================================
def add_movement(db: Session, data: MovementCreate, user: User) -> WarehouseMovement:
    try:
        material = (
            db.query(RawMaterial)
            .filter(RawMaterial.id == data.raw_material_id)
            .with_for_update()
            .first()
        )

        if not material:
            raise NotFoundError(f"Raw material with ID {data.raw_material_id} not found")

        if data.type == MovementType.OUT and material.current_stock < data.quantity:
            raise InsufficientStockError("Insufficient stock for outbound movement")

        movement = WarehouseMovement(
            raw_material_id=material.id,
            type=data.type.value,
            quantity=data.quantity,
            unit_cost=data.unit_cost,
            notes=data.notes,
            created_by_id=user.id,
        )
        db.add(movement)

        if data.type == MovementType.IN:
            material.current_stock += data.quantity
            if data.unit_cost is not None:
                material.cost_per_unit = data.unit_cost
        else:
            material.current_stock -= data.quantity

        db.commit()
        db.refresh(movement)

    except AppError:
        db.rollback()
        raise

    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Movement on raw material {data.raw_material_id} failed")
        raise

    logger.info(
        f"Movement {movement.id}: {data.type.value.upper()} {data.quantity} "
        f"of raw material {data.raw_material_id}"
    )

    return movement


def list_movements(db: Session, page: int = 1, limit: int = 10) -> dict:
    query = (
        db.query(WarehouseMovement)
        .order_by(WarehouseMovement.created_at.desc(), WarehouseMovement.id.desc())
    )
    return paginate(query, page, limit)


def list_material_movements(db: Session, material_id: int, page: int = 1, limit: int = 10) -> dict:
    get_raw_material(db, material_id)

    query = (
        db.query(WarehouseMovement)
        .filter(WarehouseMovement.raw_material_id == material_id)
        .order_by(WarehouseMovement.created_at.desc(), WarehouseMovement.id.desc())
    )
    return paginate(query, page, limit)

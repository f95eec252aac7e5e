# app/services/products.py

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import AppError, ConflictError, InsufficientStockError, NotFoundError
from app.core.pagination import paginate
from app.models.enums import ProductType
from app.models.products import Product
from app.models.sale_items import SaleItem
from app.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger("app")


def _ensure_unique_name(db: Session, name: str, exclude_id: int | None = None):
    query = db.query(Product).filter(Product.name == name)
    if exclude_id is not None:
        query = query.filter(Product.id != exclude_id)

    if query.first():
        raise ConflictError("Product with this name already exists")


def create_product(db: Session, data: ProductCreate) -> Product:
    _ensure_unique_name(db, data.name)

    payload = data.model_dump()
    payload["type"] = data.type.value

    product = Product(**payload)

    db.add(product)
    db.commit()
    db.refresh(product)

    return product


def list_products(db: Session, page: int = 1, limit: int = 10, product_type: ProductType | None = None) -> dict:
    query = db.query(Product)

    if product_type:
        query = query.filter(Product.type == product_type.value)

    return paginate(query.order_by(Product.name.asc(), Product.id.asc()), page, limit)


def list_active_products(db: Session, product_type: ProductType | None = None) -> list[Product]:
    query = db.query(Product).filter(Product.is_active.is_(True))

    if product_type:
        query = query.filter(Product.type == product_type.value)

    return query.order_by(Product.name.asc()).all()


def get_product(db: Session, product_id: int) -> Product:
    product = db.query(Product).filter(Product.id == product_id).first()

    if not product:
        raise NotFoundError(f"Product with ID {product_id} not found")

    return product


def update_product(db: Session, product_id: int, data: ProductUpdate) -> Product:
    product = get_product(db, product_id)

    changes = data.model_dump(exclude_unset=True)

    if changes.get("name"):
        _ensure_unique_name(db, changes["name"], exclude_id=product.id)

    for field, value in changes.items():
        if field == "type" and value is not None:
            value = value.value
        setattr(product, field, value)

    db.commit()
    db.refresh(product)

    return product


def delete_product(db: Session, product_id: int) -> None:
    product = get_product(db, product_id)

    if db.query(SaleItem).filter(SaleItem.product_id == product_id).first():
        raise ConflictError("Cannot delete product with existing sales records")

    db.delete(product)
    db.commit()


def update_stock(db: Session, product_id: int, quantity, operation: str) -> Product:
    """Manual stock correction; no movement row is written."""
    try:
        product = (
            db.query(Product)
            .filter(Product.id == product_id)
            .with_for_update()
            .first()
        )

        if not product:
            raise NotFoundError(f"Product with ID {product_id} not found")

        if operation == "add":
            product.current_stock += quantity
        else:
            if product.current_stock < quantity:
                raise InsufficientStockError(f"Insufficient stock for product {product.name}")
            product.current_stock -= quantity

        db.commit()
        db.refresh(product)

    except AppError:
        db.rollback()
        raise

    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Stock update on product {product_id} failed")
        raise

    logger.info(f"Stock of product {product_id} corrected: {operation} {quantity} -> {product.current_stock}")

    return product

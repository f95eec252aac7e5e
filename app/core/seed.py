# app/core/seed.py
#
# Default records for a fresh database. Each group is only
# inserted when its table is still empty.

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from app.core.hashing import hash_password
from app.models.customers import Customer
from app.models.enums import MaterialType, ProductType, UserRole
from app.models.products import Product
from app.models.raw_materials import RawMaterial
from app.models.users import User

logger = logging.getLogger("app")

DEFAULT_USERS = [
    ("admin", "admin123", "System Administrator", UserRole.ADMIN),
    ("accountant", "accountant123", "Chief Accountant", UserRole.ACCOUNTANT),
    ("sales", "sales123", "Sales Manager", UserRole.SALES),
]

DEFAULT_PRODUCTS = [
    ("Fresh Bread", ProductType.BREAD, "2.50", "piece", "100"),
    ("Whole Wheat Bread", ProductType.BREAD, "3.00", "piece", "50"),
    ("Drinking Water 0.5L", ProductType.WATER, "0.50", "bottle", "500"),
    ("Drinking Water 1.5L", ProductType.WATER, "1.00", "bottle", "300"),
]

DEFAULT_RAW_MATERIALS = [
    ("Wheat Flour", MaterialType.FLOUR, "kg", "500", "100", "0.80"),
    ("Dry Yeast", MaterialType.YEAST, "kg", "20", "5", "4.50"),
    ("Salt", MaterialType.SALT, "kg", "50", "10", "0.30"),
    ("Water Filter", MaterialType.FILTER, "piece", "10", "2", "15.00"),
    ("PET Bottle 0.5L", MaterialType.BOTTLE, "piece", "1000", "200", "0.05"),
]

DEFAULT_CUSTOMERS = [
    ("Corner Shop", "Corner Shop LLC", "+998901112233", "12 Market Street"),
    ("City Cafe", None, "+998907778899", "4 Central Square"),
]


def seed_initial_data(db: Session) -> None:
    if db.query(User).count() == 0:
        for username, password, full_name, role in DEFAULT_USERS:
            db.add(
                User(
                    username=username,
                    password_hash=hash_password(password),
                    full_name=full_name,
                    role=role.value,
                )
            )
        logger.info("Default users seeded")

    if db.query(Product).count() == 0:
        for name, product_type, price, unit, stock in DEFAULT_PRODUCTS:
            db.add(
                Product(
                    name=name,
                    type=product_type.value,
                    price=Decimal(price),
                    unit=unit,
                    current_stock=Decimal(stock),
                )
            )
        logger.info("Default products seeded")

    if db.query(RawMaterial).count() == 0:
        for name, material_type, unit, stock, min_stock, cost in DEFAULT_RAW_MATERIALS:
            db.add(
                RawMaterial(
                    name=name,
                    type=material_type.value,
                    unit=unit,
                    current_stock=Decimal(stock),
                    min_stock_level=Decimal(min_stock),
                    cost_per_unit=Decimal(cost),
                )
            )
        logger.info("Default raw materials seeded")

    if db.query(Customer).count() == 0:
        for name, company_name, phone_number, address in DEFAULT_CUSTOMERS:
            db.add(
                Customer(
                    name=name,
                    company_name=company_name,
                    phone_number=phone_number,
                    address=address,
                    current_debt=Decimal("0.00"),
                )
            )
        logger.info("Default customers seeded")

    db.commit()

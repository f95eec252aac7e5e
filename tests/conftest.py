"""
Shared fixtures: an in-memory SQLite database rebuilt for every test,
a handful of ledger records, and an authenticated TestClient.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SEED_DEFAULT_DATA", "false")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.core.hashing import hash_password
from app.core.jwt import create_access_token
from app.database import Base, get_db
from app.main import app
from app.models.customers import Customer
from app.models.enums import MaterialType, ProductType, UserRole
from app.models.products import Product
from app.models.raw_materials import RawMaterial
from app.models.users import User


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


def _make_user(db, username, role):
    user = User(
        username=username,
        password_hash=hash_password(f"{username}-pass"),
        full_name=username.title(),
        role=role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin_user(db):
    return _make_user(db, "admin", UserRole.ADMIN)


@pytest.fixture
def sales_user(db):
    return _make_user(db, "seller", UserRole.SALES)


@pytest.fixture
def customer(db):
    customer = Customer(name="Corner Shop", phone_number="+998901112233", current_debt=Decimal("0"))
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


@pytest.fixture
def other_customer(db):
    customer = Customer(name="City Cafe", current_debt=Decimal("0"))
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


@pytest.fixture
def bread(db):
    product = Product(
        name="Fresh Bread",
        type=ProductType.BREAD.value,
        price=Decimal("5.00"),
        unit="piece",
        current_stock=Decimal("100"),
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def water(db):
    product = Product(
        name="Drinking Water 0.5L",
        type=ProductType.WATER.value,
        price=Decimal("0.50"),
        unit="bottle",
        current_stock=Decimal("20"),
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def flour(db):
    material = RawMaterial(
        name="Wheat Flour",
        type=MaterialType.FLOUR.value,
        unit="kg",
        current_stock=Decimal("50"),
        min_stock_level=Decimal("10"),
        cost_per_unit=Decimal("0.80"),
    )
    db.add(material)
    db.commit()
    db.refresh(material)
    return material


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def auth_headers(user):
    token = create_access_token(user.id, user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture
def sales_headers(sales_user):
    return auth_headers(sales_user)

from datetime import datetime, timedelta, timezone

from jose import jwt

from app.core.config import settings
from app.core.hashing import hash_password, verify_password
from app.core.jwt import create_access_token, decode_access_token
from app.core.seed import seed_initial_data
from app.database import creates_schema_on_startup
from app.models.customers import Customer
from app.models.products import Product
from app.models.raw_materials import RawMaterial
from app.models.users import User
from app.services import users as users_service


def test_password_hashing():
    hashed = hash_password("s3cret!")

    assert hashed != "s3cret!"
    assert verify_password("s3cret!", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("s3cret!", "")


def test_access_token_round_trip():
    token = create_access_token(7, "sales")
    payload = decode_access_token(token)

    assert payload["sub"] == "7"
    assert payload["role"] == "sales"
    assert payload["type"] == "access"


def test_expired_or_foreign_tokens_are_refused():
    expired = create_access_token(1, "admin", expires_delta=timedelta(minutes=-1))
    assert decode_access_token(expired) is None

    exp = datetime.now(timezone.utc) + timedelta(minutes=5)

    refresh = jwt.encode(
        {"sub": "1", "type": "refresh", "exp": exp}, settings.SECRET_KEY, algorithm=settings.ALGORITHM
    )
    assert decode_access_token(refresh) is None

    anonymous = jwt.encode({"type": "access", "exp": exp}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    assert decode_access_token(anonymous) is None

    forged = jwt.encode(
        {"sub": "1", "type": "access", "exp": exp}, "another-key", algorithm=settings.ALGORITHM
    )
    assert decode_access_token(forged) is None


def test_seed_only_fills_empty_tables(db):
    seed_initial_data(db)
    seed_initial_data(db)

    assert db.query(User).count() == 3
    assert db.query(Product).count() == 4
    assert db.query(RawMaterial).count() == 5
    assert db.query(Customer).count() == 2

    assert users_service.authenticate(db, "admin", "admin123").role == "admin"
    assert users_service.authenticate(db, "admin", "wrong") is None


def test_inactive_users_cannot_authenticate(db, sales_user):
    sales_user.is_active = False
    db.commit()

    assert users_service.authenticate(db, "seller", "seller-pass") is None


def test_schema_is_only_built_for_sqlite():
    assert creates_schema_on_startup("sqlite://")
    assert creates_schema_on_startup("sqlite:///./bakery.db")
    assert not creates_schema_on_startup("postgresql://bakery:secret@db:5432/bakery")

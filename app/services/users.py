# app/services/users.py

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.core.hashing import hash_password, verify_password
from app.models.users import User
from app.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger("app")


def authenticate(db: Session, username: str, password: str) -> User | None:
    user = db.query(User).filter(User.username == username).first()

    if not user or not user.is_active or not verify_password(password, user.password_hash):
        return None

    return user


def create_user(db: Session, data: UserCreate) -> User:
    if db.query(User).filter(User.username == data.username).first():
        raise ConflictError("User already exists")

    user = User(
        username=data.username,
        password_hash=hash_password(data.password),
        full_name=data.full_name,
        role=data.role.value,
    )

    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"User {user.username} created with role {user.role}")

    return user


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id.asc()).all()


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()

    if not user:
        raise NotFoundError("User not found")

    return user


def update_user(db: Session, user_id: int, data: UserUpdate) -> User:
    user = get_user(db, user_id)
    changes = data.model_dump(exclude_unset=True)

    username = changes.get("username")
    if username:
        existing = db.query(User).filter(User.username == username).first()
        if existing and existing.id != user.id:
            raise ConflictError("Username already exists")

    password = changes.pop("password", None)
    if password:
        user.password_hash = hash_password(password)

    for field, value in changes.items():
        if field == "role" and value is not None:
            value = value.value
        setattr(user, field, value)

    db.commit()
    db.refresh(user)

    return user


def delete_user(db: Session, user_id: int) -> None:
    user = get_user(db, user_id)

    try:
        db.delete(user)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("User has recorded sales, payments or movements; deactivate instead")

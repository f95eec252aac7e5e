# app/models/users.py

from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, String

from app.database import Base
from app.models.enums import UserRole, check_in


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    full_name = Column(String, nullable=False)

    # admin / accountant / sales
    role = Column(String, nullable=False, default=UserRole.SALES.value)

    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.now, nullable=False)

    __table_args__ = (
        CheckConstraint(check_in("role", UserRole), name="ck_user_role_valid"),
    )

from pydantic import BaseModel, Field
from datetime import datetime

from app.models.enums import UserRole


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=72, description="Plain password (will be hashed)")
    full_name: str = Field(..., min_length=1)
    role: UserRole = UserRole.SALES

class UserUpdate(BaseModel):
    username: str | None = Field(None, min_length=3, max_length=50)
    password: str | None = Field(None, min_length=6, max_length=72)
    full_name: str | None = None
    role: UserRole | None = None
    is_active: bool | None = None

class UserResponse(BaseModel):
    id: int
    username: str
    full_name: str
    role: UserRole
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse

from fastapi import APIRouter, Depends, HTTPException, status, Request
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.user import TokenResponse, UserCreate, UserResponse
from app.core.auth import get_admin_user, get_current_user
from app.core.jwt import create_access_token
from app.core.rate_limiter import limiter
from app.services import users as users_service

router = APIRouter(prefix="/auth", tags=["Authentication"])


# ---------------- LOGIN (TOKEN-BASED) ----------------
@router.post("/login", response_model=TokenResponse)
@limiter.limit("5/minute")
def login(
    request: Request,
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    user = users_service.authenticate(db, form_data.username, form_data.password)

    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    token = create_access_token(user.id, user.role)

    return {
        "access_token": token,
        "token_type": "bearer",
        "user": user,
    }


# ---------------- REGISTER (ADMIN ONLY) ----------------
@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_user),
):
    return users_service.create_user(db, user_data)


# ---------------- CURRENT USER ----------------
@router.get("/me", response_model=UserResponse)
def me(current_user=Depends(get_current_user)):
    return current_user

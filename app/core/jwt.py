# app/core/jwt.py
#
# Access tokens carry the user id as "sub" and the role name,
# so clients can adapt their UI without an extra /auth/me call.

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from app.core.config import settings

TOKEN_TYPE = "access"


def create_access_token(user_id: int, role: str, expires_delta: timedelta | None = None) -> str:
    issued_at = datetime.now(timezone.utc)
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    claims = {
        "sub": str(user_id),
        "role": role,
        "type": TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }

    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict | None:
    """Claims of a valid access token, None for anything else."""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None

    if claims.get("type") != TOKEN_TYPE or not claims.get("sub"):
        return None

    return claims

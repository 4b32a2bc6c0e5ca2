"""
Email/password authentication.

Passwords are hashed with bcrypt; sessions are stateless HS256 JWTs
carrying the user id (`sub`) and email.
"""

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt
from fastapi import HTTPException, Request, status

from nudgequest.config import config
from nudgequest.database.models import User
from nudgequest.storage import user_repo


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=12)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(user: User, now: datetime | None = None) -> str:
    """Issue a JWT valid for JWT_EXPIRES_DAYS."""
    now = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(user.id),
        "email": user.email,
        "iat": now,
        "exp": now + timedelta(days=config.JWT_EXPIRES_DAYS),
    }
    return jwt.encode(
        payload, config.JWT_SECRET.get_secret_value(), algorithm=config.JWT_ALGORITHM
    )


def decode_access_token(token: str) -> dict | None:
    """
    Decode and verify a JWT.

    Returns:
        Payload dict if valid, None if expired or tampered with
    """
    try:
        return jwt.decode(
            token,
            config.JWT_SECRET.get_secret_value(),
            algorithms=[config.JWT_ALGORITHM],
        )
    except jwt.InvalidTokenError:
        return None


async def get_current_user(request: Request) -> User:
    """
    FastAPI dependency for authenticated endpoints.

    Usage:
        @router.get("/api/users/me")
        async def get_me(user: User = Depends(get_current_user)):
            ...

    Raises:
        HTTPException 401 if the token is missing or its user is gone,
        403 if the token is invalid
    """
    auth_header = request.headers.get("Authorization")

    # Expect format: "Bearer <token>"
    parts = auth_header.split(" ", 1) if auth_header else []
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
        )

    payload = decode_access_token(parts[1])
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token",
        )

    try:
        user_id = int(payload.get("sub", ""))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token",
        )

    user = await user_repo.get_user(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    return user

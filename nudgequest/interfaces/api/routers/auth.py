"""
Auth API router.

Endpoints:
- POST /api/auth/register - Create an account and get a token
- POST /api/auth/login - Exchange credentials for a token
"""

import logging

from fastapi import APIRouter, HTTPException, status
from tortoise.exceptions import IntegrityError

from nudgequest.interfaces.api.auth import (
    create_access_token,
    hash_password,
    verify_password,
)
from nudgequest.interfaces.api.routers.users import build_user_response
from nudgequest.interfaces.api.schemas import AuthResponse, LoginRequest, RegisterRequest
from nudgequest.storage import user_repo

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest) -> AuthResponse:
    """Create a new account. New users start with 100 coins."""
    email = request.email.lower()

    if await user_repo.get_by_email(email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered"
        )
    if await user_repo.get_by_username(request.username):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Username already taken"
        )

    try:
        user = await user_repo.create_user(
            email=email,
            username=request.username,
            password_hash=hash_password(request.password),
        )
    except IntegrityError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email or username already registered",
        )

    logger.info(f"User {user.id} registered ({request.username})")
    return AuthResponse(token=create_access_token(user), user=await build_user_response(user))


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest) -> AuthResponse:
    user = await user_repo.get_by_email(request.email.lower())
    if not user or not verify_password(request.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        )

    logger.info(f"User {user.id} logged in")
    return AuthResponse(token=create_access_token(user), user=await build_user_response(user))

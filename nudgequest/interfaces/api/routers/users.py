"""
User API router.

Endpoints:
- GET /api/users/me - Get current user profile
- PUT /api/users/me - Update current user profile
- GET /api/users/profile - Get public part of the profile
- PUT /api/users/profile - Update profile (same as PUT /me)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from nudgequest.core.domain.gamification import xp_to_next_level
from nudgequest.database.models import User
from nudgequest.interfaces.api.auth import get_current_user
from nudgequest.interfaces.api.schemas import (
    ProfileResponse,
    ProfileUpdateRequest,
    UserResponse,
)
from nudgequest.storage import badge_repo, user_repo

router = APIRouter(prefix="/api/users", tags=["users"])
logger = logging.getLogger(__name__)


async def build_user_response(user: User) -> UserResponse:
    """User profile with derived fields (next level, earned badges)."""
    response = UserResponse.model_validate(user)
    response.xp_to_next_level = xp_to_next_level(user.xp)
    response.badges = sorted(await badge_repo.earned_codes(user.id))
    return response


async def _update_profile(user: User, request: ProfileUpdateRequest) -> User:
    changes = request.model_dump(exclude_unset=True)

    if "username" in changes and changes["username"] != user.username:
        if await user_repo.get_by_username(changes["username"]):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username already taken",
            )

    for key, value in changes.items():
        if value is None and key not in ("avatar", "bio"):
            continue
        setattr(user, key, value)

    await user_repo.save_user(user)
    logger.info(f"Profile updated for user {user.id}: {', '.join(changes)}")
    return user


@router.get("/me", response_model=UserResponse)
async def get_me(user: User = Depends(get_current_user)) -> UserResponse:
    """Get current user profile with gamification stats."""
    return await build_user_response(user)


@router.put("/me", response_model=UserResponse)
async def update_me(
    request: ProfileUpdateRequest,
    user: User = Depends(get_current_user),
) -> UserResponse:
    user = await _update_profile(user, request)
    return await build_user_response(user)


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(user: User = Depends(get_current_user)) -> ProfileResponse:
    return ProfileResponse.model_validate(user)


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    user: User = Depends(get_current_user),
) -> ProfileResponse:
    user = await _update_profile(user, request)
    return ProfileResponse.model_validate(user)

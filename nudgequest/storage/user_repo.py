"""
User Repository - plain CRUD operations for the User model.

AICODE-NOTE: Data access only, NO business logic.
Level/bonus rules live in core/domain/gamification.py.
"""

from datetime import date
from typing import Optional

from tortoise.expressions import F

from nudgequest.core.domain.gamification import RewardOutcome
from nudgequest.database.models import User


async def get_user(user_id: int) -> Optional[User]:
    """Get user by id."""
    return await User.get_or_none(id=user_id)


async def get_user_for_update(user_id: int) -> Optional[User]:
    """Get user by id, locking the row inside a transaction."""
    return await User.filter(id=user_id).select_for_update().first()


async def get_by_email(email: str) -> Optional[User]:
    return await User.get_or_none(email=email)


async def get_by_username(username: str) -> Optional[User]:
    return await User.get_or_none(username=username)


async def create_user(email: str, username: str, password_hash: str) -> User:
    return await User.create(
        email=email, username=username, password_hash=password_hash
    )


async def list_users() -> list[User]:
    return await User.all()


async def list_discoverable(exclude_id: int) -> list[User]:
    """Users with discovery switched on, except the viewer."""
    return await User.filter(discovery_enabled=True).exclude(id=exclude_id).all()


async def apply_reward(
    user: User, outcome: RewardOutcome, active_on: date | None = None
) -> User:
    """Persist a resolved reward."""
    user.xp = outcome.xp
    user.coins = outcome.coins
    user.level = outcome.level
    if active_on is not None:
        user.last_active_date = active_on
    await user.save(update_fields=["xp", "coins", "level", "last_active_date"])
    return user


async def credit_wallet(user_id: int, coins: int = 0, gems: int = 0) -> bool:
    """Add coins/gems atomically."""
    updated = await User.filter(id=user_id).update(
        coins=F("coins") + coins, gems=F("gems") + gems
    )
    return updated == 1


async def update_streak(user: User, new_streak: int) -> User:
    """Update user streak."""
    user.streak = new_streak
    await user.save(update_fields=["streak"])
    return user


async def set_premium(user: User, is_premium: bool, expires_at=None) -> User:
    user.is_premium = is_premium
    user.premium_expires_at = expires_at if is_premium else None
    await user.save(update_fields=["is_premium", "premium_expires_at"])
    return user


async def save_user(user: User) -> User:
    """Save user changes."""
    await user.save()
    return user

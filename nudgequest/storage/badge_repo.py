"""
Badge Repository - plain CRUD operations for the UserBadge model.

AICODE-NOTE: Data access only, NO business logic.
"""

from tortoise.exceptions import IntegrityError

from nudgequest.database.models import UserBadge


async def earned_codes(user_id: int) -> set[str]:
    codes = await UserBadge.filter(user_id=user_id).values_list("badge", flat=True)
    return set(codes)


async def award(user_id: int, badge: str) -> bool:
    """Award a badge; False if the user already has it."""
    try:
        await UserBadge.create(user_id=user_id, badge=badge)
    except IntegrityError:
        return False
    return True

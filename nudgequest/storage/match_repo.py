"""
Match Repository - plain CRUD operations for the Match model.

AICODE-NOTE: Data access only. Pairs must be normalised by the caller
(core/domain/matching.match_pair).
"""

from tortoise.exceptions import IntegrityError
from tortoise.expressions import Q

from nudgequest.database.models import Match


async def get_match(user_one_id: int, user_two_id: int) -> Match | None:
    return await Match.get_or_none(user_one_id=user_one_id, user_two_id=user_two_id)


async def get_or_create_match(user_one_id: int, user_two_id: int) -> tuple[Match, bool]:
    """
    Create the match for a normalised pair once.

    A concurrent insert for the same pair hits the unique constraint; the
    existing row is returned instead.
    """
    existing = await get_match(user_one_id, user_two_id)
    if existing:
        return existing, False
    try:
        return await Match.create(user_one_id=user_one_id, user_two_id=user_two_id), True
    except IntegrityError:
        return await Match.get(user_one_id=user_one_id, user_two_id=user_two_id), False


async def list_matches(user_id: int) -> list[Match]:
    return (
        await Match.filter(Q(user_one_id=user_id) | Q(user_two_id=user_id))
        .prefetch_related("user_one", "user_two")
        .order_by("-created_at")
        .all()
    )

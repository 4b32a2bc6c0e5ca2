"""
Friendship Repository - plain CRUD operations for the Friendship model.

AICODE-NOTE: Data access only, NO business logic.
One row per unordered pair, enforced by the unique pair_key.
"""

from datetime import datetime

from tortoise.exceptions import IntegrityError
from tortoise.expressions import Q

from nudgequest.core.domain.matching import match_pair
from nudgequest.database.models import Friendship


def pair_key(user_a_id: int, user_b_id: int) -> str:
    return "{}:{}".format(*match_pair(user_a_id, user_b_id))


async def get_friendship(friendship_id: int) -> Friendship | None:
    return await Friendship.get_or_none(id=friendship_id)


async def get_between(user_a_id: int, user_b_id: int) -> Friendship | None:
    """Friendship in either direction."""
    return await Friendship.get_or_none(pair_key=pair_key(user_a_id, user_b_id))


async def create_request(
    requester_id: int, addressee_id: int, status: str = "PENDING",
    accepted_at: datetime | None = None,
) -> Friendship | None:
    """Create the pair's friendship; None if the pair already has one."""
    try:
        return await Friendship.create(
            requester_id=requester_id,
            addressee_id=addressee_id,
            status=status,
            accepted_at=accepted_at,
            pair_key=pair_key(requester_id, addressee_id),
        )
    except IntegrityError:
        return None


async def accept(friendship: Friendship, accepted_at: datetime) -> bool:
    """
    Flip PENDING -> ACCEPTED.

    Returns False if the request was already accepted.
    """
    updated = await Friendship.filter(id=friendship.id, status="PENDING").update(
        status="ACCEPTED", accepted_at=accepted_at
    )
    if updated:
        friendship.status = "ACCEPTED"
        friendship.accepted_at = accepted_at
    return updated == 1


async def list_accepted(user_id: int) -> list[Friendship]:
    return (
        await Friendship.filter(
            Q(requester_id=user_id) | Q(addressee_id=user_id), status="ACCEPTED"
        )
        .prefetch_related("requester", "addressee")
        .order_by("-accepted_at")
        .all()
    )


async def list_incoming_pending(user_id: int) -> list[Friendship]:
    return (
        await Friendship.filter(addressee_id=user_id, status="PENDING")
        .prefetch_related("requester")
        .order_by("-created_at")
        .all()
    )

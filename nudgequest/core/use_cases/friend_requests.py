"""
Friend Request Use Cases - send and accept friend requests.

AICODE-NOTE: At most one friendship row exists per pair of users,
whichever side sent the request.
"""

import logging
from dataclasses import dataclass, field

from nudgequest.core.domain.badge_rules import TRIGGER_FRIEND_ADDED
from nudgequest.core.domain.timeutils import utcnow
from nudgequest.database.models import Friendship
from nudgequest.storage import friend_repo, user_repo

from .rewards import award_badges

logger = logging.getLogger(__name__)


@dataclass
class FriendRequestResult:
    success: bool
    friendship: Friendship | None = None
    new_badges: list[str] = field(default_factory=list)
    error_message: str = ""
    error_code: str = ""


class SendFriendRequestUseCase:
    async def execute(self, requester_id: int, addressee_id: int) -> FriendRequestResult:
        if requester_id == addressee_id:
            return FriendRequestResult(
                success=False,
                error_message="Cannot send a friend request to yourself",
                error_code="invalid",
            )
        if not await user_repo.get_user(addressee_id):
            return FriendRequestResult(
                success=False, error_message="User not found", error_code="not_found"
            )
        if await friend_repo.get_between(requester_id, addressee_id):
            return FriendRequestResult(
                success=False,
                error_message="Friend request already exists",
                error_code="invalid",
            )

        friendship = await friend_repo.create_request(requester_id, addressee_id)
        if friendship is None:
            return FriendRequestResult(
                success=False,
                error_message="Friend request already exists",
                error_code="invalid",
            )

        logger.info(f"Friend request {friendship.id}: {requester_id} -> {addressee_id}")
        return FriendRequestResult(success=True, friendship=friendship)


class AcceptFriendRequestUseCase:
    async def execute(self, friendship_id: int, user_id: int) -> FriendRequestResult:
        friendship = await friend_repo.get_friendship(friendship_id)
        if not friendship:
            return FriendRequestResult(
                success=False, error_message="Friend request not found", error_code="not_found"
            )
        if friendship.addressee_id != user_id:
            return FriendRequestResult(
                success=False,
                error_message="Only the addressee can accept this request",
                error_code="forbidden",
            )
        if friendship.status == "ACCEPTED":
            return FriendRequestResult(
                success=False,
                error_message="Friend request already accepted",
                error_code="invalid",
            )

        if not await friend_repo.accept(friendship, utcnow()):
            return FriendRequestResult(
                success=False,
                error_message="Friend request already accepted",
                error_code="invalid",
            )

        new_badges = await award_badges(user_id, TRIGGER_FRIEND_ADDED)
        await award_badges(friendship.requester_id, TRIGGER_FRIEND_ADDED)

        logger.info(f"Friend request {friendship_id} accepted by user {user_id}")
        return FriendRequestResult(success=True, friendship=friendship, new_badges=new_badges)

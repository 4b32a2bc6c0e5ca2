"""
Record Swipe Use Case - store a swipe and detect mutual matches.

AICODE-NOTE: A match needs a RIGHT swipe in both directions. The pair is
normalised before insert, so the unique constraint on matches resolves
reciprocal swipes that arrive at the same time.
"""

import logging
from dataclasses import dataclass

from nudgequest.core.domain.badge_rules import TRIGGER_FRIEND_ADDED
from nudgequest.core.domain.matching import DIRECTIONS, RIGHT, is_mutual, match_pair
from nudgequest.core.domain.timeutils import utcnow
from nudgequest.database.models import Match
from nudgequest.services import notifications
from nudgequest.storage import friend_repo, match_repo, swipe_repo, user_repo

from .rewards import award_badges

logger = logging.getLogger(__name__)


@dataclass
class SwipeResult:
    """Result of a swipe."""

    success: bool
    is_match: bool = False
    match: Match | None = None
    error_message: str = ""
    error_code: str = ""


class RecordSwipeUseCase:
    """Use-case for discovery swipes."""

    async def execute(self, swiper_id: int, swiped_id: int, direction: str) -> SwipeResult:
        direction = direction.upper()
        if direction not in DIRECTIONS:
            return SwipeResult(
                success=False,
                error_message="Direction must be LEFT or RIGHT",
                error_code="invalid",
            )
        if swiper_id == swiped_id:
            return SwipeResult(
                success=False, error_message="Cannot swipe on yourself", error_code="invalid"
            )
        if not await user_repo.get_user(swiped_id):
            return SwipeResult(
                success=False, error_message="User not found", error_code="not_found"
            )

        await swipe_repo.upsert_swipe(swiper_id, swiped_id, direction)
        logger.info(f"User {swiper_id} swiped {direction} on user {swiped_id}")

        if direction != RIGHT:
            return SwipeResult(success=True)

        reciprocal = await swipe_repo.get_swipe(swiped_id, swiper_id)
        if not is_mutual(direction, reciprocal.direction if reciprocal else None):
            return SwipeResult(success=True)

        user_one_id, user_two_id = match_pair(swiper_id, swiped_id)
        match, created = await match_repo.get_or_create_match(user_one_id, user_two_id)

        await self._befriend(swiper_id, swiped_id)
        if created:
            logger.info(f"Match {match.id} created: users {user_one_id} and {user_two_id}")
            await notifications.send_match_notification(swiper_id, swiped_id)
            await notifications.send_match_notification(swiped_id, swiper_id)

        return SwipeResult(success=True, is_match=True, match=match)

    async def _befriend(self, user_a_id: int, user_b_id: int) -> bool:
        """
        Matched users become friends: accept a pending request or create one accepted.

        Runs on every mutual swipe so a friendship missed by a concurrent
        request is repaired. Returns True if this call made them friends.
        """
        now = utcnow()
        friendship = await friend_repo.get_between(user_a_id, user_b_id)
        if friendship is None:
            friendship = await friend_repo.create_request(
                user_a_id, user_b_id, status="ACCEPTED", accepted_at=now
            )
            if friendship is None:
                # Another request for this pair landed first
                friendship = await friend_repo.get_between(user_a_id, user_b_id)
            else:
                await self._award_friend_badges(user_a_id, user_b_id)
                return True
        if friendship is None or friendship.status == "ACCEPTED":
            return False
        if not await friend_repo.accept(friendship, now):
            return False
        await self._award_friend_badges(user_a_id, user_b_id)
        return True

    async def _award_friend_badges(self, user_a_id: int, user_b_id: int) -> None:
        for user_id in (user_a_id, user_b_id):
            await award_badges(user_id, TRIGGER_FRIEND_ADDED)

"""
Mission Progress Use Case - advance a mission and reward completion.

AICODE-NOTE: The state machine is in core/domain/mission_rules.py.
The ACTIVE -> COMPLETED flip is a conditional update, and the reward is
granted in the same transaction, exactly once. Partial progress is a
compare-and-set on `current`, retried on conflict.
"""

import logging
from dataclasses import dataclass, field

from tortoise.transactions import in_transaction

from nudgequest.core.domain.badge_rules import TRIGGER_MISSION_COMPLETED
from nudgequest.core.domain.gamification import RewardOutcome
from nudgequest.core.domain.mission_rules import advance, can_progress
from nudgequest.core.domain.timeutils import utcnow
from nudgequest.database.models import Mission
from nudgequest.storage import mission_repo

from .rewards import award_badges, grant_reward

logger = logging.getLogger(__name__)

PROGRESS_ATTEMPTS = 5


@dataclass
class MissionProgressResult:
    """Result of a progress update."""

    success: bool
    mission: Mission | None = None
    is_completed: bool = False
    reward: RewardOutcome | None = None
    new_badges: list[str] = field(default_factory=list)
    error_message: str = ""
    error_code: str = ""


class UpdateMissionProgressUseCase:
    """Use-case for mission progress."""

    async def execute(
        self, mission_id: int, user_id: int, increment: int = 1
    ) -> MissionProgressResult:
        """
        Add `increment` to the mission progress.

        Args:
            mission_id: Mission ID
            user_id: Owner of the mission
            increment: Progress delta (>= 1)
        """
        if increment < 1:
            return MissionProgressResult(
                success=False,
                error_message="Increment must be at least 1",
                error_code="invalid",
            )

        for _ in range(PROGRESS_ATTEMPTS):
            mission = await mission_repo.get_mission(mission_id)
            if not mission:
                return MissionProgressResult(
                    success=False, error_message="Mission not found", error_code="not_found"
                )
            if mission.user_id != user_id:
                return MissionProgressResult(
                    success=False,
                    error_message="Mission does not belong to user",
                    error_code="forbidden",
                )
            if not can_progress(mission.is_completed):
                return MissionProgressResult(
                    success=False,
                    error_message="Mission already completed",
                    error_code="invalid",
                )

            outcome = advance(mission.current, mission.target, increment)
            if outcome.completed_now:
                return await self._complete(mission, outcome.current)

            stored = await mission_repo.set_progress(
                mission.id, mission.current, outcome.current
            )
            if stored:
                mission.current = outcome.current
                logger.info(
                    f"Mission {mission_id} progress: {mission.current}/{mission.target}"
                )
                return MissionProgressResult(success=True, mission=mission)
            # Lost the compare-and-set, re-read and apply on top of the new value

        logger.warning(f"Mission {mission_id}: progress update kept conflicting")
        return MissionProgressResult(
            success=False,
            error_message="Mission was updated concurrently, try again",
            error_code="invalid",
        )

    async def complete_instantly(self, mission_id: int, user_id: int) -> MissionProgressResult:
        """Jump a mission straight to its target (Mission Rush)."""
        mission = await mission_repo.get_mission(mission_id)
        if not mission or mission.user_id != user_id:
            return MissionProgressResult(
                success=False, error_message="Mission not found", error_code="not_found"
            )
        if not can_progress(mission.is_completed):
            return MissionProgressResult(
                success=False,
                error_message="Mission already completed",
                error_code="invalid",
            )
        outcome = advance(
            mission.current, mission.target, max(1, mission.target - mission.current)
        )
        return await self._complete(mission, outcome.current)

    async def _complete(self, mission: Mission, current: int) -> MissionProgressResult:
        completed_at = utcnow()
        async with in_transaction():
            flipped = await mission_repo.mark_completed(mission.id, current, completed_at)
            if not flipped:
                return MissionProgressResult(
                    success=False,
                    error_message="Mission already completed",
                    error_code="invalid",
                )
            reward = await grant_reward(
                mission.user_id, mission.xp_reward, mission.coin_reward
            )

        mission.current = current
        mission.is_completed = True
        mission.completed_at = completed_at

        new_badges = await award_badges(mission.user_id, TRIGGER_MISSION_COMPLETED)

        logger.info(
            f"Mission {mission.id} completed by user {mission.user_id}: "
            f"+{reward.xp_earned} XP, +{reward.coins_earned} coins"
        )
        return MissionProgressResult(
            success=True,
            mission=mission,
            is_completed=True,
            reward=reward,
            new_badges=new_badges,
        )

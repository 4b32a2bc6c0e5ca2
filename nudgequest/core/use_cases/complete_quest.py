"""
Quest Use Cases - start and complete quests.

AICODE-NOTE: Use-case combines repositories + domain rules.
Routers call the use-case and map the result to HTTP.
"""

import logging
from dataclasses import dataclass, field

from tortoise.transactions import in_transaction

from nudgequest.core.domain.badge_rules import TRIGGER_QUEST_COMPLETED
from nudgequest.core.domain.gamification import RewardOutcome
from nudgequest.core.domain.quest_rules import (
    DEFAULT_QUESTS,
    can_complete_quest,
    can_start_quest,
)
from nudgequest.core.domain.timeutils import utcnow
from nudgequest.database.models import UserQuest
from nudgequest.storage import quest_repo

from .rewards import award_badges, grant_reward

logger = logging.getLogger(__name__)


@dataclass
class StartQuestResult:
    success: bool
    user_quest: UserQuest | None = None
    error_message: str = ""
    error_code: str = ""


@dataclass
class QuestCompletionResult:
    """Result of completing a quest."""

    success: bool
    reward: RewardOutcome | None = None
    new_badges: list[str] = field(default_factory=list)
    error_message: str = ""
    error_code: str = ""


class StartQuestUseCase:
    """Use-case for starting a quest."""

    async def execute(self, quest_id: int, user_id: int) -> StartQuestResult:
        quest = await quest_repo.get_quest(quest_id)
        if not quest:
            return StartQuestResult(
                success=False, error_message="Quest not found", error_code="not_found"
            )

        existing = await quest_repo.get_user_quest(user_id, quest_id)
        if not can_start_quest(existing.status if existing else None, quest.is_active):
            message = "Quest already started" if existing else "Quest is not active"
            return StartQuestResult(
                success=False, error_message=message, error_code="invalid"
            )

        user_quest = await quest_repo.start_user_quest(user_id, quest_id)
        await user_quest.fetch_related("quest")
        logger.info(f"Quest {quest_id} started by user {user_id}")
        return StartQuestResult(success=True, user_quest=user_quest)


class CompleteQuestUseCase:
    """Use-case for completing a quest."""

    async def execute(self, quest_id: int, user_id: int) -> QuestCompletionResult:
        """
        Complete an ACTIVE quest run.

        The run is flipped with a conditional update; the reward is granted
        only by the call that actually flipped it.
        """
        user_quest = await quest_repo.get_user_quest(user_id, quest_id)
        if not user_quest:
            return QuestCompletionResult(
                success=False,
                error_message="Quest not started",
                error_code="not_found",
            )

        if not can_complete_quest(user_quest.status):
            return QuestCompletionResult(
                success=False,
                error_message=f"Quest already finished (status: {user_quest.status})",
                error_code="invalid",
            )

        await user_quest.fetch_related("quest")
        quest = user_quest.quest

        async with in_transaction():
            flipped = await quest_repo.mark_completed(user_quest.id, utcnow())
            if not flipped:
                return QuestCompletionResult(
                    success=False,
                    error_message="Quest already completed",
                    error_code="invalid",
                )
            reward = await grant_reward(user_id, quest.xp_reward, quest.coin_reward)

        new_badges = await award_badges(user_id, TRIGGER_QUEST_COMPLETED)

        logger.info(
            f"Quest {quest_id} completed by user {user_id}: "
            f"+{reward.xp_earned} XP, +{reward.coins_earned} coins"
        )
        return QuestCompletionResult(success=True, reward=reward, new_badges=new_badges)


async def seed_default_quests() -> int:
    """Fill an empty quest catalog. Returns the number of quests created."""
    if await quest_repo.count_quests() > 0:
        return 0
    for quest in DEFAULT_QUESTS:
        await quest_repo.create_quest(**quest)
    logger.info(f"Seeded {len(DEFAULT_QUESTS)} default quests")
    return len(DEFAULT_QUESTS)

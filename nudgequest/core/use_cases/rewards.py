"""
Rewards Use Case - apply quest/mission rewards and award badges.

AICODE-NOTE: Shared by quest completion, mission progress and Mission Rush.
Callers run grant_reward inside the same transaction that flipped the
completion flag, so a reward is applied once per completion.
"""

import logging
from datetime import date

from nudgequest.core.domain.badge_rules import eligible_badges
from nudgequest.core.domain.gamification import (
    RewardOutcome,
    boosted_reward,
    resolve_reward,
)
from nudgequest.core.domain.timeutils import utcnow
from nudgequest.storage import badge_repo, user_repo

logger = logging.getLogger(__name__)


async def grant_reward(
    user_id: int, xp_reward: int, coin_reward: int, today: date | None = None
) -> RewardOutcome:
    """Lock the user row, resolve the reward and persist the new wallet."""
    now = utcnow()
    if today is None:
        today = now.date()

    user = await user_repo.get_user_for_update(user_id)
    if user is None:
        raise LookupError(f"User {user_id} not found")

    xp_delta, coin_delta = boosted_reward(
        xp_reward, coin_reward, user.xp_boost_until, user.coin_boost_until, now
    )
    outcome = resolve_reward(user.xp, user.coins, user.level, xp_delta, coin_delta)
    await user_repo.apply_reward(user, outcome, active_on=today)

    if outcome.leveled_up:
        logger.info(
            f"User {user_id} reached level {outcome.level}: "
            f"+{outcome.level_bonus} bonus coins"
        )

    return outcome


async def award_badges(user_id: int, trigger: str) -> list[str]:
    """Award every badge the user newly qualifies for. Returns new codes."""
    user = await user_repo.get_user(user_id)
    if user is None:
        return []

    earned = await badge_repo.earned_codes(user_id)
    new_badges = []
    for code in eligible_badges(user.xp, user.level, user.streak, trigger):
        if code in earned:
            continue
        if await badge_repo.award(user_id, code):
            new_badges.append(code)

    if new_badges:
        logger.info(f"User {user_id} earned badges: {', '.join(new_badges)}")
    return new_badges

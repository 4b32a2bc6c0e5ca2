"""
Update Streaks Use Case - nightly streak roll-over (01:00 UTC).
"""

import logging
from dataclasses import dataclass
from datetime import date

from nudgequest.core.domain.badge_rules import TRIGGER_STREAK_UPDATED
from nudgequest.core.domain.gamification import calculate_daily_streak, is_active
from nudgequest.core.domain.timeutils import utcnow
from nudgequest.storage import user_repo

from .rewards import award_badges

logger = logging.getLogger(__name__)


@dataclass
class StreakUpdateStats:
    extended: int = 0
    reset: int = 0
    shielded: int = 0


async def update_all_streaks(today: date | None = None) -> StreakUpdateStats:
    """
    Extend the streak of users active since yesterday, reset the others.

    An active Streak Shield keeps the streak of an inactive user.
    """
    now = utcnow()
    if today is None:
        today = now.date()

    stats = StreakUpdateStats()
    for user in await user_repo.list_users():
        shield = is_active(user.streak_shield_until, now)
        new_streak = calculate_daily_streak(
            user.streak, user.last_active_date, today, shield_active=shield
        )

        if new_streak > user.streak:
            stats.extended += 1
        elif new_streak == 0 and user.streak > 0:
            stats.reset += 1
        elif shield and user.streak > 0 and new_streak == user.streak:
            stats.shielded += 1

        if new_streak != user.streak:
            extended = new_streak > user.streak
            await user_repo.update_streak(user, new_streak)
            if extended:
                await award_badges(user.id, TRIGGER_STREAK_UPDATED)

    logger.info(
        f"Streaks updated: {stats.extended} extended, "
        f"{stats.reset} reset, {stats.shielded} shielded"
    )
    return stats

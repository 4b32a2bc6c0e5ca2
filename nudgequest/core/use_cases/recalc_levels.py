"""
Recalculate Levels Use Case - repair level drift.

AICODE-NOTE: Only fixes `level` so that it equals floor(xp / 100) + 1.
Missed level-up bonuses are not paid retroactively.
"""

import logging

from nudgequest.core.domain.gamification import calculate_level
from nudgequest.storage import user_repo

logger = logging.getLogger(__name__)


async def recalculate_all_levels() -> int:
    """Returns the number of users whose level was corrected."""
    fixed = 0
    for user in await user_repo.list_users():
        expected = calculate_level(user.xp)
        if user.level == expected:
            continue

        logger.warning(f"User {user.id}: level {user.level} -> {expected} (xp={user.xp})")
        user.level = expected
        await user.save(update_fields=["level"])
        fixed += 1

    return fixed

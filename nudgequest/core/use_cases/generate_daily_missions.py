"""
Daily Missions Use Case - create the day's missions.

Runs for every user from the scheduler (00:00 UTC) and for a single user
on demand from the API.
"""

import logging
import random
from datetime import timedelta

from nudgequest.core.domain.mission_rules import pick_daily_templates
from nudgequest.core.domain.timeutils import utcnow
from nudgequest.database.models import Mission
from nudgequest.storage import mission_repo, user_repo

logger = logging.getLogger(__name__)

DAILY_MISSION_TTL = timedelta(hours=24)


async def generate_for_user(user_id: int, rng: random.Random | None = None) -> list[Mission]:
    """Create the daily missions for one user, due 24 hours from now."""
    due_date = utcnow() + DAILY_MISSION_TTL
    missions = []
    for template in pick_daily_templates(rng=rng):
        missions.append(
            await mission_repo.create_mission(
                user_id=user_id,
                title=template["title"],
                description=template["description"],
                type=template["type"],
                target=template["target"],
                xp_reward=template["xp_reward"],
                coin_reward=template["coin_reward"],
                due_date=due_date,
            )
        )
    return missions


async def generate_for_all_users(rng: random.Random | None = None) -> int:
    """Create daily missions for every user. Returns the number of users served."""
    users = await user_repo.list_users()
    for user in users:
        await generate_for_user(user.id, rng=rng)
    logger.info(f"Daily missions generated for {len(users)} users")
    return len(users)

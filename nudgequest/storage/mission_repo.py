"""
Mission Repository - plain CRUD operations for the Mission model.

AICODE-NOTE: Data access only, NO business logic.
The state machine lives in core/domain/mission_rules.py.
"""

from datetime import datetime

from nudgequest.database.models import Mission


async def get_mission(mission_id: int) -> Mission | None:
    return await Mission.get_or_none(id=mission_id)


async def list_missions(user_id: int) -> list[Mission]:
    return await Mission.filter(user_id=user_id).order_by("is_completed", "-created_at").all()


async def create_mission(
    user_id: int,
    title: str,
    description: str | None,
    type: str,
    target: int,
    xp_reward: int,
    coin_reward: int,
    due_date: datetime | None = None,
) -> Mission:
    return await Mission.create(
        user_id=user_id,
        title=title,
        description=description,
        type=type,
        target=target,
        current=0,
        xp_reward=xp_reward,
        coin_reward=coin_reward,
        is_completed=False,
        due_date=due_date,
    )


async def set_progress(mission_id: int, old_current: int, new_current: int) -> bool:
    """
    Store progress of a mission that is still ACTIVE.

    Compare-and-set on `current`: returns False if the mission was completed
    or its progress moved since `old_current` was read.
    """
    updated = await Mission.filter(
        id=mission_id, is_completed=False, current=old_current
    ).update(current=new_current)
    return updated == 1


async def mark_completed(mission_id: int, current: int, completed_at: datetime) -> bool:
    """
    Flip ACTIVE -> COMPLETED.

    Returns False if another call completed the mission first.
    """
    updated = await Mission.filter(id=mission_id, is_completed=False).update(
        current=current, is_completed=True, completed_at=completed_at
    )
    return updated == 1

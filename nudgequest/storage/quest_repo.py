"""
Quest Repository - plain CRUD operations for Quest and UserQuest.

AICODE-NOTE: Data access only, NO business logic.
"""

from datetime import datetime

from nudgequest.database.models import Quest, UserQuest


async def list_active_quests() -> list[Quest]:
    return await Quest.filter(is_active=True).order_by("id").all()


async def get_quest(quest_id: int) -> Quest | None:
    return await Quest.get_or_none(id=quest_id)


async def count_quests() -> int:
    return await Quest.all().count()


async def create_quest(**fields) -> Quest:
    return await Quest.create(**fields)


async def get_user_quest(user_id: int, quest_id: int) -> UserQuest | None:
    return await UserQuest.get_or_none(user_id=user_id, quest_id=quest_id)


async def list_user_quests(user_id: int, status: str) -> list[UserQuest]:
    return (
        await UserQuest.filter(user_id=user_id, status=status)
        .prefetch_related("quest")
        .order_by("-started_at")
        .all()
    )


async def start_user_quest(user_id: int, quest_id: int) -> UserQuest:
    return await UserQuest.create(user_id=user_id, quest_id=quest_id, status="ACTIVE")


async def mark_completed(user_quest_id: int, completed_at: datetime) -> bool:
    """
    Flip ACTIVE -> COMPLETED.

    Returns False if the run was not ACTIVE any more (already completed).
    """
    updated = await UserQuest.filter(id=user_quest_id, status="ACTIVE").update(
        status="COMPLETED", progress=100, completed_at=completed_at
    )
    return updated == 1

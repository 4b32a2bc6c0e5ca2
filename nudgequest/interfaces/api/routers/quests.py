"""
Quest API router.

Endpoints:
- GET /api/quests - Quest catalog
- GET /api/quests/active - Quests the user is running
- POST /api/quests/{id}/start - Start a quest
- POST /api/quests/{id}/complete - Complete a quest and collect the reward
"""

import logging

from fastapi import APIRouter, Depends, status

from nudgequest.core.domain.quest_rules import ACTIVE
from nudgequest.core.use_cases.complete_quest import (
    CompleteQuestUseCase,
    StartQuestUseCase,
)
from nudgequest.database.models import User
from nudgequest.interfaces.api.auth import get_current_user
from nudgequest.interfaces.api.errors import raise_for_result
from nudgequest.interfaces.api.schemas import (
    ActiveQuestsResponse,
    CompleteQuestResponse,
    QuestResponse,
    QuestsListResponse,
    RewardResponse,
    UserQuestResponse,
)
from nudgequest.storage import quest_repo

router = APIRouter(prefix="/api/quests", tags=["quests"])
logger = logging.getLogger(__name__)


@router.get("", response_model=QuestsListResponse)
async def list_quests(user: User = Depends(get_current_user)) -> QuestsListResponse:
    quests = await quest_repo.list_active_quests()
    return QuestsListResponse(quests=[QuestResponse.model_validate(q) for q in quests])


@router.get("/active", response_model=ActiveQuestsResponse)
async def list_active_quests(user: User = Depends(get_current_user)) -> ActiveQuestsResponse:
    runs = await quest_repo.list_user_quests(user.id, ACTIVE)
    return ActiveQuestsResponse(quests=[UserQuestResponse.model_validate(r) for r in runs])


@router.post(
    "/{quest_id}/start",
    response_model=UserQuestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def start_quest(
    quest_id: int, user: User = Depends(get_current_user)
) -> UserQuestResponse:
    result = await StartQuestUseCase().execute(quest_id=quest_id, user_id=user.id)
    raise_for_result(result)
    return UserQuestResponse.model_validate(result.user_quest)


@router.post("/{quest_id}/complete", response_model=CompleteQuestResponse)
async def complete_quest(
    quest_id: int, user: User = Depends(get_current_user)
) -> CompleteQuestResponse:
    """Complete an active quest: awards XP/coins and a level-up bonus if earned."""
    result = await CompleteQuestUseCase().execute(quest_id=quest_id, user_id=user.id)
    raise_for_result(result)

    logger.info(
        f"Quest {quest_id} completed via API by user {user.id}: "
        f"+{result.reward.xp_earned} XP"
    )
    return CompleteQuestResponse(
        success=True,
        reward=RewardResponse.model_validate(result.reward),
        new_badges=result.new_badges,
    )

"""
Mission API router.

Endpoints:
- GET /api/missions - User's missions
- POST /api/missions - Create a custom mission
- PUT /api/missions/{id}/progress - Add progress; completes at target
- POST /api/missions/daily/generate - Generate today's missions now
"""

import logging

from fastapi import APIRouter, Depends, status

from nudgequest.core.use_cases.generate_daily_missions import generate_for_user
from nudgequest.core.use_cases.update_mission_progress import (
    UpdateMissionProgressUseCase,
)
from nudgequest.database.models import User
from nudgequest.interfaces.api.auth import get_current_user
from nudgequest.interfaces.api.errors import raise_for_result
from nudgequest.interfaces.api.schemas import (
    CreateMissionRequest,
    MissionProgressRequest,
    MissionProgressResponse,
    MissionResponse,
    MissionsListResponse,
    RewardResponse,
)
from nudgequest.storage import mission_repo

router = APIRouter(prefix="/api/missions", tags=["missions"])
logger = logging.getLogger(__name__)


@router.get("", response_model=MissionsListResponse)
async def list_missions(user: User = Depends(get_current_user)) -> MissionsListResponse:
    missions = await mission_repo.list_missions(user.id)
    return MissionsListResponse(missions=[MissionResponse.model_validate(m) for m in missions])


@router.post("", response_model=MissionResponse, status_code=status.HTTP_201_CREATED)
async def create_mission(
    request: CreateMissionRequest, user: User = Depends(get_current_user)
) -> MissionResponse:
    mission = await mission_repo.create_mission(
        user_id=user.id,
        title=request.title,
        description=request.description,
        type=request.type,
        target=request.target,
        xp_reward=request.xp_reward,
        coin_reward=request.coin_reward,
    )
    logger.info(f"Mission {mission.id} created by user {user.id}")
    return MissionResponse.model_validate(mission)


@router.put("/{mission_id}/progress", response_model=MissionProgressResponse)
async def update_progress(
    mission_id: int,
    request: MissionProgressRequest,
    user: User = Depends(get_current_user),
) -> MissionProgressResponse:
    result = await UpdateMissionProgressUseCase().execute(
        mission_id=mission_id, user_id=user.id, increment=request.increment
    )
    raise_for_result(result)

    return MissionProgressResponse(
        mission=MissionResponse.model_validate(result.mission),
        is_completed=result.is_completed,
        reward=RewardResponse.model_validate(result.reward) if result.reward else None,
        new_badges=result.new_badges,
    )


@router.post("/daily/generate", response_model=MissionsListResponse)
async def generate_daily(user: User = Depends(get_current_user)) -> MissionsListResponse:
    missions = await generate_for_user(user.id)
    logger.info(f"Daily missions generated on demand for user {user.id}")
    return MissionsListResponse(missions=[MissionResponse.model_validate(m) for m in missions])

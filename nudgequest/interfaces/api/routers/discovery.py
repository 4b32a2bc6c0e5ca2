"""
Discovery API router.

Endpoints:
- GET /api/discovery/potential-matches - Users to swipe on
- PUT /api/discovery/location - Store current location
- POST /api/discovery/swipe - Swipe LEFT/RIGHT; reports mutual matches
- GET /api/discovery/matches - User's matches
"""

import logging

from fastapi import APIRouter, Depends

from nudgequest.core.domain.matching import rank_candidates
from nudgequest.core.use_cases.record_swipe import RecordSwipeUseCase
from nudgequest.database.models import User
from nudgequest.interfaces.api.auth import get_current_user
from nudgequest.interfaces.api.errors import raise_for_result
from nudgequest.interfaces.api.schemas import (
    LocationUpdateRequest,
    MatchesResponse,
    MatchItem,
    PotentialMatch,
    PotentialMatchesResponse,
    SuccessResponse,
    SwipeRequest,
    SwipeResponse,
    UserSummary,
)
from nudgequest.storage import match_repo, swipe_repo, user_repo

router = APIRouter(prefix="/api/discovery", tags=["discovery"])
logger = logging.getLogger(__name__)


@router.get("/potential-matches", response_model=PotentialMatchesResponse)
async def potential_matches(
    user: User = Depends(get_current_user),
) -> PotentialMatchesResponse:
    """
    Users the caller has not swiped on yet.

    Within the caller's discovery radius when both have a location,
    ordered by shared interests then distance.
    """
    users = await user_repo.list_discoverable(exclude_id=user.id)
    swiped = await swipe_repo.swiped_ids(user.id)
    candidates = rank_candidates(user, users, swiped)

    return PotentialMatchesResponse(
        users=[
            PotentialMatch(
                id=c.user.id,
                username=c.user.username,
                avatar=c.user.avatar,
                bio=c.user.bio,
                interests=c.user.interests or [],
                level=c.user.level,
                distance=c.distance_km,
                shared_interests=c.shared_interests,
            )
            for c in candidates
        ]
    )


@router.put("/location", response_model=SuccessResponse)
async def update_location(
    request: LocationUpdateRequest, user: User = Depends(get_current_user)
) -> SuccessResponse:
    user.latitude = request.latitude
    user.longitude = request.longitude
    user.location_enabled = True
    await user.save(update_fields=["latitude", "longitude", "location_enabled"])
    logger.info(f"Location updated for user {user.id}")
    return SuccessResponse(success=True)


@router.post("/swipe", response_model=SwipeResponse)
async def swipe(request: SwipeRequest, user: User = Depends(get_current_user)) -> SwipeResponse:
    result = await RecordSwipeUseCase().execute(
        swiper_id=user.id, swiped_id=request.target_user_id, direction=request.direction
    )
    raise_for_result(result)
    return SwipeResponse(
        success=True,
        is_match=result.is_match,
        match_id=result.match.id if result.match else None,
    )


@router.get("/matches", response_model=MatchesResponse)
async def list_matches(user: User = Depends(get_current_user)) -> MatchesResponse:
    matches = await match_repo.list_matches(user.id)
    return MatchesResponse(
        matches=[
            MatchItem(
                id=m.id,
                user=UserSummary.model_validate(
                    m.user_two if m.user_one_id == user.id else m.user_one
                ),
                created_at=m.created_at,
            )
            for m in matches
        ]
    )

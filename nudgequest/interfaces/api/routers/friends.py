"""
Friends API router.

Endpoints:
- GET /api/friends - Accepted friends
- GET /api/friends/requests - Incoming pending requests
- POST /api/friends/request - Send a friend request
- PUT /api/friends/request/{id}/accept - Accept a request
"""

from fastapi import APIRouter, Depends, status

from nudgequest.core.use_cases.friend_requests import (
    AcceptFriendRequestUseCase,
    SendFriendRequestUseCase,
)
from nudgequest.database.models import User
from nudgequest.interfaces.api.auth import get_current_user
from nudgequest.interfaces.api.errors import raise_for_result
from nudgequest.interfaces.api.schemas import (
    FriendRequestItem,
    FriendRequestsResponse,
    FriendshipResponse,
    FriendsListResponse,
    SendFriendRequest,
    UserSummary,
)
from nudgequest.storage import friend_repo

router = APIRouter(prefix="/api/friends", tags=["friends"])


@router.get("", response_model=FriendsListResponse)
async def list_friends(user: User = Depends(get_current_user)) -> FriendsListResponse:
    friendships = await friend_repo.list_accepted(user.id)
    friends = [
        f.addressee if f.requester_id == user.id else f.requester for f in friendships
    ]
    return FriendsListResponse(friends=[UserSummary.model_validate(u) for u in friends])


@router.get("/requests", response_model=FriendRequestsResponse)
async def list_requests(user: User = Depends(get_current_user)) -> FriendRequestsResponse:
    pending = await friend_repo.list_incoming_pending(user.id)
    return FriendRequestsResponse(
        requests=[
            FriendRequestItem(
                id=f.id,
                created_at=f.created_at,
                requester=UserSummary.model_validate(f.requester),
            )
            for f in pending
        ]
    )


@router.post(
    "/request", response_model=FriendshipResponse, status_code=status.HTTP_201_CREATED
)
async def send_request(
    request: SendFriendRequest, user: User = Depends(get_current_user)
) -> FriendshipResponse:
    result = await SendFriendRequestUseCase().execute(user.id, request.user_id)
    raise_for_result(result)
    return FriendshipResponse.model_validate(result.friendship)


@router.put("/request/{request_id}/accept", response_model=FriendshipResponse)
async def accept_request(
    request_id: int, user: User = Depends(get_current_user)
) -> FriendshipResponse:
    result = await AcceptFriendRequestUseCase().execute(request_id, user.id)
    raise_for_result(result)
    return FriendshipResponse.model_validate(result.friendship)

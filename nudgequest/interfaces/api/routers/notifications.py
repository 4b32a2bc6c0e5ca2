"""
Notifications API router.

Endpoints:
- POST /api/notifications/subscribe - Register a push player id
- POST /api/notifications/send - Send a notification to a user
"""

from fastapi import APIRouter, Depends

from nudgequest.database.models import User
from nudgequest.interfaces.api.auth import get_current_user
from nudgequest.interfaces.api.schemas import (
    NotificationSendRequest,
    NotificationSubscribeRequest,
    SuccessResponse,
)
from nudgequest.services import notifications

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.post("/subscribe", response_model=SuccessResponse)
async def subscribe(
    request: NotificationSubscribeRequest, user: User = Depends(get_current_user)
) -> SuccessResponse:
    await notifications.register_player(user, request.player_id)
    return SuccessResponse(success=True)


@router.post("/send", response_model=SuccessResponse)
async def send(
    request: NotificationSendRequest, user: User = Depends(get_current_user)
) -> SuccessResponse:
    sent = await notifications.send_to_user(
        request.user_id, f"Message from {user.username}", request.message
    )
    return SuccessResponse(success=sent)

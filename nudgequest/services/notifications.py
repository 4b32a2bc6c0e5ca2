"""
Notification Service - push notifications.

Delivery through a push provider is not wired in: messages are logged
against the user's registered player id.
"""

import logging

from nudgequest.database.models import User
from nudgequest.storage import user_repo

logger = logging.getLogger(__name__)


async def register_player(user: User, player_id: str) -> User:
    """Store the push player id for a user."""
    user.push_player_id = player_id
    await user.save(update_fields=["push_player_id"])
    logger.info(f"Push player registered for user {user.id}")
    return user


async def send_to_user(user_id: int, title: str, body: str) -> bool:
    """
    Send a notification to a user.

    Returns False when the user does not exist or has no player id.
    """
    user = await user_repo.get_user(user_id)
    if not user:
        logger.warning(f"Notification skipped, user {user_id} not found")
        return False
    if not user.push_player_id:
        logger.info(f"Notification skipped, user {user_id} has no player id")
        return False

    logger.info(f"Notification to user {user_id} ({user.push_player_id}): {title} - {body}")
    return True


async def send_match_notification(user_id: int, matched_user_id: int) -> bool:
    matched_user = await user_repo.get_user(matched_user_id)
    if not matched_user:
        return False
    return await send_to_user(
        user_id, "New Match! 🎉", f"You matched with {matched_user.username}!"
    )

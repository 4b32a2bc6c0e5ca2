"""
Subscription Event Use Case - toggle premium from billing webhooks.

AICODE-NOTE: RevenueCat sends `app_user_id`; Stripe subscriptions carry the
user id in `metadata.user_id`. Unknown events are acknowledged and ignored.
"""

import logging
from dataclasses import dataclass
from typing import Any

from nudgequest.core.domain.subscription_rules import (
    expiration_from_ms,
    expiration_from_seconds,
    revenuecat_premium_state,
    stripe_premium_state,
)
from nudgequest.storage import user_repo

logger = logging.getLogger(__name__)


@dataclass
class SubscriptionEventResult:
    handled: bool
    user_id: int | None = None
    is_premium: bool | None = None
    error_message: str = ""


def _parse_user_id(raw: Any) -> int | None:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


async def _apply(user_id: int | None, is_premium: bool, expires_at) -> SubscriptionEventResult:
    if user_id is None:
        return SubscriptionEventResult(handled=False, error_message="Missing user id")

    user = await user_repo.get_user(user_id)
    if not user:
        logger.warning(f"Subscription event for unknown user {user_id}")
        return SubscriptionEventResult(
            handled=False, user_id=user_id, error_message="User not found"
        )

    await user_repo.set_premium(user, is_premium, expires_at)
    logger.info(f"User {user_id} premium={is_premium} (expires {expires_at})")
    return SubscriptionEventResult(handled=True, user_id=user_id, is_premium=is_premium)


async def handle_revenuecat_event(event: dict[str, Any]) -> SubscriptionEventResult:
    """Apply a RevenueCat webhook event (the `event` object of the payload)."""
    event_type = event.get("type", "")
    is_premium = revenuecat_premium_state(event_type)
    if is_premium is None:
        logger.info(f"RevenueCat event {event_type} ignored")
        return SubscriptionEventResult(handled=False)

    expires_at = expiration_from_ms(event.get("expiration_at_ms") or event.get("expiration_time_ms"))
    return await _apply(_parse_user_id(event.get("app_user_id")), is_premium, expires_at)


async def handle_stripe_event(event_type: str, subscription: dict[str, Any]) -> SubscriptionEventResult:
    """Apply a Stripe `customer.subscription.*` event."""
    is_premium = stripe_premium_state(event_type, subscription.get("status"))
    if is_premium is None:
        logger.info(f"Stripe event {event_type} ignored")
        return SubscriptionEventResult(handled=False)

    metadata = subscription.get("metadata") or {}
    expires_at = expiration_from_seconds(subscription.get("current_period_end"))
    return await _apply(_parse_user_id(metadata.get("user_id")), is_premium, expires_at)

"""
Subscription Rules Domain - map billing events to premium state.

AICODE-NOTE: Pure functions, NO database access.
"""

from datetime import datetime, timezone

REVENUECAT_ACTIVATING = ("INITIAL_PURCHASE", "RENEWAL")
REVENUECAT_DEACTIVATING = ("CANCELLATION", "EXPIRATION")

STRIPE_ACTIVE_STATUSES = ("active", "trialing")


def revenuecat_premium_state(event_type: str) -> bool | None:
    """
    Premium flag for a RevenueCat event.

    Returns None for events that do not change the subscription.
    """
    if event_type in REVENUECAT_ACTIVATING:
        return True
    if event_type in REVENUECAT_DEACTIVATING:
        return False
    return None


def stripe_premium_state(event_type: str, subscription_status: str | None) -> bool | None:
    """Premium flag for a Stripe subscription event (None = ignore)."""
    if event_type in ("customer.subscription.created", "customer.subscription.updated"):
        return subscription_status in STRIPE_ACTIVE_STATUSES
    if event_type == "customer.subscription.deleted":
        return False
    return None


def expiration_from_ms(expiration_ms: int | None) -> datetime | None:
    if expiration_ms is None:
        return None
    return datetime.fromtimestamp(expiration_ms / 1000, tz=timezone.utc)


def expiration_from_seconds(timestamp: int | None) -> datetime | None:
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)

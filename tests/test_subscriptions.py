"""Tests for premium toggling from billing events."""

from datetime import datetime, timezone

import pytest

from nudgequest.core.domain.timeutils import as_utc
from nudgequest.core.use_cases.handle_subscription_event import (
    handle_revenuecat_event,
    handle_stripe_event,
)
from nudgequest.database.models import User

EXPIRES_AT = datetime(2026, 12, 1, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_revenuecat_purchase_enables_premium(user: User) -> None:
    result = await handle_revenuecat_event(
        {
            "type": "INITIAL_PURCHASE",
            "app_user_id": str(user.id),
            "expiration_at_ms": int(EXPIRES_AT.timestamp() * 1000),
        }
    )

    assert result.handled
    assert result.is_premium is True

    await user.refresh_from_db()
    assert user.is_premium is True
    assert as_utc(user.premium_expires_at) == EXPIRES_AT


@pytest.mark.asyncio
async def test_revenuecat_expiration_disables_premium(user: User) -> None:
    user.is_premium = True
    user.premium_expires_at = EXPIRES_AT
    await user.save()

    result = await handle_revenuecat_event({"type": "EXPIRATION", "app_user_id": str(user.id)})

    assert result.handled
    await user.refresh_from_db()
    assert user.is_premium is False
    assert user.premium_expires_at is None


@pytest.mark.asyncio
async def test_revenuecat_unknown_event_is_ignored(user: User) -> None:
    result = await handle_revenuecat_event({"type": "BILLING_ISSUE", "app_user_id": str(user.id)})

    assert not result.handled
    await user.refresh_from_db()
    assert user.is_premium is False


@pytest.mark.asyncio
async def test_revenuecat_unknown_user(db: None) -> None:
    result = await handle_revenuecat_event({"type": "RENEWAL", "app_user_id": "424242"})

    assert not result.handled
    assert result.error_message == "User not found"


@pytest.mark.asyncio
async def test_stripe_subscription_lifecycle(user: User) -> None:
    subscription = {
        "status": "active",
        "metadata": {"user_id": str(user.id)},
        "current_period_end": int(EXPIRES_AT.timestamp()),
    }

    created = await handle_stripe_event("customer.subscription.created", subscription)
    await user.refresh_from_db()
    assert created.handled
    assert user.is_premium is True

    deleted = await handle_stripe_event(
        "customer.subscription.deleted", {**subscription, "status": "canceled"}
    )
    await user.refresh_from_db()
    assert deleted.handled
    assert user.is_premium is False


@pytest.mark.asyncio
async def test_stripe_event_without_user_id(db: None) -> None:
    result = await handle_stripe_event("customer.subscription.created", {"status": "active"})

    assert not result.handled
    assert result.error_message == "Missing user id"

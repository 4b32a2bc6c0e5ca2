"""Tests for badge, quest, shop and subscription rules."""

from datetime import datetime, timedelta, timezone

from nudgequest.core.domain.badge_rules import (
    FIRST_QUEST,
    LEVEL_5,
    SOCIAL_BUTTERFLY,
    STREAK_7,
    TRIGGER_FRIEND_ADDED,
    TRIGGER_QUEST_COMPLETED,
    eligible_badges,
)
from nudgequest.core.domain.quest_rules import can_complete_quest, can_start_quest
from nudgequest.core.domain.shop import (
    POWER_UPS,
    STREAK_SHIELD,
    XP_BOOSTER,
    can_afford,
    extend_until,
    find_priced_item,
    price_in_cents,
)
from nudgequest.core.domain.subscription_rules import (
    expiration_from_ms,
    revenuecat_premium_state,
    stripe_premium_state,
)


def test_eligible_badges_by_thresholds() -> None:
    badges = eligible_badges(xp=450, level=5, streak=7, trigger=TRIGGER_QUEST_COMPLETED)
    assert set(badges) == {FIRST_QUEST, LEVEL_5, STREAK_7}


def test_social_butterfly_needs_friend_trigger() -> None:
    assert SOCIAL_BUTTERFLY in eligible_badges(0, 1, 0, TRIGGER_FRIEND_ADDED)
    assert eligible_badges(0, 1, 0, TRIGGER_QUEST_COMPLETED) == []


def test_quest_rules() -> None:
    assert can_start_quest(None, quest_active=True) is True
    assert can_start_quest("ACTIVE", quest_active=True) is False
    assert can_start_quest(None, quest_active=False) is False
    assert can_complete_quest("ACTIVE") is True
    assert can_complete_quest("COMPLETED") is False


def test_can_afford() -> None:
    booster = POWER_UPS[XP_BOOSTER]
    assert can_afford(coins=50, gems=0, power_up=booster) is True
    assert can_afford(coins=49, gems=0, power_up=booster) is False


def test_extend_until_stacks_on_running_power_up() -> None:
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    shield = POWER_UPS[STREAK_SHIELD].duration

    assert extend_until(None, shield, now) == now + timedelta(days=3)
    running = now + timedelta(days=1)
    assert extend_until(running, shield, now) == running + timedelta(days=3)


def test_priced_items() -> None:
    assert find_priced_item("premium_monthly")["price"] == 9.99
    assert find_priced_item("gems_50")["amount"] == 50
    assert find_priced_item("nope") is None
    assert price_in_cents(9.99) == 999


def test_revenuecat_premium_state() -> None:
    assert revenuecat_premium_state("INITIAL_PURCHASE") is True
    assert revenuecat_premium_state("RENEWAL") is True
    assert revenuecat_premium_state("CANCELLATION") is False
    assert revenuecat_premium_state("EXPIRATION") is False
    assert revenuecat_premium_state("BILLING_ISSUE") is None


def test_stripe_premium_state() -> None:
    assert stripe_premium_state("customer.subscription.created", "active") is True
    assert stripe_premium_state("customer.subscription.updated", "past_due") is False
    assert stripe_premium_state("customer.subscription.deleted", "canceled") is False
    assert stripe_premium_state("invoice.paid", None) is None


def test_expiration_from_ms() -> None:
    assert expiration_from_ms(None) is None
    assert expiration_from_ms(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

"""Tests for the reward/level rules."""

from datetime import date, datetime, timedelta, timezone

import pytest

from nudgequest.core.domain.gamification import (
    boosted_reward,
    calculate_daily_streak,
    calculate_level,
    is_active,
    resolve_reward,
    xp_to_next_level,
)


@pytest.mark.parametrize(
    "xp, level",
    [(0, 1), (99, 1), (100, 2), (110, 2), (199, 2), (200, 3), (1050, 11)],
)
def test_calculate_level(xp: int, level: int) -> None:
    assert calculate_level(xp) == level


def test_level_formula_holds_for_a_range_of_xp() -> None:
    for xp in range(0, 2000, 7):
        assert calculate_level(xp) == xp // 100 + 1


def test_calculate_level_rejects_negative_xp() -> None:
    with pytest.raises(ValueError):
        calculate_level(-1)


def test_xp_to_next_level() -> None:
    assert xp_to_next_level(0) == 100
    assert xp_to_next_level(95) == 5
    assert xp_to_next_level(100) == 100


def test_reward_with_level_up() -> None:
    """xp=95 + 15 xp -> 110 xp, level 2 and a single 20 coin bonus."""
    outcome = resolve_reward(xp=95, coins=100, level=1, xp_delta=15, coin_delta=10)

    assert outcome.xp == 110
    assert outcome.level == 2
    assert outcome.leveled_up is True
    assert outcome.level_bonus == 20
    assert outcome.coins == 100 + 10 + 20


def test_reward_without_level_up() -> None:
    outcome = resolve_reward(xp=10, coins=0, level=1, xp_delta=15, coin_delta=10)

    assert outcome.xp == 25
    assert outcome.level == 1
    assert outcome.leveled_up is False
    assert outcome.level_bonus == 0
    assert outcome.coins == 10


def test_multi_level_jump_grants_single_flat_bonus() -> None:
    """Crossing levels 2 and 3 at once pays only new_level * 10."""
    outcome = resolve_reward(xp=90, coins=0, level=1, xp_delta=220, coin_delta=0)

    assert outcome.level == 4
    assert outcome.level_bonus == 40
    assert outcome.coins == 40


def test_boosted_reward_doubles_only_active_boosts() -> None:
    now = datetime(2026, 1, 1, 12, tzinfo=timezone.utc)
    later = now + timedelta(hours=1)
    earlier = now - timedelta(hours=1)

    assert boosted_reward(15, 10, later, None, now) == (30, 10)
    assert boosted_reward(15, 10, None, later, now) == (15, 20)
    assert boosted_reward(15, 10, earlier, earlier, now) == (15, 10)


def test_is_active_accepts_naive_database_values() -> None:
    now = datetime(2026, 1, 1, 12, tzinfo=timezone.utc)
    assert is_active(datetime(2026, 1, 1, 13), now) is True
    assert is_active(datetime(2026, 1, 1, 11), now) is False
    assert is_active(None, now) is False


def test_daily_streak_extends_when_active_yesterday() -> None:
    today = date(2026, 3, 10)
    assert calculate_daily_streak(4, today - timedelta(days=1), today) == 5
    assert calculate_daily_streak(4, today, today) == 5


def test_daily_streak_resets_after_a_gap() -> None:
    today = date(2026, 3, 10)
    assert calculate_daily_streak(4, today - timedelta(days=2), today) == 0
    assert calculate_daily_streak(4, None, today) == 0


def test_streak_shield_keeps_streak() -> None:
    today = date(2026, 3, 10)
    assert calculate_daily_streak(4, None, today, shield_active=True) == 4

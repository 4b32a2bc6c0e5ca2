"""
Gamification Domain Rules - pure functions for XP, level, rewards and streak.

AICODE-NOTE: Pure functions, NO database access, NO side-effects.
Called from use-cases, which persist the outcome.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from nudgequest.core.domain.timeutils import as_utc

XP_PER_LEVEL = 100
LEVEL_BONUS_COINS_PER_LEVEL = 10


@dataclass(frozen=True)
class RewardOutcome:
    """New wallet state after a reward."""

    xp: int
    coins: int
    level: int
    xp_earned: int
    coins_earned: int
    leveled_up: bool = False
    level_bonus: int = 0


def calculate_level(total_xp: int) -> int:
    """
    Level for a given total XP.

    Formula: level = floor(xp / 100) + 1
    - 0-99 XP = Level 1
    - 100-199 XP = Level 2
    """
    if total_xp < 0:
        raise ValueError("xp must be >= 0")
    return total_xp // XP_PER_LEVEL + 1


def xp_to_next_level(total_xp: int) -> int:
    """XP still needed to reach the next level."""
    return calculate_level(total_xp) * XP_PER_LEVEL - total_xp


def resolve_reward(
    xp: int,
    coins: int,
    level: int,
    xp_delta: int,
    coin_delta: int,
) -> RewardOutcome:
    """
    Apply a reward to a wallet.

    A level-up adds a bonus of new_level * 10 coins. The bonus is granted once
    per reward, even when a single reward crosses several levels.
    """
    new_xp = xp + xp_delta
    new_coins = coins + coin_delta
    new_level = calculate_level(new_xp)

    level_bonus = 0
    if new_level > level:
        level_bonus = new_level * LEVEL_BONUS_COINS_PER_LEVEL
        new_coins += level_bonus

    return RewardOutcome(
        xp=new_xp,
        coins=new_coins,
        level=new_level,
        xp_earned=xp_delta,
        coins_earned=coin_delta,
        leveled_up=level_bonus > 0,
        level_bonus=level_bonus,
    )


def is_active(until: datetime | None, now: datetime) -> bool:
    """Check whether a timed power-up is still running."""
    until = as_utc(until)
    return until is not None and until > as_utc(now)


def boosted_reward(
    xp_reward: int,
    coin_reward: int,
    xp_boost_until: datetime | None,
    coin_boost_until: datetime | None,
    now: datetime,
) -> tuple[int, int]:
    """
    Scale a base reward by the active power-ups.

    XP Booster doubles XP, Lucky Coin doubles coins.
    """
    if is_active(xp_boost_until, now):
        xp_reward *= 2
    if is_active(coin_boost_until, now):
        coin_reward *= 2
    return xp_reward, coin_reward


def calculate_daily_streak(
    streak: int,
    last_active_date: date | None,
    today: date,
    shield_active: bool = False,
) -> int:
    """
    Streak value after the nightly update.

    Logic:
    - Active since the start of yesterday -> streak + 1
    - Otherwise -> 0, unless a Streak Shield is running (streak kept)
    """
    yesterday = today - timedelta(days=1)

    if last_active_date is not None and last_active_date >= yesterday:
        return streak + 1

    if shield_active:
        return streak

    return 0

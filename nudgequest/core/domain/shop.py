"""
Shop Domain - subscription plans, power-ups and currency packages.

AICODE-NOTE: Static catalog + pure rules, NO database access.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from nudgequest.core.domain.timeutils import as_utc

PLANS = [
    {
        "id": "premium_monthly",
        "name": "Premium Monthly",
        "price": 9.99,
        "interval": "month",
        "features": [
            "Unlimited quests",
            "Advanced analytics",
            "Priority support",
            "Exclusive badges",
            "Custom themes",
        ],
    },
]


@dataclass(frozen=True)
class PowerUp:
    id: str
    name: str
    description: str
    coin_cost: int
    gem_cost: int
    effect: str
    duration: timedelta | None = None


XP_BOOSTER = "xp_booster"
STREAK_SHIELD = "streak_shield"
MISSION_RUSH = "mission_rush"
LUCKY_COIN = "lucky_coin"

POWER_UPS: dict[str, PowerUp] = {
    XP_BOOSTER: PowerUp(
        id=XP_BOOSTER,
        name="XP Booster",
        description="Double XP gain for 1 hour",
        coin_cost=50,
        gem_cost=0,
        effect="2x XP for 60 minutes",
        duration=timedelta(hours=1),
    ),
    STREAK_SHIELD: PowerUp(
        id=STREAK_SHIELD,
        name="Streak Shield",
        description="Protect your streak for 3 days",
        coin_cost=100,
        gem_cost=0,
        effect="Prevents streak loss",
        duration=timedelta(days=3),
    ),
    MISSION_RUSH: PowerUp(
        id=MISSION_RUSH,
        name="Mission Rush",
        description="Complete any mission instantly",
        coin_cost=0,
        gem_cost=5,
        effect="Instant mission completion",
    ),
    LUCKY_COIN: PowerUp(
        id=LUCKY_COIN,
        name="Lucky Coin",
        description="Double coin rewards for 24 hours",
        coin_cost=75,
        gem_cost=0,
        effect="2x coins for 24 hours",
        duration=timedelta(hours=24),
    ),
}

# amount + bonus is credited after payment
COIN_PACKAGES = [
    {"id": "coins_100", "amount": 100, "price": 0.99, "bonus": 0},
    {"id": "coins_500", "amount": 500, "price": 4.99, "bonus": 50},
    {"id": "coins_1000", "amount": 1000, "price": 9.99, "bonus": 150},
    {"id": "coins_2500", "amount": 2500, "price": 19.99, "bonus": 500},
]

GEM_PACKAGES = [
    {"id": "gems_10", "amount": 10, "price": 1.99, "bonus": 0},
    {"id": "gems_50", "amount": 50, "price": 9.99, "bonus": 10},
    {"id": "gems_100", "amount": 100, "price": 19.99, "bonus": 25},
    {"id": "gems_250", "amount": 250, "price": 39.99, "bonus": 75},
]


def find_priced_item(item_id: str) -> dict | None:
    """Plan or currency package payable with real money."""
    for item in [*PLANS, *COIN_PACKAGES, *GEM_PACKAGES]:
        if item["id"] == item_id:
            return item
    return None


def price_in_cents(price: float) -> int:
    return int(round(price * 100))


def can_afford(coins: int, gems: int, power_up: PowerUp) -> bool:
    return coins >= power_up.coin_cost and gems >= power_up.gem_cost


def extend_until(current: datetime | None, duration: timedelta, now: datetime) -> datetime:
    """Stack a timed power-up on top of a running one."""
    current, now = as_utc(current), as_utc(now)
    start = current if current is not None and current > now else now
    return start + duration


# premium granted per paid plan period
PLAN_PERIODS = {"month": timedelta(days=30)}


def package_credit(item_id: str) -> tuple[int, int] | None:
    """(coins, gems) credited for a currency package, None for other items."""
    for package in COIN_PACKAGES:
        if package["id"] == item_id:
            return package["amount"] + package["bonus"], 0
    for package in GEM_PACKAGES:
        if package["id"] == item_id:
            return 0, package["amount"] + package["bonus"]
    return None

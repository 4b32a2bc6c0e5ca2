"""
Mission Rules Domain - progress state machine for missions.

AICODE-NOTE: Pure functions, NO database access, NO side-effects.
ACTIVE (current < target) -> COMPLETED (current >= target), one-way.
"""

import random
from dataclasses import dataclass
from typing import Sequence

MISSION_TYPES = ("DAILY", "WEEKLY", "CUSTOM")

DAILY_MISSION_TEMPLATES = [
    {
        "title": "Complete 3 Quest Steps",
        "description": "Make progress on any active quest",
        "type": "DAILY",
        "target": 3,
        "xp_reward": 15,
        "coin_reward": 10,
    },
    {
        "title": "Maintain Your Streak",
        "description": "Log in and complete at least one mission",
        "type": "DAILY",
        "target": 1,
        "xp_reward": 10,
        "coin_reward": 5,
    },
    {
        "title": "Discover New Friends",
        "description": "Swipe on potential matches",
        "type": "DAILY",
        "target": 5,
        "xp_reward": 20,
        "coin_reward": 15,
    },
]

DAILY_MISSIONS_PER_USER = 2


@dataclass(frozen=True)
class ProgressOutcome:
    """Result of advancing a mission."""

    current: int
    completed_now: bool


def can_progress(is_completed: bool) -> bool:
    """
    Check whether a mission accepts progress.

    Rules:
    - COMPLETED is terminal
    """
    return not is_completed


def advance(current: int, target: int, delta: int = 1) -> ProgressOutcome:
    """
    Advance mission progress by delta, clamped to target.

    completed_now is True only for the call that reaches the target.
    """
    if delta < 1:
        raise ValueError("delta must be >= 1")

    new_current = min(current + delta, target)
    completed_now = current < target and new_current >= target
    return ProgressOutcome(current=new_current, completed_now=completed_now)


def pick_daily_templates(
    templates: Sequence[dict] = DAILY_MISSION_TEMPLATES,
    count: int = DAILY_MISSIONS_PER_USER,
    rng: random.Random | None = None,
) -> list[dict]:
    """Pick `count` distinct templates at random."""
    rng = rng or random.Random()
    return rng.sample(list(templates), k=min(count, len(templates)))

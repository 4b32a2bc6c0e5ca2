"""Storage layer - plain CRUD repositories without business logic."""

from . import (
    badge_repo,
    friend_repo,
    match_repo,
    mission_repo,
    purchase_repo,
    quest_repo,
    swipe_repo,
    user_repo,
)

__all__ = [
    "badge_repo",
    "friend_repo",
    "match_repo",
    "mission_repo",
    "purchase_repo",
    "quest_repo",
    "swipe_repo",
    "user_repo",
]

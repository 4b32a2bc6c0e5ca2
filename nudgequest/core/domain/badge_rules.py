"""
Badge Rules Domain - which badges a user qualifies for.

AICODE-NOTE: Pure functions, NO database access.
Awarding (and skipping already-earned badges) is done by the use-case.
"""

FIRST_QUEST = "first_quest"
LEVEL_5 = "level_5"
LEVEL_10 = "level_10"
STREAK_7 = "streak_7"
STREAK_30 = "streak_30"
SOCIAL_BUTTERFLY = "social_butterfly"

TRIGGER_QUEST_COMPLETED = "quest_completed"
TRIGGER_MISSION_COMPLETED = "mission_completed"
TRIGGER_FRIEND_ADDED = "friend_added"
TRIGGER_STREAK_UPDATED = "streak_updated"


def eligible_badges(xp: int, level: int, streak: int, trigger: str) -> list[str]:
    """Badge codes the user currently qualifies for."""
    checks = {
        FIRST_QUEST: xp >= 10,
        LEVEL_5: level >= 5,
        LEVEL_10: level >= 10,
        STREAK_7: streak >= 7,
        STREAK_30: streak >= 30,
        SOCIAL_BUTTERFLY: trigger == TRIGGER_FRIEND_ADDED,
    }
    return [code for code, ok in checks.items() if ok]

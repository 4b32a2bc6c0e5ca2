"""
Quest Rules Domain - status rules and the default quest catalog.

AICODE-NOTE: Pure functions, NO database access, NO side-effects.
"""

DIFFICULTIES = ("EASY", "MEDIUM", "HARD", "EXPERT")

ACTIVE = "ACTIVE"
COMPLETED = "COMPLETED"
FAILED = "FAILED"

DEFAULT_QUESTS = [
    {
        "title": "Morning Productivity",
        "description": "Complete your morning routine and tackle your most important task",
        "category": "Productivity",
        "difficulty": "EASY",
        "xp_reward": 50,
        "coin_reward": 25,
    },
    {
        "title": "Fitness Challenge",
        "description": "Complete a 30-minute workout and track your progress",
        "category": "Health",
        "difficulty": "MEDIUM",
        "xp_reward": 75,
        "coin_reward": 40,
    },
    {
        "title": "Mindful Minutes",
        "description": "Meditate for 10 minutes without distractions",
        "category": "Wellness",
        "difficulty": "EASY",
        "xp_reward": 40,
        "coin_reward": 20,
    },
    {
        "title": "Deep Work Sprint",
        "description": "Spend two focused hours on a single project",
        "category": "Productivity",
        "difficulty": "HARD",
        "xp_reward": 120,
        "coin_reward": 60,
    },
]


def can_start_quest(existing_status: str | None, quest_active: bool) -> bool:
    """
    Check whether a user can start a quest.

    Rules:
    - The quest must be active in the catalog
    - The user must not have started it already
    """
    return quest_active and existing_status is None


def can_complete_quest(status: str) -> bool:
    """Only an ACTIVE run can be completed."""
    return status == ACTIVE

"""Test data helpers."""

from nudgequest.database.models import Mission, Quest, User
from nudgequest.interfaces.api.auth import create_access_token


async def make_user(username: str = "test_user", **fields) -> User:
    return await User.create(
        email=f"{username}@example.com",
        username=username,
        password_hash="not-a-real-hash",
        **fields,
    )


async def make_quest(**fields) -> Quest:
    defaults = {
        "title": "Morning Productivity",
        "category": "Productivity",
        "difficulty": "EASY",
        "xp_reward": 50,
        "coin_reward": 25,
    }
    defaults.update(fields)
    return await Quest.create(**defaults)


async def make_mission(user: User, **fields) -> Mission:
    defaults = {
        "title": "Complete 3 Tasks",
        "type": "DAILY",
        "target": 3,
        "current": 0,
        "xp_reward": 15,
        "coin_reward": 10,
    }
    defaults.update(fields)
    return await Mission.create(user=user, **defaults)


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user)}"}

"""
Check that the production database schema matches the models.

Usage:
    python -m scripts.ops.check_db_schema

AICODE-NOTE: Catches missing migrations before they surface as
OperationalError in a request.
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tortoise import Tortoise  # noqa: E402

from nudgequest.database.config import TORTOISE_ORM  # noqa: E402
from nudgequest.database.models import (  # noqa: E402
    Friendship,
    Match,
    Mission,
    Purchase,
    Quest,
    Swipe,
    User,
    UserBadge,
    UserQuest,
)

TABLES = {
    "users": User,
    "quests": Quest,
    "user_quests": UserQuest,
    "missions": Mission,
    "swipes": Swipe,
    "matches": Match,
    "friendships": Friendship,
    "user_badges": UserBadge,
    "purchases": Purchase,
}


async def check_table_exists(model, table_name: str) -> tuple[bool, str]:
    """Table exists and every model column can be selected."""
    try:
        await model.all().limit(1).values(*model._meta.db_fields)
        return True, f"✅ Table '{table_name}' exists and is accessible"
    except Exception as e:
        return False, f"❌ Table '{table_name}' error: {e}"


async def check_power_up_columns() -> tuple[bool, str]:
    try:
        await User.all().limit(1).values(
            "id", "xp_boost_until", "coin_boost_until", "streak_shield_until"
        )
        return True, "✅ Power-up columns exist"
    except Exception as e:
        return False, f"❌ Power-up columns error: {e}"


async def main():
    print("🔍 Checking database schema synchronization...")
    print("=" * 60)

    await Tortoise.init(config=TORTOISE_ORM)

    checks = [
        (f"{name} table", check_table_exists(model, name)) for name, model in TABLES.items()
    ]
    checks.append(("User power-up columns", check_power_up_columns()))

    all_passed = True
    for check_name, check_coro in checks:
        success, message = await check_coro
        print(f"\n{check_name}:")
        print(f"  {message}")
        if not success:
            all_passed = False

    await Tortoise.close_connections()

    print("\n" + "=" * 60)
    if all_passed:
        print("✅ All checks passed! Database schema is synchronized.")
        return 0

    print("❌ Some checks failed. Database schema is NOT synchronized.")
    print("\n💡 Possible solutions:")
    print("  1. Run migrations: aerich upgrade")
    print("  2. Check if migrations are up to date: aerich history")
    print("  3. Create missing migration: aerich migrate --name 'fix_schema'")
    return 1


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)

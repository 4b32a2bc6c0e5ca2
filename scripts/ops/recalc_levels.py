"""
Recalculate every user's level from their XP.
Run: python -m scripts.ops.recalc_levels
"""

import asyncio
import logging

from tortoise import Tortoise

from nudgequest.core.use_cases.recalc_levels import recalculate_all_levels
from nudgequest.database.config import TORTOISE_ORM


async def main():
    await Tortoise.init(config=TORTOISE_ORM)
    try:
        fixed = await recalculate_all_levels()
    finally:
        await Tortoise.close_connections()
    print(f"Done! {fixed} user(s) corrected")


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    asyncio.run(main())

"""
Database configuration (Tortoise ORM).
Supports SQLite (dev) and PostgreSQL (production).
"""

import logging

from nudgequest.config import config

logger = logging.getLogger(__name__)


def get_tortoise_db_url() -> str:
    """
    Get database URL with proper scheme for Tortoise ORM.

    Tortoise ORM requires the 'postgres://' scheme, while hosting providers
    hand out 'postgresql://' URLs.
    """
    url = config.database_url

    if url.startswith("postgresql://"):
        url = "postgres://" + url[len("postgresql://"):]
        logger.info("Converted postgresql:// to postgres:// for Tortoise ORM")

    logger.info(
        f"Database URL scheme: {url.split('://')[0] if '://' in url else 'unknown'}"
    )

    return url


TORTOISE_ORM = {
    "connections": {"default": get_tortoise_db_url()},
    "apps": {
        "models": {
            "models": ["nudgequest.database.models", "aerich.models"],
            "default_connection": "default",
        },
    },
}

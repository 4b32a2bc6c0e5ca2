"""
NudgeQuest entry point.

Usage:
    python -m nudgequest.main
"""

import logging
import os

import uvicorn

from nudgequest.config import config

# Logging setup
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run the API server."""
    port = int(os.getenv("PORT", 8000))
    logger.info(f"Starting NudgeQuest API in {config.ENVIRONMENT} mode on port {port}...")

    uvicorn.run(
        "nudgequest.interfaces.api.main:app",
        host="0.0.0.0",
        port=port,
        reload=config.ENVIRONMENT == "development",
        log_level="info",
    )


if __name__ == "__main__":
    main()

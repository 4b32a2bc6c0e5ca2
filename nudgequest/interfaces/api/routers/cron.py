"""
Cron API router.

For hosts without a long-running scheduler: an external cron service calls
POST /api/cron/{job}?token=... to run a daily job.
"""

import hmac
import logging

from fastapi import APIRouter, HTTPException, Query, status

from nudgequest.config import config
from nudgequest.services.scheduler import JOBS

router = APIRouter(prefix="/api/cron", tags=["cron"])
logger = logging.getLogger(__name__)


@router.post("/{job}")
async def run_job(job: str, token: str = Query(default="")) -> dict:
    if not config.CRON_TOKEN or not hmac.compare_digest(
        token, config.CRON_TOKEN.get_secret_value()
    ):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    runner = JOBS.get(job)
    if runner is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown job")

    logger.info(f"Cron job {job} triggered")
    stats = await runner()
    return {"status": "ok", "job": job, "stats": stats}

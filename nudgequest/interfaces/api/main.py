"""
FastAPI application for the NudgeQuest web app.

Provides the REST API used by the frontend.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from tortoise import Tortoise

from nudgequest import __version__
from nudgequest.config import config
from nudgequest.core.use_cases.complete_quest import seed_default_quests
from nudgequest.database.config import TORTOISE_ORM
from nudgequest.interfaces.api.middlewares import ErrorHandlingMiddleware
from nudgequest.interfaces.api.routers import (
    auth,
    cron,
    discovery,
    friends,
    missions,
    notifications,
    payments,
    quests,
    users,
    webhooks,
)
from nudgequest.services import scheduler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Database, quest catalog and scheduler lifecycle."""
    await Tortoise.init(config=TORTOISE_ORM)
    await Tortoise.generate_schemas()
    logger.info("Database initialized")

    await seed_default_quests()
    await scheduler.start()

    yield

    await scheduler.stop()
    await Tortoise.close_connections()
    logger.info("Database connections closed")


app = FastAPI(
    title="NudgeQuest API",
    description="REST API for the NudgeQuest web app",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# AICODE-NOTE: CORS allows localhost for dev and FRONTEND_URL for production
cors_origins = [
    "http://localhost:5173",  # Local Vite development
    "http://127.0.0.1:5173",
]
frontend_url = config.FRONTEND_URL.rstrip("/")
if frontend_url not in cors_origins:
    cors_origins.append(frontend_url)
    logger.info(f"Added frontend URL to CORS origins: {frontend_url}")

app.add_middleware(ErrorHandlingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(quests.router)
app.include_router(missions.router)
app.include_router(friends.router)
app.include_router(discovery.router)
app.include_router(payments.router)
app.include_router(notifications.router)
app.include_router(webhooks.router)
app.include_router(cron.router)


@app.get("/api/health")
async def api_health():
    """API health check endpoint."""
    return {"status": "ok", "service": "nudgequest-api"}

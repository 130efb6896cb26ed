"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (logging,
optional dev schema creation, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence.database import create_schema, dispose_engine
from app.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, then table creation when CREATE_SCHEMA_ON_STARTUP is set.
    Shutdown: SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    if settings.create_schema_on_startup:
        await create_schema()
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    await dispose_engine()
    logger.info("%s stopped", settings.app_name)

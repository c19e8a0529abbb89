"""FastAPI application.

Loads the customer directory at startup and mounts the API routers.
This module is the authoritative app object — app/main.py re-exports it.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.deps import get_customer_directory
from app.api.routes.comms import router as comms_router
from app.api.routes.health import router as health_router
from app.core.logging import setup_logging
from app.core.settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    # A missing or malformed customer file must stop the service here,
    # not surface on the first request.
    directory = get_customer_directory()
    logger.info("Customer directory ready: %d customers", len(directory))
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(comms_router)

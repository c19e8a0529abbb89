"""GET /health — liveness check."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_customer_directory
from app.core.settings import get_settings
from app.customers.directory import CustomerDirectory

router = APIRouter(tags=["health"])


@router.get("/health", summary="Basic health check")
def health_check(
    directory: CustomerDirectory = Depends(get_customer_directory),
) -> dict[str, str | int]:
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
        "customers_loaded": len(directory),
    }

"""FastAPI dependency injection — customer directory and notification generator."""
from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from app.core.settings import get_settings
from app.customers.directory import CustomerDirectory
from app.notification.delivery import NotificationGenerator


@lru_cache(maxsize=1)
def get_customer_directory() -> CustomerDirectory:
    """Return the directory loaded from ``CUSTOMERS_PATH``; loaded once per process."""
    return CustomerDirectory.from_file(get_settings().customers_path)


def get_notification_generator(
    directory: CustomerDirectory = Depends(get_customer_directory),
) -> NotificationGenerator:
    """Return a NotificationGenerator bound to the loaded directory."""
    return NotificationGenerator(directory)

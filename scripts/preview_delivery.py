#!/usr/bin/env python3
"""Print the next-delivery notification for one or more customers as JSON.

Usage:
    python scripts/preview_delivery.py <customer_id> [<customer_id> ...]
    python scripts/preview_delivery.py --all     # every customer on file
    CUSTOMERS_PATH=... python scripts/preview_delivery.py --all
"""
from __future__ import annotations

import json
import sys

# Ensure project root is on sys.path
sys.path.insert(0, ".")

from app.core.settings import get_settings
from app.customers.directory import CustomerDirectory
from app.notification.delivery import NotificationGenerator


def preview(generator: NotificationGenerator, customer_id: str) -> dict:
    """Return the API-shaped payload (or the error kind) for *customer_id*."""
    result = generator.generate(customer_id)
    if not result.ok:
        return {"customerId": customer_id, "error": result.error.value}

    notification = result.value
    return {
        "customerId": customer_id,
        "title": notification.title,
        "message": notification.message,
        "totalPrice": float(notification.total_price),
        "freeGift": notification.free_gift,
    }


def main(argv: list[str]) -> int:
    if not argv:
        print(__doc__, file=sys.stderr)
        return 2

    directory = CustomerDirectory.from_file(get_settings().customers_path)
    generator = NotificationGenerator(directory)

    customer_ids = [c.id for c in directory] if argv == ["--all"] else argv
    payload = [preview(generator, cid) for cid in customer_ids]
    print(json.dumps(payload, indent=2))
    return 0 if all("error" not in p for p in payload) else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

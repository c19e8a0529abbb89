"""Customer data loader.

Reads the static customer file (YAML, or JSON, which the YAML parser
accepts) and returns frozen ``Customer`` records in file order.
"""
from __future__ import annotations

import logging
from pathlib import Path

import yaml

from app.customers.models import Customer, Subscription

logger = logging.getLogger(__name__)

_REQUIRED_CUSTOMER_FIELDS: frozenset[str] = frozenset({
    "id",
    "firstName",
    "lastName",
    "email",
})

_REQUIRED_SUBSCRIPTION_FIELDS: frozenset[str] = frozenset({
    "name",
    "subscriptionActive",
    "pouchSize",
})


def _require_str(path: Path, index: int, data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"{path}: customer #{index}: {key} must be a string, got {type(value).__name__}")
    return value


def _require_bool(path: Path, index: int, data: dict, key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise ValueError(f"{path}: customer #{index}: {key} must be a boolean, got {type(value).__name__}")
    return value


def _parse_subscription(path: Path, index: int, data: object) -> Subscription:
    if not isinstance(data, dict):
        raise ValueError(f"{path}: customer #{index}: expected a mapping per subscription")

    missing = _REQUIRED_SUBSCRIPTION_FIELDS - data.keys()
    if missing:
        raise ValueError(
            f"{path}: customer #{index}: subscription missing required fields: {sorted(missing)}"
        )

    return Subscription(
        name=_require_str(path, index, data, "name"),
        subscription_active=_require_bool(path, index, data, "subscriptionActive"),
        breed=_require_str(path, index, data, "breed") if "breed" in data else "",
        pouch_size=_require_str(path, index, data, "pouchSize"),
    )


def parse_customer(path: Path, index: int, data: object) -> Customer:
    """Build a ``Customer`` from one raw record.

    Subscriptions may be listed under ``subscriptions`` or, as in the
    original data export, ``cats``.

    Raises
    ------
    ValueError
        If the record is not a mapping, lacks a required field, or a field
        has the wrong type (quoted booleans and nulls are rejected).
    """
    if not isinstance(data, dict):
        raise ValueError(f"{path}: customer #{index}: expected a mapping, got {type(data).__name__}")

    missing = _REQUIRED_CUSTOMER_FIELDS - data.keys()
    if missing:
        raise ValueError(f"{path}: customer #{index}: missing required fields: {sorted(missing)}")

    raw_subscriptions = data.get("subscriptions", data.get("cats")) or []
    if not isinstance(raw_subscriptions, list):
        raise ValueError(f"{path}: customer #{index}: subscriptions must be a list")

    return Customer(
        id=_require_str(path, index, data, "id"),
        first_name=_require_str(path, index, data, "firstName"),
        last_name=_require_str(path, index, data, "lastName"),
        email=_require_str(path, index, data, "email"),
        subscriptions=tuple(
            _parse_subscription(path, index, item) for item in raw_subscriptions
        ),
    )


def load_customers(path: str | Path) -> list[Customer]:
    """Load every customer record from *path*.

    The document is either a list of customer mappings or a mapping with
    a ``customers`` list.

    Raises
    ------
    ValueError
        If the document has the wrong shape or any record is invalid.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if isinstance(data, dict) and "customers" in data:
        data = data["customers"]

    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of customers, got {type(data).__name__}")

    customers = [parse_customer(path, i, item) for i, item in enumerate(data)]
    logger.info("Loaded %d customers from %s", len(customers), path)
    return customers

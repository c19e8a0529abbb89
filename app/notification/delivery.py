"""Delivery notification generator.

Turns a customer identifier into a ``DeliveryNotification``:

1. Validate the identifier shape.
2. Resolve the customer in the ``CustomerDirectory``.
3. Format the active subscription names once.
4. Compose title and message, total the pouch prices, and check the
   free-gift threshold, all against the same resolved ``Customer``.

Invalid and unknown identifiers are returned as a failed ``Result``
carrying a ``DeliveryError``; nothing here raises for bad input.

Pricing note: a pouch size missing from ``POUCH_PRICES`` is charged at
zero rather than failing the whole notification.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Generic, TypeVar

from app.customers.directory import CustomerDirectory
from app.customers.models import Customer, SizeCode

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CUSTOMER_ID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
)

NO_ACTIVE_ITEMS = "No active subscriptions"

POUCH_PRICES: dict[str, Decimal] = {
    SizeCode.A.value: Decimal("55.50"),
    SizeCode.B.value: Decimal("59.50"),
    SizeCode.C.value: Decimal("62.75"),
    SizeCode.D.value: Decimal("66.00"),
    SizeCode.E.value: Decimal("69.00"),
    SizeCode.F.value: Decimal("71.25"),
}

FREE_GIFT_THRESHOLD = Decimal("120.00")

_CENTS = Decimal("0.01")


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------

class DeliveryError(str, Enum):
    """Why a notification could not be produced."""

    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a ``DeliveryError``, never both."""

    value: T | None = None
    error: DeliveryError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: DeliveryError) -> Result[T]:
        return cls(error=error)


@dataclass(frozen=True)
class DeliveryNotification:
    title: str
    message: str
    total_price: Decimal
    free_gift: bool


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def is_valid_customer_id(value: object) -> bool:
    """Return True if *value* is a lowercase 8-4-4-4-12 hex identifier."""
    return isinstance(value, str) and _CUSTOMER_ID_RE.fullmatch(value) is not None


def resolve_customer(directory: CustomerDirectory, customer_id: str) -> Result[Customer]:
    """Find *customer_id* in *directory*.

    Malformed identifiers fail with ``INVALID_IDENTIFIER`` without touching
    the directory; well-formed identifiers with no match fail with
    ``CUSTOMER_NOT_FOUND``.
    """
    if not is_valid_customer_id(customer_id):
        return Result.failure(DeliveryError.INVALID_IDENTIFIER)

    customer = directory.find(customer_id)
    if customer is None:
        return Result.failure(DeliveryError.CUSTOMER_NOT_FOUND)
    return Result.success(customer)


# ---------------------------------------------------------------------------
# Derivations
# ---------------------------------------------------------------------------

def format_active_names(customer: Customer) -> str:
    """Join active subscription names: ``"A"``, ``"A and B"``, ``"A, B and C"``.

    Returns ``NO_ACTIVE_ITEMS`` when nothing is active.
    """
    names = [s.name for s in customer.active_subscriptions()]
    if not names:
        return NO_ACTIVE_ITEMS
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} and {names[-1]}"


def create_title(formatted_names: str) -> str:
    if formatted_names == NO_ACTIVE_ITEMS:
        return NO_ACTIVE_ITEMS
    return f"Your next delivery for {formatted_names}"


def create_message(customer: Customer, formatted_names: str) -> str:
    if formatted_names == NO_ACTIVE_ITEMS:
        return NO_ACTIVE_ITEMS
    return (
        f"Hey {customer.first_name}! In two days' time, we'll be charging you "
        f"for your next order for {formatted_names}'s fresh food."
    )


def calculate_total_price(customer: Customer) -> Decimal:
    """Sum pouch prices over active subscriptions, to the cent."""
    total = Decimal("0")
    for subscription in customer.active_subscriptions():
        price = POUCH_PRICES.get(subscription.pouch_size)
        if price is None:
            logger.warning(
                "Unknown pouch size %r on customer %s; pricing at zero",
                subscription.pouch_size,
                customer.id,
            )
            continue
        total += price
    return total.quantize(_CENTS)


def is_eligible_for_free_gift(total_price: Decimal) -> bool:
    return total_price > FREE_GIFT_THRESHOLD


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

class NotificationGenerator:
    """Builds delivery notifications from a fixed ``CustomerDirectory``."""

    def __init__(self, directory: CustomerDirectory) -> None:
        self._directory = directory

    @property
    def directory(self) -> CustomerDirectory:
        return self._directory

    def generate(self, customer_id: str) -> Result[DeliveryNotification]:
        """Return the notification for *customer_id*, or the lookup failure."""
        resolved = resolve_customer(self._directory, customer_id)
        if not resolved.ok:
            logger.info("No notification for %r: %s", customer_id, resolved.error.value)
            return Result.failure(resolved.error)

        customer = resolved.value
        names = format_active_names(customer)
        total_price = calculate_total_price(customer)

        return Result.success(
            DeliveryNotification(
                title=create_title(names),
                message=create_message(customer, names),
                total_price=total_price,
                free_gift=is_eligible_for_free_gift(total_price),
            )
        )

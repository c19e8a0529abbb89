"""Customer directory.

An immutable lookup table of customers, built once at startup and handed
to the notification generator.  Lookups scan in load order.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from app.customers.loader import load_customers
from app.customers.models import Customer


class CustomerDirectory:
    """Read-only collection of customers keyed by ``Customer.id``."""

    def __init__(self, customers: Iterable[Customer] = ()) -> None:
        self._customers: tuple[Customer, ...] = tuple(customers)

    def find(self, customer_id: str) -> Customer | None:
        """Return the first customer whose id equals *customer_id*, or ``None``.

        Identifier uniqueness is assumed, not enforced.
        """
        for customer in self._customers:
            if customer.id == customer_id:
                return customer
        return None

    def __len__(self) -> int:
        return len(self._customers)

    def __iter__(self) -> Iterator[Customer]:
        return iter(self._customers)

    @classmethod
    def from_file(cls, path: str | Path) -> CustomerDirectory:
        """Return a directory loaded from the customer file at *path*."""
        return cls(load_customers(path))

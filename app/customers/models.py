"""Customer and subscription records.

Records are frozen: the directory owns them for the lifetime of the
process and every derivation reads them without modification.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SizeCode(str, Enum):
    """Pouch sizes offered on a subscription."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"


@dataclass(frozen=True)
class Subscription:
    """A single subscribed item (one cat) on a customer's account."""

    name: str
    subscription_active: bool
    breed: str
    # Kept as the raw code so unknown sizes survive loading.
    pouch_size: str


@dataclass(frozen=True)
class Customer:
    id: str
    first_name: str
    last_name: str
    email: str
    subscriptions: tuple[Subscription, ...] = field(default_factory=tuple)

    def active_subscriptions(self) -> list[Subscription]:
        """Return active subscriptions in their original order."""
        return [s for s in self.subscriptions if s.subscription_active]

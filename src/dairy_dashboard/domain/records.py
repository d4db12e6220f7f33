"""Domain models for records supplied by the dairy backend."""

from dataclasses import dataclass

MORNING = "morning"
EVENING = "evening"
CUSTOMER_ROLE = "customer"


@dataclass(frozen=True)
class MilkEntry:
    """One recorded milk delivery."""

    date: str
    time: str
    liters: float
    total: float
    id: str | None = None
    customer_id: str | None = None
    rate: float | None = None


@dataclass(frozen=True)
class Payment:
    """A payment received from a customer."""

    amount: float
    id: str | None = None
    customer_id: str | None = None
    date: str | None = None


@dataclass(frozen=True)
class User:
    """A backend user account."""

    role: str
    id: str | None = None
    name: str | None = None

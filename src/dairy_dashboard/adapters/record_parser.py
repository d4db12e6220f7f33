"""Conversion of raw backend rows into domain records.

A row with a malformed amount (liters, total, payment amount) is dropped
with a warning, so it contributes nothing to any total. A malformed rate is
only cleared, since no total depends on it. Dates and time-of-day values are
kept as received; the aggregation step decides what to do with unexpected
ones.
"""

import logging
import math
from collections.abc import Callable
from typing import TypeVar

from dairy_dashboard.domain.errors import DataError
from dairy_dashboard.domain.records import MilkEntry, Payment, User

_logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_milk_entries(rows: list[dict[str, object]]) -> list[MilkEntry]:
    """Parse milk entry rows, skipping malformed ones."""
    return _parse_all(rows, _parse_milk_entry, "milk entry")


def parse_payments(rows: list[dict[str, object]]) -> list[Payment]:
    """Parse payment rows, skipping malformed ones."""
    return _parse_all(rows, _parse_payment, "payment")


def parse_users(rows: list[dict[str, object]]) -> list[User]:
    """Parse user rows."""
    return _parse_all(rows, _parse_user, "user")


def _parse_all(
    rows: list[dict[str, object]],
    parse: Callable[[dict[str, object]], T],
    kind: str,
) -> list[T]:
    parsed: list[T] = []
    for row in rows:
        try:
            parsed.append(parse(row))
        except DataError as exc:
            _logger.warning("Skipping malformed %s %s: %s", kind, _row_id(row), exc)
    return parsed


def _parse_milk_entry(row: dict[str, object]) -> MilkEntry:
    return MilkEntry(
        date=_optional_str(row.get("date")) or "",
        time=_optional_str(row.get("time")) or "",
        liters=to_amount(row.get("liters"), "liters"),
        total=to_amount(row.get("total"), "total"),
        id=_row_id(row),
        customer_id=_optional_str(row.get("customer_id") or row.get("customerId")),
        rate=_optional_rate(row),
    )


def _parse_payment(row: dict[str, object]) -> Payment:
    return Payment(
        amount=to_amount(row.get("amount"), "amount"),
        id=_row_id(row),
        customer_id=_optional_str(row.get("customer_id") or row.get("customerId")),
        date=_optional_str(row.get("date")),
    )


def _parse_user(row: dict[str, object]) -> User:
    return User(
        role=_optional_str(row.get("role")) or "",
        id=_row_id(row),
        name=_optional_str(row.get("name")),
    )


def to_amount(value: object, field_name: str) -> float:
    """Return ``value`` as a finite non-negative float or raise DataError."""
    if isinstance(value, bool) or value is None:
        raise DataError(f"{field_name} is missing or not numeric: {value!r}")
    try:
        amount = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise DataError(f"{field_name} is not numeric: {value!r}") from exc
    if not math.isfinite(amount) or amount < 0:
        raise DataError(f"{field_name} must be a non-negative number: {value!r}")
    return amount


def _optional_rate(row: dict[str, object]) -> float | None:
    rate = row.get("rate")
    if rate is None:
        return None
    try:
        return to_amount(rate, "rate")
    except DataError as exc:
        _logger.warning("Ignoring rate of milk entry %s: %s", _row_id(row), exc)
        return None


def _row_id(row: dict[str, object]) -> str | None:
    return _optional_str(row.get("id") or row.get("_id"))


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)

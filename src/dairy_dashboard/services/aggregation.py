"""Aggregation of milk entries, payments and users for the dashboard.

All functions here are pure: they read their arguments and return new
values without I/O or shared state.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta

from dairy_dashboard.domain.dashboard import (
    DaySummary,
    DaySummaryWithGrowth,
    GrowthDirection,
    SummaryTotals,
    VolumeAmount,
)
from dairy_dashboard.domain.errors import DataError
from dairy_dashboard.domain.records import (
    CUSTOMER_ROLE,
    EVENING,
    MORNING,
    MilkEntry,
    Payment,
    User,
)

DEFAULT_WINDOW_DAYS = 7
GROWTH_FROM_ZERO = 100.0

_logger = logging.getLogger(__name__)


def compute_summary_totals(
    entries: Iterable[MilkEntry],
    payments: Iterable[Payment],
    users: Iterable[User],
) -> SummaryTotals:
    """Return the headline totals for the summary cards.

    Dues are bill minus payments and are not clamped; a negative value means
    customers have paid ahead.
    """
    entries = list(entries)
    total_bill = sum((entry.total for entry in entries), 0.0)
    total_payment = sum((payment.amount for payment in payments), 0.0)
    return SummaryTotals(
        total_customers=sum(1 for user in users if user.role == CUSTOMER_ROLE),
        total_milk_liters=sum((entry.liters for entry in entries), 0.0),
        total_payment=total_payment,
        total_bill=total_bill,
        total_dues=total_bill - total_payment,
    )


def window_dates(reference_date: date, window_days: int = DEFAULT_WINDOW_DAYS) -> list[date]:
    """Return ``window_days`` consecutive days ending at ``reference_date``."""
    if window_days < 1:
        raise ValueError(f"window_days must be at least 1, got {window_days}")
    return [
        reference_date - timedelta(days=offset)
        for offset in range(window_days - 1, -1, -1)
    ]


def parse_day(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` calendar day or raise DataError."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise DataError(f"Invalid calendar day: {value!r}") from exc


def build_daily_series(
    entries: Iterable[MilkEntry],
    reference_date: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> list[DaySummary]:
    """Group entries into one summary per day of the window, oldest first.

    Entries match a day by exact equality with its ISO date string. The
    ``total`` of a day covers every entry of that day, including entries
    whose time is neither morning nor evening, so it can exceed
    morning plus evening.
    """
    days = [day.isoformat() for day in window_dates(reference_date, window_days)]
    by_day: dict[str, list[MilkEntry]] = {day: [] for day in days}
    for entry in entries:
        try:
            parse_day(entry.date)
        except DataError as exc:
            _logger.warning("Ignoring milk entry %s: %s", entry.id, exc)
            continue
        if entry.date in by_day:
            by_day[entry.date].append(entry)

    return [_summarize_day(day, by_day[day]) for day in days]


def annotate_growth(series: Sequence[DaySummary]) -> list[DaySummaryWithGrowth]:
    """Attach the day-over-day change in total liters to each day."""
    annotated = []
    for index, day in enumerate(series):
        rate = 0.0
        if index > 0:
            rate = growth_rate(series[index - 1].total.liters, day.total.liters)
        annotated.append(
            DaySummaryWithGrowth(
                date=day.date,
                morning=day.morning,
                evening=day.evening,
                total=day.total,
                growth_rate=rate,
                growth_direction=growth_direction(rate),
            )
        )
    return annotated


def growth_rate(previous: float, current: float) -> float:
    """Return the percentage change from ``previous`` to ``current``.

    Growth from an empty day to a non-empty one counts as 100%.
    """
    if previous > 0:
        return (current - previous) / previous * 100
    if current > 0:
        return GROWTH_FROM_ZERO
    return 0.0


def growth_direction(rate: float) -> GrowthDirection:
    """Classify a growth rate."""
    if rate > 0:
        return "up"
    if rate < 0:
        return "down"
    return "neutral"


def _summarize_day(day: str, entries: list[MilkEntry]) -> DaySummary:
    return DaySummary(
        date=day,
        morning=_volume([entry for entry in entries if entry.time == MORNING]),
        evening=_volume([entry for entry in entries if entry.time == EVENING]),
        total=_volume(entries),
    )


def _volume(entries: list[MilkEntry]) -> VolumeAmount:
    return VolumeAmount(
        liters=sum((entry.liters for entry in entries), 0.0),
        amount=sum((entry.total for entry in entries), 0.0),
    )

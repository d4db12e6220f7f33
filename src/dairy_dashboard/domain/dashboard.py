"""Domain models for dashboard aggregates."""

from dataclasses import dataclass, field
from datetime import date
from typing import Literal

from dairy_dashboard.domain.chart import ChartGeometry
from dairy_dashboard.domain.records import MilkEntry, Payment, User

GrowthDirection = Literal["up", "down", "neutral"]


@dataclass(frozen=True)
class VolumeAmount:
    """Liters collected and the amount billed for them."""

    liters: float = 0.0
    amount: float = 0.0


@dataclass(frozen=True)
class DaySummary:
    """Morning, evening and total collection for one calendar day."""

    date: str
    morning: VolumeAmount = field(default_factory=VolumeAmount)
    evening: VolumeAmount = field(default_factory=VolumeAmount)
    total: VolumeAmount = field(default_factory=VolumeAmount)


@dataclass(frozen=True)
class DaySummaryWithGrowth(DaySummary):
    """Day summary with the change in total liters against the prior day."""

    growth_rate: float = 0.0
    growth_direction: GrowthDirection = "neutral"


@dataclass(frozen=True)
class SummaryTotals:
    """Headline figures for the summary cards."""

    total_customers: int
    total_milk_liters: float
    total_payment: float
    total_bill: float
    total_dues: float


@dataclass(frozen=True)
class DashboardSnapshot:
    """Immutable copy of the three collections a pipeline run works on."""

    entries: tuple[MilkEntry, ...] = ()
    payments: tuple[Payment, ...] = ()
    users: tuple[User, ...] = ()


@dataclass(frozen=True)
class DashboardView:
    """Everything the rendering layer needs for one dashboard page."""

    reference_date: date
    totals: SummaryTotals
    series: list[DaySummaryWithGrowth]
    chart: ChartGeometry

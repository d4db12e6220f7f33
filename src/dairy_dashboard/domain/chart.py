"""Domain models for chart drawing primitives.

Horizontal positions (``x``, ``width``) are percentages of the canvas width.
Vertical positions (``y``, ``height``) are pixels measured from the top of the
plot area.
"""

from dataclasses import dataclass
from typing import Literal

Bucket = Literal["morning", "evening"]


@dataclass(frozen=True)
class Bar:
    """A rectangle for one time-of-day bucket of one day."""

    day_index: int
    bucket: Bucket
    x: float
    width: float
    y: float
    height: float
    value: float


@dataclass(frozen=True)
class LineSegment:
    """A segment of the total-liters trend line between two days."""

    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Marker:
    """A point marker at a day's total liters."""

    day_index: int
    x: float
    y: float
    value: float


@dataclass(frozen=True)
class AxisTick:
    """A horizontal grid line with its y-axis label."""

    ratio: float
    y: float
    label: int


@dataclass(frozen=True)
class DayLabel:
    """Text shown under a day's slot."""

    weekday: str
    date_label: str
    morning_liters: float
    evening_liters: float
    total_liters: float
    growth_rate: float
    growth_direction: str
    show_growth: bool


@dataclass(frozen=True)
class ChartGeometry:
    """Positioned shapes for the daily collection chart."""

    chart_height: float
    plot_height: float
    max_value: float
    bars: list[Bar]
    lines: list[LineSegment]
    markers: list[Marker]
    ticks: list[AxisTick]
    labels: list[DayLabel]

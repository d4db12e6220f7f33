"""Projection of the daily series onto the chart canvas."""

import math
from collections.abc import Sequence
from datetime import date

from dairy_dashboard.domain.chart import (
    AxisTick,
    Bar,
    ChartGeometry,
    DayLabel,
    LineSegment,
    Marker,
)
from dairy_dashboard.domain.dashboard import DaySummaryWithGrowth

DEFAULT_CHART_HEIGHT = 300.0
DEFAULT_MIN_SCALE = 10.0
AXIS_RESERVE = 32.0
TICK_RATIOS = (0.0, 0.25, 0.5, 0.75, 1.0)
BARS_PER_SLOT = 3


def project_to_chart_geometry(
    series: Sequence[DaySummaryWithGrowth],
    chart_height: float = DEFAULT_CHART_HEIGHT,
    min_scale: float = DEFAULT_MIN_SCALE,
    axis_reserve: float = AXIS_RESERVE,
) -> ChartGeometry:
    """Map a daily series to bars, a trend line, markers and axis ticks.

    Each day owns an equal slot of the canvas width. The morning and evening
    bars are a third of the slot wide each and sit side by side around the
    slot centre, where the day's total marker is drawn. Values are scaled
    against the largest liters figure in the series, never less than
    ``min_scale``, so an all-zero series draws flat at the baseline.
    """
    if min_scale <= 0:
        raise ValueError(f"min_scale must be positive, got {min_scale}")
    if chart_height <= axis_reserve:
        raise ValueError(
            f"chart_height {chart_height} leaves no room above the axis band {axis_reserve}"
        )

    plot_height = chart_height - axis_reserve
    max_value = max(
        [min_scale]
        + [max(day.morning.liters, day.evening.liters, day.total.liters) for day in series]
    )

    def height_of(value: float) -> float:
        return value / max_value * plot_height

    count = len(series)
    slot_width = 100 / count if count else 0.0
    bar_width = slot_width / BARS_PER_SLOT

    bars: list[Bar] = []
    markers: list[Marker] = []
    labels: list[DayLabel] = []
    for index, day in enumerate(series):
        slot_start = index * slot_width
        for bucket, offset, value in (
            ("morning", 0.5, day.morning.liters),
            ("evening", 1.5, day.evening.liters),
        ):
            height = height_of(value)
            bars.append(
                Bar(
                    day_index=index,
                    bucket=bucket,
                    x=slot_start + bar_width * offset,
                    width=bar_width,
                    y=plot_height - height,
                    height=height,
                    value=value,
                )
            )
        markers.append(
            Marker(
                day_index=index,
                x=slot_start + slot_width / 2,
                y=plot_height - height_of(day.total.liters),
                value=day.total.liters,
            )
        )
        labels.append(_day_label(index, day))

    lines = [
        LineSegment(x1=previous.x, y1=previous.y, x2=current.x, y2=current.y)
        for previous, current in zip(markers, markers[1:])
    ]
    ticks = [
        AxisTick(
            ratio=ratio,
            y=plot_height - ratio * plot_height,
            label=_round_half_up(max_value * ratio),
        )
        for ratio in TICK_RATIOS
    ]

    return ChartGeometry(
        chart_height=chart_height,
        plot_height=plot_height,
        max_value=max_value,
        bars=bars,
        lines=lines,
        markers=markers,
        ticks=ticks,
        labels=labels,
    )


def _day_label(index: int, day: DaySummaryWithGrowth) -> DayLabel:
    calendar_day = date.fromisoformat(day.date)
    return DayLabel(
        weekday=calendar_day.strftime("%a"),
        date_label=f"{calendar_day.strftime('%b')} {calendar_day.day}",
        morning_liters=day.morning.liters,
        evening_liters=day.evening.liters,
        total_liters=day.total.liters,
        growth_rate=day.growth_rate,
        growth_direction=day.growth_direction,
        show_growth=index > 0,
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

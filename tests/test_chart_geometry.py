"""Tests for chart geometry projection."""

import pytest

from dairy_dashboard.domain.dashboard import DaySummaryWithGrowth, VolumeAmount
from dairy_dashboard.services.chart import project_to_chart_geometry


def _day(
    day: str, morning: float, evening: float, growth: float = 0.0
) -> DaySummaryWithGrowth:
    return DaySummaryWithGrowth(
        date=day,
        morning=VolumeAmount(liters=morning),
        evening=VolumeAmount(liters=evening),
        total=VolumeAmount(liters=morning + evening),
        growth_rate=growth,
        growth_direction="up" if growth > 0 else "down" if growth < 0 else "neutral",
    )


def test_all_zero_series_uses_min_scale() -> None:
    series = [_day(f"2024-01-0{index}", 0, 0) for index in range(1, 8)]

    chart = project_to_chart_geometry(series, chart_height=300, min_scale=10)

    assert chart.max_value == 10
    assert chart.plot_height == 268
    assert len(chart.bars) == 14
    assert all(bar.height == 0 for bar in chart.bars)
    assert all(bar.y == 268 for bar in chart.bars)
    assert all(marker.y == 268 for marker in chart.markers)


def test_scale_follows_largest_value() -> None:
    series = [_day("2024-01-01", 10, 6), _day("2024-01-02", 4, 0)]

    chart = project_to_chart_geometry(series, chart_height=300)

    assert chart.max_value == 16
    first_marker = chart.markers[0]
    assert first_marker.y == pytest.approx(0)
    morning_bar = chart.bars[0]
    assert morning_bar.bucket == "morning"
    assert morning_bar.height == pytest.approx(10 / 16 * 268)
    assert morning_bar.y == pytest.approx(268 - 10 / 16 * 268)


def test_bars_are_centred_on_marker() -> None:
    series = [_day("2024-01-01", 1, 2), _day("2024-01-02", 3, 4)]

    chart = project_to_chart_geometry(series)

    morning, evening = chart.bars[2], chart.bars[3]
    marker = chart.markers[1]
    assert morning.width == pytest.approx(100 / 6)
    assert evening.x == pytest.approx(morning.x + morning.width)
    assert marker.x == pytest.approx(75)
    assert (morning.x + evening.x + evening.width) / 2 == pytest.approx(marker.x)


def test_line_connects_consecutive_markers() -> None:
    series = [_day(f"2024-01-0{index}", index, 0) for index in range(1, 5)]

    chart = project_to_chart_geometry(series)

    assert len(chart.markers) == 4
    assert len(chart.lines) == 3
    for segment, previous, current in zip(
        chart.lines, chart.markers, chart.markers[1:]
    ):
        assert (segment.x1, segment.y1) == (previous.x, previous.y)
        assert (segment.x2, segment.y2) == (current.x, current.y)


def test_axis_ticks_and_labels() -> None:
    series = [_day("2024-01-01", 1, 1), _day("2024-01-02", 2, 1, growth=50)]

    chart = project_to_chart_geometry(series)

    assert [tick.label for tick in chart.ticks] == [0, 3, 5, 8, 10]
    assert chart.ticks[0].y == 268
    assert chart.ticks[-1].y == 0
    first, second = chart.labels
    assert first.weekday == "Mon"
    assert first.date_label == "Jan 1"
    assert first.show_growth is False
    assert second.show_growth is True
    assert second.growth_direction == "up"
    assert second.total_liters == 3


def test_empty_series_has_no_shapes() -> None:
    chart = project_to_chart_geometry([])

    assert chart.bars == []
    assert chart.lines == []
    assert chart.markers == []
    assert len(chart.ticks) == 5


def test_invalid_dimensions_raise() -> None:
    with pytest.raises(ValueError):
        project_to_chart_geometry([], chart_height=20)
    with pytest.raises(ValueError):
        project_to_chart_geometry([], min_scale=0)

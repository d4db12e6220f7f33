"""HTML and plain-text rendering of dashboard states."""

from html import escape

from dairy_dashboard.domain.chart import ChartGeometry, DayLabel
from dairy_dashboard.domain.dashboard import DashboardView, SummaryTotals
from dairy_dashboard.domain.state import DashboardState, Failed, Pending, Ready

MORNING_COLOR = "#facc15"
EVENING_COLOR = "#3b82f6"
TOTAL_COLOR = "#10b981"
GRID_COLOR = "#e5e7eb"

_ARROWS = {"up": "&#8593;", "down": "&#8595;", "neutral": "&#8212;"}


def render_dashboard_page(state: DashboardState) -> str:
    """Render a complete HTML page for a dashboard state."""
    if isinstance(state, Ready):
        body = _render_view(state.view)
    elif isinstance(state, Failed):
        body = (
            '<div class="unavailable">'
            "<h3>Data unavailable</h3>"
            f"<p>{escape(state.error)}</p>"
            "</div>"
        )
    elif isinstance(state, Pending):
        body = '<div class="loading">Loading...</div>'
    else:
        raise TypeError(f"Unknown dashboard state: {state!r}")
    return _PAGE_TEMPLATE.replace("{body}", body)


def render_text_report(state: DashboardState) -> str:
    """Render a plain-text summary for terminals."""
    if isinstance(state, Failed):
        return f"Dashboard data unavailable: {state.error}"
    if isinstance(state, Pending):
        return "Loading..."
    view = state.view
    totals = view.totals
    lines = [
        "Dairy Dashboard",
        "=" * 40,
        f"Total Customers:    {totals.total_customers}",
        f"Total Milk:         {totals.total_milk_liters:.2f} L",
        f"Total Payment:      RS {totals.total_payment:.2f}",
        f"Total Bill:         RS {totals.total_bill:.2f}",
        f"Total Dues:         RS {totals.total_dues:.2f}",
        "",
        f"Last {len(view.series)} days (through {view.reference_date.isoformat()})",
        "-" * 40,
    ]
    for label in view.chart.labels:
        growth = _format_growth(label) if label.show_growth else ""
        lines.append(
            f"{label.weekday} {label.date_label:<7} "
            f"morning {label.morning_liters:6.1f}L  "
            f"evening {label.evening_liters:6.1f}L  "
            f"total {label.total_liters:6.1f}L  {growth}".rstrip()
        )
    return "\n".join(lines)


def _render_view(view: DashboardView) -> str:
    return (
        _render_cards(view.totals)
        + '<div class="panel">'
        + f"<h3>Last {len(view.series)} Days Milk Collection</h3>"
        + '<p class="muted">Daily reports with growth rate</p>'
        + _render_chart(view.chart)
        + _render_labels(view.chart.labels)
        + _LEGEND
        + "</div>"
    )


def _render_cards(totals: SummaryTotals) -> str:
    cards = [
        ("Total Customers", str(totals.total_customers), "#6366f1"),
        ("Total Milk (Liters)", f"{totals.total_milk_liters:.2f} L", "#3b82f6"),
        ("Total Payment", f"RS {totals.total_payment:.2f}", "#22c55e"),
        ("Total Bill", f"RS {totals.total_bill:.2f}", "#eab308"),
        ("Total Dues", f"RS {totals.total_dues:.2f}", "#ef4444"),
    ]
    rendered = "".join(
        f'<div class="card" style="background:{color}">'
        f'<p class="card-title">{escape(title)}</p>'
        f'<p class="card-value">{escape(value)}</p>'
        "</div>"
        for title, value, color in cards
    )
    return f'<div class="cards">{rendered}</div>'


def _render_chart(chart: ChartGeometry) -> str:
    plot_height = chart.plot_height
    axis = "".join(
        f'<span style="bottom:{tick.ratio * 100:.2f}%">{tick.label}L</span>'
        for tick in reversed(chart.ticks)
    )
    shapes = [
        f'<line x1="0" y1="{tick.y:.2f}" x2="100%" y2="{tick.y:.2f}" '
        f'stroke="{GRID_COLOR}" stroke-width="1" stroke-dasharray="4,4" />'
        for tick in chart.ticks
    ]
    for bar in chart.bars:
        color = MORNING_COLOR if bar.bucket == "morning" else EVENING_COLOR
        shapes.append(
            f'<rect class="bar-{bar.bucket}" x="{bar.x:.4f}%" y="{bar.y:.2f}" '
            f'width="{bar.width:.4f}%" height="{bar.height:.2f}" fill="{color}" rx="4" />'
        )
    for line in chart.lines:
        shapes.append(
            f'<line class="trend" x1="{line.x1:.4f}%" y1="{line.y1:.2f}" '
            f'x2="{line.x2:.4f}%" y2="{line.y2:.2f}" stroke="{TOTAL_COLOR}" '
            'stroke-width="3" stroke-linecap="round" />'
        )
    for marker in chart.markers:
        shapes.append(
            f'<circle class="point" cx="{marker.x:.4f}%" cy="{marker.y:.2f}" r="5" '
            f'fill="{TOTAL_COLOR}" stroke="white" stroke-width="2" />'
        )
    return (
        f'<div class="chart" style="height:{chart.chart_height:.0f}px">'
        f'<div class="y-axis" style="height:{plot_height:.0f}px">{axis}</div>'
        f'<svg width="100%" height="{plot_height:.0f}">{"".join(shapes)}</svg>'
        "</div>"
    )


def _render_labels(labels: list[DayLabel]) -> str:
    columns = []
    for label in labels:
        growth = ""
        if label.show_growth:
            growth = (
                f'<div class="growth growth-{escape(label.growth_direction)}">'
                f"{_format_growth(label, html=True)}</div>"
            )
        columns.append(
            '<div class="day">'
            f'<div class="weekday">{escape(label.weekday)}</div>'
            f'<div class="muted">{escape(label.date_label)}</div>'
            f'<div><span class="dot" style="background:{MORNING_COLOR}"></span>'
            f"{label.morning_liters:.1f}L</div>"
            f'<div><span class="dot" style="background:{EVENING_COLOR}"></span>'
            f"{label.evening_liters:.1f}L</div>"
            f'<div class="day-total">Total: {label.total_liters:.1f}L</div>'
            f"{growth}"
            "</div>"
        )
    return f'<div class="days">{"".join(columns)}</div>'


def _format_growth(label: DayLabel, html: bool = False) -> str:
    if html:
        arrow = _ARROWS.get(label.growth_direction, _ARROWS["neutral"])
    else:
        arrow = {"up": "+", "down": "-"}.get(label.growth_direction, "=")
    return f"{arrow} {abs(label.growth_rate):.1f}%"


_LEGEND = (
    '<div class="legend">'
    f'<span><span class="dot" style="background:{MORNING_COLOR}"></span>Morning</span>'
    f'<span><span class="dot" style="background:{EVENING_COLOR}"></span>Evening</span>'
    f'<span><span class="dot" style="background:{TOTAL_COLOR}"></span>Total Trend</span>'
    "</div>"
)

_PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Dairy Dashboard</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; color: #111827; }
      h2 { margin-bottom: 0.25rem; }
      .muted { color: #6b7280; font-size: 0.8rem; }
      .cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 1rem; margin: 1.5rem 0; }
      .card { color: white; border-radius: 0.75rem; padding: 1.25rem; }
      .card-title { margin: 0 0 0.25rem; font-size: 0.85rem; opacity: 0.85; }
      .card-value { margin: 0; font-size: 1.75rem; font-weight: 700; }
      .panel { border: 1px solid #f3f4f6; border-radius: 0.75rem; padding: 1.5rem; min-width: 600px; }
      .chart { position: relative; display: flex; }
      .y-axis { position: relative; width: 3rem; font-size: 0.7rem; color: #6b7280; }
      .y-axis span { position: absolute; left: 0; transform: translateY(50%); }
      .days { display: flex; justify-content: space-around; margin-left: 3rem; }
      .day { display: flex; flex-direction: column; align-items: center; min-width: 80px; font-size: 0.75rem; }
      .weekday { font-weight: 600; }
      .day-total { font-weight: 700; border-top: 1px solid #e5e7eb; margin-top: 0.25rem; padding-top: 0.25rem; }
      .dot { display: inline-block; width: 0.5rem; height: 0.5rem; border-radius: 50%; margin-right: 0.25rem; }
      .growth { margin-top: 0.5rem; border-radius: 999px; padding: 0.1rem 0.5rem; }
      .growth-up { background: #dcfce7; color: #15803d; }
      .growth-down { background: #fee2e2; color: #b91c1c; }
      .growth-neutral { background: #f3f4f6; color: #4b5563; }
      .legend { display: flex; gap: 1rem; justify-content: center; margin-top: 2rem; padding-top: 1rem; border-top: 1px solid #e5e7eb; }
      .loading, .unavailable { padding: 3rem; text-align: center; color: #4b5563; }
      .unavailable h3 { color: #b91c1c; }
    </style>
  </head>
  <body>
    <h2>Dashboard</h2>
    <p class="muted">Overview of your dairy operations</p>
    {body}
  </body>
</html>
"""

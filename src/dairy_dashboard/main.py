"""Command-line dashboard report.

Usage:
    python -m dairy_dashboard.main [--reference-date YYYY-MM-DD] [--days N]
"""

import argparse
import asyncio
import sys
from datetime import date

from dairy_dashboard.app_logging import configure_logging
from dairy_dashboard.containers import build_container
from dairy_dashboard.domain.state import DashboardState, Ready
from dairy_dashboard.services.rendering import render_text_report


def _window_days(raw: str) -> int:
    try:
        days = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid day count: {raw!r}") from exc
    if days < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {days}")
    return days


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the dairy dashboard report.")
    parser.add_argument(
        "--reference-date",
        type=date.fromisoformat,
        default=None,
        help="Last day of the chart window (defaults to today).",
    )
    parser.add_argument(
        "--days",
        type=_window_days,
        default=None,
        help="Number of days in the chart window.",
    )
    return parser.parse_args(argv)


async def _load_state(args: argparse.Namespace) -> DashboardState:
    container = build_container()
    try:
        return await container.dashboard_service.get_state(
            reference_date=args.reference_date, window_days=args.days
        )
    finally:
        await container.close_resources()


def main(argv: list[str] | None = None) -> int:
    """Print the dashboard report and return the process exit code."""
    configure_logging()
    args = _parse_args(argv)
    state = asyncio.run(_load_state(args))
    print(render_text_report(state))
    return 0 if isinstance(state, Ready) else 1


if __name__ == "__main__":
    sys.exit(main())

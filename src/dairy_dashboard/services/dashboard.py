"""Dashboard service: loads the backend collections and runs the pipeline."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import date, datetime
from typing import TypeVar
from zoneinfo import ZoneInfo

from dairy_dashboard.adapters.dairy_api_client import DairyApiClient
from dairy_dashboard.domain.dashboard import DashboardSnapshot, DashboardView
from dairy_dashboard.domain.errors import FetchError
from dairy_dashboard.domain.state import DashboardState, Failed, Ready
from dairy_dashboard.services.aggregation import (
    DEFAULT_WINDOW_DAYS,
    annotate_growth,
    build_daily_series,
    compute_summary_totals,
)
from dairy_dashboard.services.chart import (
    AXIS_RESERVE,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_MIN_SCALE,
    project_to_chart_geometry,
)

T = TypeVar("T")

_logger = logging.getLogger(__name__)


@dataclass
class DashboardService:
    """Service producing dashboard states from the dairy backend."""

    client: DairyApiClient
    timezone_name: str = "UTC"
    window_days: int = DEFAULT_WINDOW_DAYS
    chart_height: float = DEFAULT_CHART_HEIGHT
    min_scale: float = DEFAULT_MIN_SCALE
    axis_reserve: float = AXIS_RESERVE

    async def load_snapshot(self) -> DashboardSnapshot:
        """Fetch all three collections concurrently.

        Raises FetchError if any fetch fails. The first failure cancels the
        requests still in flight, and no partial snapshot is returned.
        """
        try:
            async with asyncio.TaskGroup() as group:
                entries_task = group.create_task(
                    _fetch("milk entries", self.client.list_milk_entries)
                )
                payments_task = group.create_task(
                    _fetch("payments", self.client.list_payments)
                )
                users_task = group.create_task(
                    _fetch("users", self.client.list_users)
                )
        except ExceptionGroup as errors:
            raise errors.exceptions[0] from errors
        entries = entries_task.result()
        payments = payments_task.result()
        users = users_task.result()
        _logger.info(
            "Loaded dashboard data: entries=%s payments=%s users=%s",
            len(entries),
            len(payments),
            len(users),
        )
        return DashboardSnapshot(
            entries=tuple(entries), payments=tuple(payments), users=tuple(users)
        )

    def build_view(
        self,
        snapshot: DashboardSnapshot,
        reference_date: date,
        window_days: int | None = None,
    ) -> DashboardView:
        """Run the aggregation and chart pipeline over a snapshot."""
        series = annotate_growth(
            build_daily_series(
                snapshot.entries,
                reference_date,
                self.window_days if window_days is None else window_days,
            )
        )
        return DashboardView(
            reference_date=reference_date,
            totals=compute_summary_totals(
                snapshot.entries, snapshot.payments, snapshot.users
            ),
            series=series,
            chart=project_to_chart_geometry(
                series,
                chart_height=self.chart_height,
                min_scale=self.min_scale,
                axis_reserve=self.axis_reserve,
            ),
        )

    async def get_state(
        self, reference_date: date | None = None, window_days: int | None = None
    ) -> DashboardState:
        """Load data and return a ready view, or a failed state on fetch errors."""
        try:
            snapshot = await self.load_snapshot()
        except FetchError as exc:
            _logger.exception("Dashboard data unavailable")
            return Failed(error=str(exc))
        return Ready(
            view=self.build_view(
                snapshot, reference_date or self.today(), window_days=window_days
            )
        )

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()


async def _fetch(
    collection: str, call: Callable[[], Awaitable[list[T]]]
) -> list[T]:
    try:
        return await call()
    except Exception as exc:
        raise FetchError(collection, str(exc) or type(exc).__name__) from exc

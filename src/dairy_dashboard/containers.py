"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from dairy_dashboard.adapters.dairy_api_client import (
    DairyApiClient,
    HttpxDairyApiClient,
)
from dairy_dashboard.config import Settings, normalize_base_url
from dairy_dashboard.services.dashboard import DashboardService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    dairy_api_client: DairyApiClient
    dashboard_service: DashboardService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    dairy_api_client = HttpxDairyApiClient.create(
        base_url=normalize_base_url(resolved_settings.dairy_api_base_url),
        timeout_seconds=resolved_settings.request_timeout_seconds,
    )
    dashboard_service = DashboardService(
        client=dairy_api_client,
        timezone_name=resolved_settings.timezone,
        window_days=resolved_settings.window_days,
        chart_height=resolved_settings.chart_height,
        min_scale=resolved_settings.chart_min_scale,
        axis_reserve=resolved_settings.chart_axis_reserve,
    )

    async def close_resources() -> None:
        await dairy_api_client.close()

    return AppContainer(
        settings=resolved_settings,
        dairy_api_client=dairy_api_client,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )

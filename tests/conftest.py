"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from dairy_dashboard.adapters.dairy_api_client import DairyApiClient
from dairy_dashboard.config import Settings
from dairy_dashboard.containers import AppContainer
from dairy_dashboard.domain.records import MilkEntry, Payment, User
from dairy_dashboard.services.dashboard import DashboardService


@dataclass
class FakeDairyApiClient(DairyApiClient):
    """Fake dairy backend returning in-memory collections."""

    entries: list[MilkEntry] = field(default_factory=list)
    payments: list[Payment] = field(default_factory=list)
    users: list[User] = field(default_factory=list)
    failing: set[str] = field(default_factory=set)
    hanging: set[str] = field(default_factory=set)
    calls: list[str] = field(default_factory=list)
    cancelled: list[str] = field(default_factory=list)

    async def list_milk_entries(self) -> list[MilkEntry]:
        return await self._respond("entries", self.entries)

    async def list_payments(self) -> list[Payment]:
        return await self._respond("payments", self.payments)

    async def list_users(self) -> list[User]:
        return await self._respond("users", self.users)

    async def _respond(self, name: str, items: list) -> list:  # type: ignore[type-arg]
        self.calls.append(name)
        if name in self.hanging:
            try:
                await asyncio.Event().wait()
            except asyncio.CancelledError:
                self.cancelled.append(name)
                raise
        if name in self.failing:
            raise RuntimeError(f"{name} backend unavailable")
        return list(items)


@pytest.fixture
def settings() -> Settings:
    return Settings(dairy_api_base_url="https://dairy.test/")


@pytest.fixture
def api_client() -> FakeDairyApiClient:
    return FakeDairyApiClient(
        entries=[
            MilkEntry(date="2024-01-06", time="morning", liters=4, total=40),
            MilkEntry(date="2024-01-07", time="morning", liters=6, total=60),
            MilkEntry(date="2024-01-07", time="evening", liters=2, total=20),
        ],
        payments=[Payment(amount=50)],
        users=[User(role="customer"), User(role="customer"), User(role="admin")],
    )


@pytest.fixture
def container(settings: Settings, api_client: FakeDairyApiClient) -> AppContainer:
    dashboard_service = DashboardService(
        client=api_client,
        timezone_name=settings.timezone,
        window_days=settings.window_days,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        dairy_api_client=api_client,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )

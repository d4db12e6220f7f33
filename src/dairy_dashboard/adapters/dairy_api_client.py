"""Dairy backend REST API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from dairy_dashboard.adapters.record_parser import (
    parse_milk_entries,
    parse_payments,
    parse_users,
)
from dairy_dashboard.domain.records import MilkEntry, Payment, User


class DairyApiClient(Protocol):
    """Interface for the dairy backend collections."""

    async def list_milk_entries(self) -> list[MilkEntry]:
        """Return all recorded milk entries."""

    async def list_payments(self) -> list[Payment]:
        """Return all recorded payments."""

    async def list_users(self) -> list[User]:
        """Return all users."""


@dataclass
class HttpxDairyApiClient(DairyApiClient):
    """HTTPX-backed dairy backend client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(cls, base_url: str, timeout_seconds: float = 10.0) -> "HttpxDairyApiClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def list_milk_entries(self) -> list[MilkEntry]:
        """Fetch milk entries from ``/api/milk``."""
        rows = await self._get_collection("/api/milk", "entries")
        return parse_milk_entries(rows)

    async def list_payments(self) -> list[Payment]:
        """Fetch payments from ``/api/payments``."""
        rows = await self._get_collection("/api/payments", "payments")
        return parse_payments(rows)

    async def list_users(self) -> list[User]:
        """Fetch users from ``/api/users``."""
        rows = await self._get_collection("/api/users", "users")
        return parse_users(rows)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _get_collection(self, path: str, key: str) -> list[dict[str, object]]:
        response = await self.http_client.get(
            f"{self.base_url}{path}", timeout=self.timeout_seconds
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            return []
        rows = payload.get(key) or []
        if not isinstance(rows, list):
            return []
        return [row for row in rows if isinstance(row, dict)]

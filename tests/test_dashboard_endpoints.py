"""Tests for dashboard endpoints."""

from fastapi.testclient import TestClient

from dairy_dashboard.api.app import create_app
from dairy_dashboard.containers import AppContainer
from tests.conftest import FakeDairyApiClient


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_dashboard_endpoint_returns_view(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/dashboard", params={"reference_date": "2024-01-07"})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["reference_date"] == "2024-01-07"
    assert data["totals"] == {
        "total_customers": 2,
        "total_milk_liters": 12.0,
        "total_payment": 50.0,
        "total_bill": 120.0,
        "total_dues": 70.0,
    }
    assert len(data["series"]) == 7
    last = data["series"][-1]
    assert last["date"] == "2024-01-07"
    assert last["morning"] == {"liters": 6.0, "amount": 60.0}
    assert last["growth_direction"] == "up"
    assert len(data["chart"]["bars"]) == 14
    assert len(data["chart"]["lines"]) == 6


def test_dashboard_endpoint_window_days(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        "/admin/dashboard", params={"reference_date": "2024-01-07", "window_days": 3}
    )

    assert response.status_code == 200
    assert [day["date"] for day in response.json()["series"]] == [
        "2024-01-05",
        "2024-01-06",
        "2024-01-07",
    ]


def test_dashboard_endpoint_rejects_invalid_window(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/dashboard", params={"window_days": 0})

    assert response.status_code == 422


def test_dashboard_endpoint_unavailable(
    container: AppContainer, api_client: FakeDairyApiClient
) -> None:
    api_client.failing = {"users"}
    client = TestClient(create_app(container))

    response = client.get("/admin/dashboard")

    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "unavailable"
    assert "users" in data["error"]
    assert "totals" not in data


def test_dashboard_ui_renders_page(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/ui", params={"reference_date": "2024-01-07"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Total Customers" in response.text
    assert "<svg" in response.text


def test_dashboard_ui_unavailable(
    container: AppContainer, api_client: FakeDairyApiClient
) -> None:
    api_client.failing = {"entries"}
    client = TestClient(create_app(container))

    response = client.get("/admin/ui")

    assert response.status_code == 503
    assert "Data unavailable" in response.text
    assert "Total Customers" not in response.text

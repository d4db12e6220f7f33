"""Admin dashboard endpoints."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from dairy_dashboard.domain.state import Failed, Ready
from dairy_dashboard.services.rendering import render_dashboard_page

if TYPE_CHECKING:
    from dairy_dashboard.containers import AppContainer
    from dairy_dashboard.domain.dashboard import DashboardView

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/dashboard")
async def dashboard(
    request: Request,
    reference_date: date | None = None,
    window_days: int | None = Query(default=None, ge=1, le=366),
) -> JSONResponse:
    """Return summary totals, the daily series and chart geometry."""
    container: AppContainer = request.app.state.container
    state = await container.dashboard_service.get_state(
        reference_date=reference_date, window_days=window_days
    )
    if isinstance(state, Ready):
        return JSONResponse(content=_serialize_view(state.view))
    error = state.error if isinstance(state, Failed) else "Dashboard data is loading"
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unavailable", "error": error},
    )


@router.get("/ui", response_class=HTMLResponse)
async def dashboard_ui(
    request: Request, reference_date: date | None = None
) -> HTMLResponse:
    """Server-rendered dashboard page with summary cards and chart."""
    container: AppContainer = request.app.state.container
    state = await container.dashboard_service.get_state(reference_date=reference_date)
    status_code = (
        status.HTTP_200_OK
        if isinstance(state, Ready)
        else status.HTTP_503_SERVICE_UNAVAILABLE
    )
    return HTMLResponse(render_dashboard_page(state), status_code=status_code)


def _serialize_view(view: DashboardView) -> dict[str, object]:
    return {
        "status": "ready",
        "reference_date": view.reference_date.isoformat(),
        "totals": asdict(view.totals),
        "series": [asdict(day) for day in view.series],
        "chart": asdict(view.chart),
    }

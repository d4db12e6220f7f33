"""Load state of the dashboard as seen by the rendering layer."""

from dataclasses import dataclass

from dairy_dashboard.domain.dashboard import DashboardView


@dataclass(frozen=True)
class Pending:
    """Data has been requested but not yet received."""


@dataclass(frozen=True)
class Ready:
    """Data loaded and the pipeline produced a view."""

    view: DashboardView


@dataclass(frozen=True)
class Failed:
    """Data could not be loaded; no figures are available."""

    error: str


DashboardState = Pending | Ready | Failed

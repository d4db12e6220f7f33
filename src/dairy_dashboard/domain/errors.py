"""Dashboard error types."""


class DashboardError(Exception):
    """Base class for dashboard errors."""


class FetchError(DashboardError):
    """Raised when a collection could not be fetched from the backend."""

    def __init__(self, collection: str, message: str) -> None:
        super().__init__(f"Failed to fetch {collection}: {message}")
        self.collection = collection


class DataError(DashboardError, ValueError):
    """Raised when a record holds a malformed value."""

"""ASGI entrypoint for the dairy dashboard API."""

from dairy_dashboard.api.app import create_app
from dairy_dashboard.containers import build_container

app = create_app(build_container())

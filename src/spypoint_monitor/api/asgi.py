"""ASGI entrypoint for the SPYPOINT monitor API."""

from spypoint_monitor.api.app import create_app
from spypoint_monitor.containers import build_container

app = create_app(build_container())

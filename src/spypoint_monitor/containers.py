"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from spypoint_monitor.adapters.spypoint_client import (
    HttpxSpypointClient,
    SpypointClient,
)
from spypoint_monitor.config import Settings
from spypoint_monitor.domain.models import Camera
from spypoint_monitor.services.cache import SingleSlotCache
from spypoint_monitor.services.spypoint import SpypointService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    spypoint_client: SpypointClient
    camera_cache: SingleSlotCache[list[Camera]]
    service_factory: Callable[[], SpypointService]
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    spypoint_client = HttpxSpypointClient.create(
        base_url=resolved_settings.spypoint_base_url,
        timeout_seconds=resolved_settings.http_timeout_seconds,
    )
    camera_cache: SingleSlotCache[list[Camera]] = SingleSlotCache(
        ttl_seconds=resolved_settings.camera_cache_ttl_seconds
    )

    def service_factory() -> SpypointService:
        # Each request gets its own session; tokens are never shared.
        return SpypointService(client=spypoint_client)

    async def close_resources() -> None:
        await spypoint_client.close()

    return AppContainer(
        settings=resolved_settings,
        spypoint_client=spypoint_client,
        camera_cache=camera_cache,
        service_factory=service_factory,
        close_resources=close_resources,
    )

"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from spypoint_monitor.api.params import parse_photo_limit, parse_tags
from spypoint_monitor.app_logging import configure_logging
from spypoint_monitor.containers import AppContainer
from spypoint_monitor.domain.errors import SpypointError
from spypoint_monitor.domain.models import Camera, Photo
from spypoint_monitor.services.spypoint import SpypointService


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get(
        "/api/cameras",
        response_model=list[Camera],
        response_model_exclude_none=True,
    )
    async def cameras(request: Request) -> list[Camera] | JSONResponse:
        """Return the account's cameras, served from a short-lived cache."""
        state_container: AppContainer = request.app.state.container
        try:
            return await _cached_cameras(state_container)
        except SpypointError:
            logger.exception("Camera fetch error")
            return _error_response("Failed to fetch cameras")

    @app.get(
        "/api/photos",
        response_model=list[Photo],
        response_model_exclude_none=True,
    )
    async def photos(
        request: Request, limit: str | None = None, tags: str | None = None
    ) -> list[Photo] | JSONResponse:
        """Return recent photos enriched with camera names and positions."""
        state_container: AppContainer = request.app.state.container
        settings = state_container.settings
        try:
            service = await _authenticated_service(state_container)
            # Enrich with the cached snapshot so concurrent requests agree.
            known_cameras = await state_container.camera_cache.get_or_load(
                service.get_cameras
            )
            return await service.get_photos(
                known_cameras,
                limit=parse_photo_limit(limit, settings.default_photo_limit),
                tags=parse_tags(tags),
            )
        except SpypointError:
            logger.exception("Photo fetch error")
            return _error_response("Failed to fetch photos")

    return app


async def _authenticated_service(container: AppContainer) -> SpypointService:
    """Create a service and log in with the configured credentials."""
    service = container.service_factory()
    await service.authenticate(
        container.settings.spypoint_username,
        container.settings.spypoint_password,
    )
    return service


async def _cached_cameras(container: AppContainer) -> list[Camera]:
    async def load() -> list[Camera]:
        service = await _authenticated_service(container)
        return await service.get_cameras()

    return await container.camera_cache.get_or_load(load)


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": message},
    )

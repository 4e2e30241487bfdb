"""Camera and photo retrieval on top of a SPYPOINT session."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime

from spypoint_monitor.adapters.spypoint_client import SpypointClient
from spypoint_monitor.domain.errors import MalformedResponseError
from spypoint_monitor.domain.models import Camera, Photo
from spypoint_monitor.services.normalization import (
    build_camera_lookup,
    normalize_camera,
    normalize_photo,
    sort_photos_by_recency,
)
from spypoint_monitor.services.session import SpypointSession

# Upper date bound meaning "no limit" for photo searches.
PHOTO_END_DATE = "2100-01-01T00:00:00.000Z"
DEFAULT_PHOTO_LIMIT = 100

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SpypointService:
    """Fetches cameras and photos and normalizes them into domain models."""

    client: SpypointClient
    session: SpypointSession = field(init=False)
    clock: Callable[[], datetime] = _utc_now

    def __post_init__(self) -> None:
        self.session = SpypointSession(self.client)

    async def authenticate(self, username: str, password: str) -> None:
        """Log in once for this service instance."""
        await self.session.authenticate(username, password)

    async def get_cameras(self) -> list[Camera]:
        """Fetch and normalize every camera on the account."""
        headers = self.session.authorization_header()
        payload = await self.client.fetch_cameras(headers)
        if not isinstance(payload, list):
            raise MalformedResponseError("Camera list response is not an array")
        observed_at = self.clock()
        cameras = [normalize_camera(raw, observed_at) for raw in payload]
        _logger.info("Fetched %s cameras", len(cameras))
        return cameras

    async def get_photos(
        self,
        cameras: Sequence[Camera],
        limit: int = DEFAULT_PHOTO_LIMIT,
        tags: Sequence[str] = (),
    ) -> list[Photo]:
        """Fetch photos for ``cameras`` and enrich them from the same list.

        The enrichment only sees the cameras passed in; photos of other
        cameras keep empty camera fields.
        """
        headers = self.session.authorization_header()
        query: dict[str, object] = {
            "camera": [camera.id for camera in cameras],
            "dateEnd": PHOTO_END_DATE,
            "favorite": False,
            "hd": False,
            "limit": limit,
            "tag": list(tags),
        }
        payload = await self.client.fetch_photos(headers, query)
        if not isinstance(payload, dict):
            raise MalformedResponseError("Photo response is not an object")
        raw_photos = payload.get("photos")
        if raw_photos is None:
            raw_photos = []
        if not isinstance(raw_photos, list):
            raise MalformedResponseError("Photo response 'photos' is not an array")

        camera_lookup = build_camera_lookup(cameras)
        photos = sort_photos_by_recency(
            normalize_photo(raw, camera_lookup) for raw in raw_photos
        )
        _logger.info(
            "Fetched %s photos for %s cameras (limit=%s, tags=%s)",
            len(photos),
            len(cameras),
            limit,
            ",".join(tags) or "-",
        )
        return photos

"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from spypoint_monitor.adapters.spypoint_client import SpypointClient
from spypoint_monitor.config import Settings
from spypoint_monitor.containers import AppContainer
from spypoint_monitor.domain.errors import FetchFailedError, InvalidCredentialsError
from spypoint_monitor.domain.models import Camera
from spypoint_monitor.services.cache import SingleSlotCache
from spypoint_monitor.services.spypoint import SpypointService

RAW_CAMERAS: list[dict[str, object]] = [
    {
        "id": "cam-1",
        "config": {"name": "North Ridge"},
        "status": {
            "model": "FLEX-M",
            "lastUpdate": "2024-05-01T11:00:00.000Z",
            "coordinates": [
                {"position": {"type": "Point", "coordinates": [-73.5, 45.2]}}
            ],
        },
    },
    {
        "id": "cam-2",
        "config": {"name": "Creek"},
        "status": {"model": "LINK-MICRO", "lastUpdate": "2024-04-20T08:00:00.000Z"},
    },
]

RAW_PHOTOS: list[dict[str, object]] = [
    {
        "id": "p-old",
        "camera": "cam-2",
        "date": "2024-04-19T22:10:00.000Z",
        "small": {"host": "cdn.example.com", "path": "s/p-old.jpg"},
        "medium": {"host": "cdn.example.com", "path": "m/p-old.jpg"},
        "large": {"host": "cdn.example.com", "path": "l/p-old.jpg"},
    },
    {
        "id": "p-new",
        "camera": "cam-1",
        "date": "2024-05-01T10:55:00.000Z",
        "originName": "PICT0042.JPG",
        "tag": ["deer", "buck"],
        "small": {"host": "cdn.example.com", "path": "s/p-new.jpg"},
        "medium": {"host": "cdn.example.com", "path": "m/p-new.jpg"},
        "large": {},
    },
    {
        "id": "p-stray",
        "camera": "cam-9",
        "date": "2024-04-25T06:00:00.000Z",
    },
]


@dataclass
class FakeSpypointClient(SpypointClient):
    """In-memory SPYPOINT client that records calls."""

    username: str = "hunter"
    password: str = "secret"
    token: str = "token-123"
    cameras_payload: object = field(default_factory=lambda: list(RAW_CAMERAS))
    photos_payload: object = field(
        default_factory=lambda: {"photos": list(RAW_PHOTOS)}
    )
    camera_status: int = 200
    photo_status: int = 200
    logins: int = 0
    camera_calls: list[dict[str, str]] = field(default_factory=list)
    photo_queries: list[dict[str, object]] = field(default_factory=list)

    async def login(self, username: str, password: str) -> str:
        self.logins += 1
        if (username, password) != (self.username, self.password):
            raise InvalidCredentialsError
        return self.token

    async def fetch_cameras(self, headers: dict[str, str]) -> object:
        self.camera_calls.append(headers)
        if self.camera_status != 200:
            raise FetchFailedError("cameras", self.camera_status)
        return self.cameras_payload

    async def fetch_photos(
        self, headers: dict[str, str], query: dict[str, object]
    ) -> object:
        self.photo_queries.append(query)
        if self.photo_status != 200:
            raise FetchFailedError("photos", self.photo_status)
        return self.photos_payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        spypoint_username="hunter",
        spypoint_password="secret",
        spypoint_base_url="https://spypoint.test/api/v3",
    )


@pytest.fixture
def spypoint_client() -> FakeSpypointClient:
    return FakeSpypointClient()


@pytest.fixture
def container(
    settings: Settings, spypoint_client: FakeSpypointClient
) -> AppContainer:
    camera_cache: SingleSlotCache[list[Camera]] = SingleSlotCache(
        ttl_seconds=settings.camera_cache_ttl_seconds
    )

    def service_factory() -> SpypointService:
        return SpypointService(client=spypoint_client)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        spypoint_client=spypoint_client,
        camera_cache=camera_cache,
        service_factory=service_factory,
        close_resources=close_resources,
    )

"""Domain models for SPYPOINT cameras and photos."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """Geographic position of a camera."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Camera:
    """Normalized camera record.

    ``is_online`` is a snapshot taken when the record was normalized, not a
    live property.
    """

    id: str
    name: str
    model: str
    last_update: str
    is_online: bool
    coordinates: Coordinates | None = None


@dataclass(frozen=True)
class Photo:
    """Normalized photo enriched with display fields of its camera."""

    id: str
    camera_id: str
    timestamp: str
    tags: tuple[str, ...]
    filename: str
    url_small: str
    url_medium: str
    url_large: str
    camera_name: str | None = None
    camera_coordinates: Coordinates | None = None

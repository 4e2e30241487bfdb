"""Normalization of raw SPYPOINT payloads into domain models."""

import math
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime, timedelta

from spypoint_monitor.domain.models import Camera, Coordinates, Photo

ONLINE_WINDOW = timedelta(hours=24)
UNKNOWN_CAMERA_NAME = "Unknown Camera"
UNKNOWN_CAMERA_MODEL = "Unknown Model"


def normalize_camera(
    raw: Mapping[str, object], observed_at: datetime | None = None
) -> Camera:
    """Build a camera from a raw record, falling back to defaults."""
    now = _as_utc(observed_at or datetime.now(tz=UTC))
    data = _mapping(raw)
    config = _mapping(data.get("config"))
    status = _mapping(data.get("status"))

    last_update = status.get("lastUpdate") or _format_timestamp(now)
    return Camera(
        id=_string(data.get("id")),
        name=_string(config.get("name")) or UNKNOWN_CAMERA_NAME,
        model=_string(status.get("model")) or UNKNOWN_CAMERA_MODEL,
        last_update=str(last_update),
        is_online=is_recent(last_update, now),
        coordinates=parse_coordinates(status.get("coordinates")),
    )


def is_recent(last_update: object, observed_at: datetime) -> bool:
    """Return True if ``last_update`` is under 24 hours before ``observed_at``."""
    updated_at = parse_timestamp(last_update)
    if updated_at is None:
        return False
    return _as_utc(observed_at) - updated_at < ONLINE_WINDOW


def parse_coordinates(raw: object) -> Coordinates | None:
    """Parse the first GeoJSON Point of a vendor coordinates list.

    The vendor encodes positions as ``[longitude, latitude]``.
    """
    if not isinstance(raw, list) or not raw:
        return None
    first = raw[0]
    if not isinstance(first, Mapping):
        return None
    position = _mapping(first.get("position"))
    if position.get("type") != "Point":
        return None
    pair = position.get("coordinates")
    if not isinstance(pair, list) or len(pair) != 2:  # noqa: PLR2004
        return None
    longitude = _parse_float(pair[0])
    latitude = _parse_float(pair[1])
    if longitude is None or latitude is None:
        return None
    return Coordinates(latitude=latitude, longitude=longitude)


def build_camera_lookup(cameras: Iterable[Camera]) -> dict[str, Camera]:
    """Index cameras by id. Later duplicates win."""
    return {camera.id: camera for camera in cameras}


def normalize_photo(
    raw: Mapping[str, object], camera_lookup: Mapping[str, Camera]
) -> Photo:
    """Build a photo and copy display fields from its camera, if known."""
    data = _mapping(raw)
    photo_id = _string(data.get("id"))
    camera_id = _string(data.get("camera"))
    camera = camera_lookup.get(camera_id)
    return Photo(
        id=photo_id,
        camera_id=camera_id,
        timestamp=_string(data.get("date")),
        tags=_parse_tags(data.get("tag")),
        filename=_string(data.get("originName")) or f"photo_{photo_id}.jpg",
        url_small=build_url(data.get("small")),
        url_medium=build_url(data.get("medium")),
        url_large=build_url(data.get("large")),
        camera_name=camera.name if camera else None,
        camera_coordinates=camera.coordinates if camera else None,
    )


def build_url(size_variant: object) -> str:
    """Return the https URL of a size variant, or an empty string."""
    data = _mapping(size_variant)
    host = _string(data.get("host"))
    path = _string(data.get("path"))
    if not host or not path:
        return ""
    return f"https://{host}/{path}"


def sort_photos_by_recency(photos: Iterable[Photo]) -> list[Photo]:
    """Sort photos newest first; unparsable timestamps go last."""
    return sorted(photos, key=_recency_key, reverse=True)


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 string or epoch milliseconds.

    Naive ISO values are read as UTC.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    return _as_utc(parsed)


def _recency_key(photo: Photo) -> datetime:
    parsed = parse_timestamp(photo.timestamp)
    if parsed is None:
        return datetime.min.replace(tzinfo=UTC)
    return parsed


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def _mapping(value: object) -> Mapping[str, object]:
    """Return ``value`` if it is a mapping, otherwise an empty one."""
    if isinstance(value, Mapping):
        return value
    return {}


def _string(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def _parse_float(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if not isinstance(value, int | float | str):
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def _parse_tags(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(dict.fromkeys(str(tag) for tag in value if tag is not None))

"""Parsing of query-string parameters for the HTTP API."""


def parse_photo_limit(raw: str | None, default: int) -> int:
    """Parse a positive photo limit, falling back to ``default``."""
    if raw is None:
        return default
    cleaned = raw.strip()
    if not cleaned.isdigit():
        return default
    value = int(cleaned)
    return value if value > 0 else default


def parse_tags(raw: str | None) -> list[str]:
    """Split a comma-separated tag list, dropping blanks."""
    if raw is None:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]

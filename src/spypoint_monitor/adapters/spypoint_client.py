"""SPYPOINT REST API client."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from spypoint_monitor.domain.errors import (
    AuthenticationFailedError,
    FetchFailedError,
    InvalidCredentialsError,
    MalformedResponseError,
    SpypointTransportError,
)

DEFAULT_BASE_URL = "https://restapi.spypoint.com/api/v3"

_logger = logging.getLogger(__name__)


class SpypointClient(Protocol):
    """Interface for SPYPOINT API interactions."""

    async def login(self, username: str, password: str) -> str:
        """Exchange credentials for a bearer token."""

    async def fetch_cameras(self, headers: dict[str, str]) -> object:
        """Return the raw camera list payload."""

    async def fetch_photos(
        self, headers: dict[str, str], query: dict[str, object]
    ) -> object:
        """Return the raw photo search payload."""


@dataclass
class HttpxSpypointClient(SpypointClient):
    """HTTPX-backed SPYPOINT client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, base_url: str = DEFAULT_BASE_URL, timeout_seconds: float = 15
    ) -> "HttpxSpypointClient":
        """Create a SPYPOINT client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def login(self, username: str, password: str) -> str:
        """Log in and return the bearer token."""
        response = await self._send(
            "POST",
            "/user/login",
            json={"username": username, "password": password},
        )
        if response.status_code == httpx.codes.UNAUTHORIZED:
            raise InvalidCredentialsError
        if not response.is_success:
            _logger.warning("SPYPOINT login failed: status=%s", response.status_code)
            raise AuthenticationFailedError(response.status_code)
        payload = _json_body(response)
        token = payload.get("token") if isinstance(payload, dict) else None
        if not isinstance(token, str) or not token:
            raise MalformedResponseError("Login response did not include a token")
        return token

    async def fetch_cameras(self, headers: dict[str, str]) -> object:
        """Fetch every camera on the account."""
        response = await self._send("GET", "/camera/all", headers=headers)
        if not response.is_success:
            _logger.warning(
                "SPYPOINT camera fetch failed: status=%s", response.status_code
            )
            raise FetchFailedError("cameras", response.status_code)
        return _json_body(response)

    async def fetch_photos(
        self, headers: dict[str, str], query: dict[str, object]
    ) -> object:
        """Search photos with the given filter body."""
        response = await self._send("POST", "/photo/all", headers=headers, json=query)
        if not response.is_success:
            _logger.warning(
                "SPYPOINT photo fetch failed: status=%s", response.status_code
            )
            raise FetchFailedError("photos", response.status_code)
        return _json_body(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _send(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        json: dict[str, object] | None = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            return await self.http_client.request(
                method,
                url,
                headers=headers,
                json=json,
                timeout=self.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            raise SpypointTransportError(f"{method} {path} failed: {exc}") from exc


def _json_body(response: httpx.Response) -> object:
    """Decode a JSON body, mapping decode failures to MalformedResponseError."""
    try:
        return response.json()
    except ValueError as exc:
        raise MalformedResponseError(
            f"Invalid JSON from {response.request.url.path}"
        ) from exc

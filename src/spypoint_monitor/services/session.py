"""Bearer-token session for the SPYPOINT API."""

from dataclasses import dataclass

from spypoint_monitor.adapters.spypoint_client import SpypointClient
from spypoint_monitor.domain.errors import (
    MissingCredentialsError,
    NotAuthenticatedError,
)


@dataclass
class SpypointSession:
    """Holds at most one bearer token obtained by a single login.

    The token is never refreshed; a rejected or expired token requires a new
    session.
    """

    client: SpypointClient
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        """Return True once a login has succeeded."""
        return self.token is not None

    async def authenticate(self, username: str, password: str) -> str:
        """Exchange credentials for a token and keep it on the session."""
        if not username or not password:
            raise MissingCredentialsError
        self.token = await self.client.login(username, password)
        return self.token

    def authorization_header(self) -> dict[str, str]:
        """Return request headers carrying the bearer token."""
        if self.token is None:
            raise NotAuthenticatedError
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }

"""Errors raised while talking to the SPYPOINT API."""


class SpypointError(Exception):
    """Base class for SPYPOINT client failures."""


class AuthenticationError(SpypointError):
    """Login did not produce a token."""


class MissingCredentialsError(AuthenticationError):
    """No username or password was configured."""

    def __init__(self) -> None:
        super().__init__("SPYPOINT username and password are required")


class InvalidCredentialsError(AuthenticationError):
    """The vendor rejected the username or password."""

    def __init__(self) -> None:
        super().__init__("Invalid SPYPOINT credentials")


class AuthenticationFailedError(AuthenticationError):
    """Login returned an unexpected non-success status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Authentication failed: {status_code}")
        self.status_code = status_code


class NotAuthenticatedError(SpypointError):
    """An authorized call was attempted before a successful login."""

    def __init__(self) -> None:
        super().__init__("Not authenticated")


class FetchFailedError(SpypointError):
    """A camera or photo request returned a non-success status."""

    def __init__(self, resource: str, status_code: int) -> None:
        super().__init__(f"Failed to fetch {resource}: {status_code}")
        self.resource = resource
        self.status_code = status_code


class SpypointTransportError(SpypointError):
    """The request could not be completed or its body could not be read."""


class MalformedResponseError(SpypointTransportError):
    """The response body does not have the expected JSON shape."""

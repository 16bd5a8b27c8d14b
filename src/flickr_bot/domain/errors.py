"""Errors raised while serving a turn."""


class FlickrBotError(Exception):
    """Base class for application errors."""


class UpstreamError(FlickrBotError):
    """Flickr answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"Bad response from Flickr (HTTP {status_code})")
        self.status_code = status_code


class MalformedResponseError(FlickrBotError):
    """Flickr answered without the expected photo list."""


class InsufficientCandidatesError(FlickrBotError):
    """More photos were requested than the candidate batch holds."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"Requested {requested} photos but only {available} were returned"
        )
        self.requested = requested
        self.available = available


class StatePersistenceError(FlickrBotError):
    """Saving user or conversation state failed."""

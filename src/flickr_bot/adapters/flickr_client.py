"""Flickr REST API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from flickr_bot.domain.errors import MalformedResponseError, UpstreamError


class FlickrClient(Protocol):
    """Interface for Flickr REST API interactions."""

    async def call(self, params: dict[str, object]) -> dict[str, object]:
        """Call a REST method and return the decoded JSON body."""


@dataclass
class HttpxFlickrClient(FlickrClient):
    """HTTPX-backed Flickr client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxFlickrClient":
        """Create a Flickr client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def call(self, params: dict[str, object]) -> dict[str, object]:
        """Issue a GET against the REST endpoint with JSON output."""
        response = await self.http_client.get(
            self.base_url,
            params={
                **params,
                "api_key": self.api_key,
                "format": "json",
                "nojsoncallback": 1,
            },
            timeout=15,
        )
        if not response.is_success:
            raise UpstreamError(response.status_code)
        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError("Flickr response is not JSON") from exc
        if not isinstance(payload, dict):
            raise MalformedResponseError("Flickr response is not a JSON object")
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

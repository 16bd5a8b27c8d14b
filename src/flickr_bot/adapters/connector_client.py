"""Bot Framework connector client adapter."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol
from urllib.parse import quote

import httpx

_TOKEN_URL = "https://login.microsoftonline.com/botframework.com/oauth2/v2.0/token"
_TOKEN_SCOPE = "https://api.botframework.com/.default"


class ConnectorClient(Protocol):
    """Interface for sending activities back to a channel."""

    async def send_activity(
        self, service_url: str, conversation_id: str, activity: dict[str, object]
    ) -> None:
        """Post an activity into a conversation."""


@dataclass
class HttpxConnectorClient:
    """Connector client implemented with httpx."""

    http_client: httpx.AsyncClient
    app_id: str | None = None
    app_password: str | None = None
    _token: str | None = field(default=None, init=False, repr=False)
    _token_expires_at: datetime | None = field(default=None, init=False, repr=False)

    @classmethod
    def create(
        cls, app_id: str | None = None, app_password: str | None = None
    ) -> "HttpxConnectorClient":
        """Create a connector client with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(),
            app_id=app_id,
            app_password=app_password,
        )

    async def send_activity(
        self, service_url: str, conversation_id: str, activity: dict[str, object]
    ) -> None:
        """Send an activity using the v3 conversations API."""
        url = (
            f"{service_url.rstrip('/')}/v3/conversations/"
            f"{quote(conversation_id, safe='')}/activities"
        )
        reply_to_id = activity.get("replyToId")
        if reply_to_id:
            url = f"{url}/{quote(str(reply_to_id), safe='')}"
        headers: dict[str, str] = {}
        token = await self._get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        response = await self.http_client.post(
            url, json=activity, headers=headers, timeout=10
        )
        response.raise_for_status()

    async def _get_token(self) -> str | None:
        """Return a bearer token when app credentials are configured."""
        if not self.app_id or not self.app_password:
            return None
        now = datetime.now(tz=UTC)
        if self._token and self._token_expires_at and now < self._token_expires_at:
            return self._token
        response = await self.http_client.post(
            _TOKEN_URL,
            data={
                "grant_type": "client_credentials",
                "client_id": self.app_id,
                "client_secret": self.app_password,
                "scope": _TOKEN_SCOPE,
            },
            timeout=10,
        )
        response.raise_for_status()
        payload = response.json()
        self._token = str(payload["access_token"])
        expires_in = int(payload.get("expires_in", 3600))
        # Refresh a minute early.
        self._token_expires_at = now + timedelta(seconds=max(expires_in - 60, 0))
        return self._token

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

"""Shared test fixtures."""

import random
from dataclasses import dataclass, field

import pytest

from flickr_bot.adapters.connector_client import ConnectorClient
from flickr_bot.adapters.flickr_client import FlickrClient
from flickr_bot.config import Settings
from flickr_bot.containers import AppContainer
from flickr_bot.services.adapter import BotAdapter
from flickr_bot.services.conversation import ConversationHandler
from flickr_bot.services.photos import PhotoService
from flickr_bot.services.state import (
    InMemoryConversationStateStore,
    InMemoryUserStateStore,
)

BOT_ID = "bot-1"
USER_ID = "user-1"
CONVERSATION_ID = "conv-1"
SERVICE_URL = "https://smba.example.com/teams"


def make_flickr_photo(index: int) -> dict[str, object]:
    """Build a raw Flickr photo element."""
    return {
        "id": f"photo-{index}",
        "owner": f"owner-{index}@N00",
        "title": f"Photo {index}",
        "description": {"_content": f"Description {index}"},
        "datetaken": "2018-10-01 12:00:00",
        "ownername": f"Owner {index}",
        "url_t": f"https://live.staticflickr.com/t/{index}_t.jpg",
        "url_c": f"https://live.staticflickr.com/c/{index}_c.jpg",
    }


def make_flickr_payload(size: int = 100) -> dict[str, object]:
    """Build a Flickr photo list response body."""
    return {
        "photos": {
            "page": 1,
            "pages": 5,
            "perpage": size,
            "total": 500,
            "photo": [make_flickr_photo(index) for index in range(size)],
        },
        "stat": "ok",
    }


@dataclass
class FakeFlickrClient(FlickrClient):
    """Fake Flickr client returning a fixed payload."""

    payload: dict[str, object] = field(default_factory=make_flickr_payload)
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def call(self, params: dict[str, object]) -> dict[str, object]:
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeConnectorClient(ConnectorClient):
    """Fake connector client that records sent activities."""

    sent: list[tuple[str, str, dict[str, object]]] = field(default_factory=list)

    async def send_activity(
        self, service_url: str, conversation_id: str, activity: dict[str, object]
    ) -> None:
        self.sent.append((service_url, conversation_id, activity))

    @property
    def activities(self) -> list[dict[str, object]]:
        return [activity for _, _, activity in self.sent]


def message_activity(
    text: str, conversation_id: str = CONVERSATION_ID, activity_id: str = "act-1"
) -> dict[str, object]:
    """Build an inbound message activity payload."""
    return {
        "type": "message",
        "id": activity_id,
        "text": text,
        "channelId": "emulator",
        "serviceUrl": SERVICE_URL,
        "from": {"id": USER_ID, "name": "User"},
        "recipient": {"id": BOT_ID, "name": "Flickr Bot"},
        "conversation": {"id": conversation_id},
    }


def conversation_update_activity(member_ids: list[str]) -> dict[str, object]:
    """Build an inbound conversationUpdate activity payload."""
    return {
        "type": "conversationUpdate",
        "id": "update-1",
        "channelId": "emulator",
        "serviceUrl": SERVICE_URL,
        "from": {"id": USER_ID},
        "recipient": {"id": BOT_ID, "name": "Flickr Bot"},
        "conversation": {"id": CONVERSATION_ID},
        "membersAdded": [{"id": member_id} for member_id in member_ids],
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(flickr_api_key="flickr-key")


@pytest.fixture
def flickr_client() -> FakeFlickrClient:
    return FakeFlickrClient()


@pytest.fixture
def connector_client() -> FakeConnectorClient:
    return FakeConnectorClient()


@pytest.fixture
def container(
    settings: Settings,
    flickr_client: FakeFlickrClient,
    connector_client: FakeConnectorClient,
) -> AppContainer:
    photo_service = PhotoService(
        client=flickr_client,
        page_size=settings.flickr_page_size,
        rng=random.Random(7),
    )
    conversation_state = InMemoryConversationStateStore()
    user_state = InMemoryUserStateStore()
    conversation_handler = ConversationHandler(
        photo_service=photo_service,
        conversation_state=conversation_state,
        user_state=user_state,
    )
    bot_adapter = BotAdapter(
        connector_client=connector_client,
        conversation_state=conversation_state,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        flickr_client=flickr_client,
        connector_client=connector_client,
        photo_service=photo_service,
        conversation_state=conversation_state,
        user_state=user_state,
        conversation_handler=conversation_handler,
        bot_adapter=bot_adapter,
        close_resources=close_resources,
    )

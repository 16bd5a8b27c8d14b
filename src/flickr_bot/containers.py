"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from flickr_bot.adapters.connector_client import ConnectorClient, HttpxConnectorClient
from flickr_bot.adapters.flickr_client import FlickrClient, HttpxFlickrClient
from flickr_bot.config import Settings
from flickr_bot.services.adapter import BotAdapter
from flickr_bot.services.conversation import ConversationHandler
from flickr_bot.services.photos import PhotoService
from flickr_bot.services.state import (
    ConversationStateStore,
    InMemoryConversationStateStore,
    InMemoryUserStateStore,
    UserStateStore,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    flickr_client: FlickrClient
    connector_client: ConnectorClient
    photo_service: PhotoService
    conversation_state: ConversationStateStore
    user_state: UserStateStore
    conversation_handler: ConversationHandler
    bot_adapter: BotAdapter
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    flickr_client = HttpxFlickrClient.create(
        api_key=resolved_settings.flickr_api_key,
        base_url=resolved_settings.flickr_api_url,
    )
    connector_client = HttpxConnectorClient.create(
        app_id=resolved_settings.microsoft_app_id,
        app_password=resolved_settings.microsoft_app_password,
    )
    photo_service = PhotoService(
        client=flickr_client,
        page_size=resolved_settings.flickr_page_size,
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
        await flickr_client.close()
        await connector_client.close()

    return AppContainer(
        settings=resolved_settings,
        flickr_client=flickr_client,
        connector_client=connector_client,
        photo_service=photo_service,
        conversation_state=conversation_state,
        user_state=user_state,
        conversation_handler=conversation_handler,
        bot_adapter=bot_adapter,
        close_resources=close_resources,
    )

"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from flickr_bot.api.photos import router as photos_router
from flickr_bot.app_logging import configure_logging
from flickr_bot.containers import AppContainer
from flickr_bot.domain.activities import Activity


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Flickr bot listening",
            extra={"port": app.state.container.settings.port},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(photos_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/messages")
    async def messages(activity: Activity, request: Request) -> dict[str, str]:
        """Handle inbound Bot Framework activities."""
        state_container: AppContainer = request.app.state.container
        await state_container.bot_adapter.process_activity(
            activity, state_container.conversation_handler.on_turn
        )
        return {"status": "ok"}

    return app

"""Run the Flickr bot with uvicorn."""

import uvicorn

from flickr_bot.api.app import create_app
from flickr_bot.containers import build_container


def main() -> None:
    """Start the HTTP server on the configured host and port."""
    container = build_container()
    uvicorn.run(
        create_app(container),
        host=container.settings.host,
        port=container.settings.port,
    )


if __name__ == "__main__":
    main()

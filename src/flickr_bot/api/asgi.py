"""ASGI entrypoint for the Flickr bot API."""

from flickr_bot.api.app import create_app
from flickr_bot.containers import build_container

app = create_app(build_container())

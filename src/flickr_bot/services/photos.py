"""Photo fetching service backed by the Flickr API."""

import logging
import random
from dataclasses import dataclass, field

from pydantic import ValidationError

from flickr_bot.adapters.flickr_client import FlickrClient
from flickr_bot.domain.errors import InsufficientCandidatesError, MalformedResponseError
from flickr_bot.domain.photos import (
    FlickrPhoto,
    PhotoQuery,
    PhotoQueryMode,
    PhotoRecord,
)

logger = logging.getLogger(__name__)

EXTRAS = "description,date_upload,date_taken,owner_name,url_t,url_c"


@dataclass
class PhotoService:
    """Fetch a candidate batch from Flickr and sample photos from it."""

    client: FlickrClient
    page_size: int
    rng: random.Random = field(default_factory=random.Random)

    async def fetch_interesting(self, count: int) -> list[PhotoRecord]:
        """Return ``count`` random photos from the interestingness list."""
        return await self.fetch(
            PhotoQuery(mode=PhotoQueryMode.INTERESTING, count=count)
        )

    async def fetch_for_user(self, count: int, user_id: str) -> list[PhotoRecord]:
        """Return ``count`` random public photos of a user."""
        return await self.fetch(
            PhotoQuery(mode=PhotoQueryMode.BY_USER, count=count, user_id=user_id)
        )

    async def fetch(self, query: PhotoQuery) -> list[PhotoRecord]:
        """Run a query and sample ``query.count`` distinct photos."""
        params: dict[str, object] = {
            **query.params(),
            "extras": EXTRAS,
            "per_page": self.page_size,
        }
        try:
            payload = await self.client.call(params)
            candidates = _extract_photos(payload)
            picked = _pick_photos(candidates, query.count, self.rng)
        except Exception:
            logger.exception(
                "Failed to fetch photos from Flickr",
                extra={"method": query.mode.value, "count": query.count},
            )
            raise
        return [PhotoRecord.from_flickr(photo) for photo in picked]


def _extract_photos(payload: dict[str, object]) -> list[FlickrPhoto]:
    """Read and validate the ``photos.photo`` list from a response body."""
    photos = payload.get("photos")
    raw = photos.get("photo") if isinstance(photos, dict) else None
    if not isinstance(raw, list):
        detail = payload.get("message")
        if detail:
            raise MalformedResponseError(
                f"missing photos in flickr response: {detail}"
            )
        raise MalformedResponseError("missing photos in flickr response")
    try:
        return [FlickrPhoto.model_validate(item) for item in raw]
    except ValidationError as exc:
        raise MalformedResponseError("invalid photo in flickr response") from exc


def _pick_photos(
    candidates: list[FlickrPhoto], count: int, rng: random.Random
) -> list[FlickrPhoto]:
    """Pick ``count`` unique photos in random order."""
    if count > len(candidates):
        raise InsufficientCandidatesError(requested=count, available=len(candidates))
    return rng.sample(candidates, count)

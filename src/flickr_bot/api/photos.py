"""Direct photo lookup endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from flickr_bot.domain.errors import (
    InsufficientCandidatesError,
    MalformedResponseError,
    UpstreamError,
)
from flickr_bot.services.dialogs import MAX_PHOTOS, MIN_PHOTOS

if TYPE_CHECKING:
    from flickr_bot.containers import AppContainer

router = APIRouter(prefix="/photos", tags=["photos"])


@router.get("")
async def list_photos(
    request: Request,
    count: int = Query(ge=MIN_PHOTOS, le=MAX_PHOTOS),
    user_id: str | None = None,
) -> dict[str, object]:
    """Return random interesting photos, or a user's public photos."""
    container: AppContainer = request.app.state.container
    service = container.photo_service
    try:
        if user_id:
            photos = await service.fetch_for_user(count, user_id)
        else:
            photos = await service.fetch_interesting(count)
    except (UpstreamError, MalformedResponseError) as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
        ) from exc
    except InsufficientCandidatesError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from exc
    return {"photos": [asdict(photo) for photo in photos]}

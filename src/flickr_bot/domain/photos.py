"""Photo domain models."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PhotoQueryMode(Enum):
    """Supported Flickr listing methods."""

    INTERESTING = "flickr.interestingness.getList"
    BY_USER = "flickr.people.getPublicPhotos"


@dataclass(frozen=True)
class PhotoQuery:
    """Describes a single photo fetch.

    ``count`` is expected to be range-checked by the caller.
    """

    mode: PhotoQueryMode
    count: int
    user_id: str | None = None

    def __post_init__(self) -> None:
        if self.mode is PhotoQueryMode.BY_USER and not self.user_id:
            raise ValueError("user_id is required for user-scoped queries")
        if self.mode is PhotoQueryMode.INTERESTING and self.user_id:
            raise ValueError("user_id is only valid for user-scoped queries")

    def params(self) -> dict[str, str]:
        """Return the method-specific request parameters."""
        params = {"method": self.mode.value}
        if self.user_id:
            params["user_id"] = self.user_id
        return params


class FlickrDescription(BaseModel):
    """Nested description object returned by Flickr."""

    content: str = Field(default="", alias="_content")


class FlickrPhoto(BaseModel):
    """Raw photo element from a Flickr photo list."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    title: str = ""
    description: FlickrDescription | None = None
    datetaken: str = ""
    ownername: str = ""
    owner: str = ""
    url_t: str = ""
    url_c: str = ""


@dataclass(frozen=True)
class PhotoRecord:
    """Compact photo projection handed to the conversation layer."""

    photo_id: str
    title: str
    description: str
    date_taken: str
    owner_name: str
    owner_id: str
    thumbnail_url: str
    large_url: str

    @classmethod
    def from_flickr(cls, photo: FlickrPhoto) -> "PhotoRecord":
        """Project a raw Flickr photo into a record."""
        return cls(
            photo_id=photo.id,
            title=photo.title,
            description=photo.description.content if photo.description else "",
            date_taken=photo.datetaken,
            owner_name=photo.ownername,
            owner_id=photo.owner,
            thumbnail_url=photo.url_t,
            large_url=photo.url_c,
        )

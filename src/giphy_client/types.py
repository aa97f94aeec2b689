"""Payload models for Giphy responses.

Only the fields the client itself relies on are declared; everything else the
API sends is kept as extra attributes.
"""

from pydantic import BaseModel, ConfigDict


class Meta(BaseModel):
    """Response metadata present on every Giphy response."""

    model_config = ConfigDict(extra="allow")

    status: int
    msg: str
    response_id: str | None = None


class Pagination(BaseModel):
    model_config = ConfigDict(extra="allow")

    total_count: int | None = None
    count: int
    offset: int


class Gif(BaseModel):
    """A gif or sticker object."""

    model_config = ConfigDict(extra="allow")

    id: str
    type: str = "gif"
    slug: str | None = None
    url: str | None = None
    embed_url: str | None = None
    title: str | None = None
    rating: str | None = None
    username: str | None = None


class GifsResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: list[Gif]
    pagination: Pagination | None = None
    meta: Meta


class GifResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: Gif
    meta: Meta

"""Shared plumbing for resource facades."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from giphy_client.types import GifResponse, GifsResponse

if TYPE_CHECKING:
    from giphy_client.client import GiphyClient


def with_query(path: str, **params: Any) -> str:
    """Append non-None ``params`` to ``path`` as a query string."""
    query = httpx.QueryParams({key: value for key, value in params.items() if value is not None})
    return f"{path}?{query}" if query else path


def encode_path(segment: str) -> str:
    """Percent-encode a single path segment."""
    return quote(segment, safe="")


class MediaResource:
    """Endpoints shared by gifs and stickers.

    Subclasses set ``collection`` to the path segment of their resource family.
    """

    collection: str = ""

    def __init__(self, client: "GiphyClient") -> None:
        self.client = client

    async def search(
        self,
        q: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        rating: str | None = None,
        lang: str | None = None,
    ) -> GifsResponse:
        path = with_query(
            f"/{self.collection}/search",
            q=q,
            limit=limit,
            offset=offset,
            rating=rating,
            lang=lang,
        )
        return await self.client.get(path, GifsResponse)

    async def trending(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        rating: str | None = None,
    ) -> GifsResponse:
        path = with_query(f"/{self.collection}/trending", limit=limit, offset=offset, rating=rating)
        return await self.client.get(path, GifsResponse)

    async def translate(self, s: str) -> GifResponse:
        return await self.client.get(with_query(f"/{self.collection}/translate", s=s), GifResponse)

    async def random(self, *, tag: str | None = None, rating: str | None = None) -> GifResponse:
        path = with_query(f"/{self.collection}/random", tag=tag, rating=rating)
        return await self.client.get(path, GifResponse)

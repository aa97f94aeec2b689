"""Gif endpoints."""

from collections.abc import Iterable

from giphy_client.resources.base import MediaResource, encode_path, with_query
from giphy_client.types import GifResponse, GifsResponse


class Gifs(MediaResource):
    collection = "gifs"

    async def get(self, gif_id: str) -> GifResponse:
        """Fetch a single gif by id."""
        return await self.client.get(f"/gifs/{encode_path(gif_id)}", GifResponse)

    async def get_by_ids(self, ids: Iterable[str]) -> GifsResponse:
        """Fetch several gifs in one call."""
        return await self.client.get(with_query("/gifs", ids=",".join(ids)), GifsResponse)

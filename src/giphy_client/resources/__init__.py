"""Thin typed facades over the client, one per resource family."""

from giphy_client.resources.gifs import Gifs
from giphy_client.resources.stickers import Stickers

__all__ = ["Gifs", "Stickers"]

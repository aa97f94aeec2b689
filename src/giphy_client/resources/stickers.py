"""Sticker endpoints."""

from giphy_client.resources.base import MediaResource


class Stickers(MediaResource):
    collection = "stickers"

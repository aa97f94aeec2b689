"""Giphy Client - typed asynchronous access to the Giphy API.

This library provides:
- Bearer token authentication with environment/.env credential loading
- Status-based error classification and typed (pydantic) payload decoding
- Link-header pagination flattened into a single sequence
- Thin facades for the gif and sticker endpoints

Example:
    ```python
    from giphy_client import GiphyClient
    from giphy_client.types import Gif

    async with GiphyClient.from_env() as giphy:
        trending = await giphy.gifs.trending(limit=5)
        everything = await giphy.unfold("/gifs/collection", Gif)
    ```
"""

from giphy_client.client import GiphyClient
from giphy_client.decoding import LinkHeader, decode, decode_with_link
from giphy_client.transport.urls import DEFAULT_HOST, resolve_url

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_HOST",
    "GiphyClient",
    "LinkHeader",
    "__version__",
    "decode",
    "decode_with_link",
    "resolve_url",
]

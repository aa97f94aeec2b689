"""Transport helpers shared by the client.

Modules:
    urls: Target normalization against the API host
"""

from giphy_client.transport.urls import DEFAULT_HOST, resolve_url

__all__ = ["DEFAULT_HOST", "resolve_url"]

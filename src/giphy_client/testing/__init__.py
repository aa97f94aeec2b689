"""Testing utilities for code built on the Giphy client.

Modules:
    factories: Mock response and paged handler factories

Example:
    ```python
    import httpx

    from giphy_client import GiphyClient
    from giphy_client.testing import PagedHandler


    async def test_lists_everything():
        handler = PagedHandler([[1, 2], [3]])
        client = GiphyClient("key", transport=httpx.MockTransport(handler))
        assert await client.unfold("/items", int) == [1, 2, 3]
    ```
"""

from giphy_client.testing.factories import PagedHandler, create_mock_response, link_header

__all__ = ["PagedHandler", "create_mock_response", "link_header"]

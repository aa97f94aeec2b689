"""Link-header pagination.

A list endpoint returns one page of items and, when more exist, a
``Link: <...>; rel="next"`` header. These helpers follow that chain and
flatten the pages into one sequence.

Pages are fetched strictly one after another, because the next target is
only known once the current page has been read. Iteration stops at the first
page with no items or the first page without a ``next`` link. Items are
neither reordered nor deduplicated, and a ``next`` link that cycles back to an
earlier page is followed.
"""

import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from giphy_client.client import GiphyClient

logger = logging.getLogger(__name__)


async def iter_items(client: "GiphyClient", target: str, item: Any) -> AsyncIterator[Any]:
    """Lazily yield every item of a paginated collection.

    Each call starts over from ``target``. The next page is requested only
    once the consumer has drained the current one.

    Args:
        client: Client used to fetch each page.
        target: Path or absolute URL of the first page.
        item: Type of a single element; each page decodes as ``list[item]``.
    """
    into = list[item]
    link, items = await client.request_with_links("GET", target, into)
    page = 1

    while items:
        logger.debug(f"Page {page} of {target}: {len(items)} items")
        for entry in items:
            yield entry

        next_url = link.next if link is not None else None
        if next_url is None:
            break

        link, items = await client.request_with_links("GET", next_url, into)
        page += 1


async def unfold(client: "GiphyClient", target: str, item: Any) -> list[Any]:
    """Fetch every page of a collection into one list.

    Any failure on any page propagates and nothing collected so far is
    returned.
    """
    return [entry async for entry in iter_items(client, target, item)]

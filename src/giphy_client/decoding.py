"""Typed response decoding.

Every successful response is decoded into a type chosen by the caller. The
caller passes ``into=None`` when the endpoint returns no payload, in which case
the body is never inspected. A 204 is treated the same way whatever the
caller asked for, since some servers send stray bytes with it.

Example:
    ```python
    response = await client.dispatch("GET", "/gifs/trending")
    trending = decode(response, GifsResponse)

    link, gifs = decode_with_link(response, list[Gif])
    if link is not None and link.next:
        ...
    ```
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from giphy_client.errors.exceptions import DecodeError
from giphy_client.errors.handler import raise_for_status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinkHeader(Mapping[str, str]):
    """Relation name to target URL, parsed from a ``Link`` response header."""

    relations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "relations", MappingProxyType(dict(self.relations)))

    def __getitem__(self, rel: str) -> str:
        return self.relations[rel]

    def __iter__(self) -> Iterator[str]:
        return iter(self.relations)

    def __len__(self) -> int:
        return len(self.relations)

    @property
    def next(self) -> str | None:
        return self.relations.get("next")

    @classmethod
    def from_response(cls, response: httpx.Response) -> "LinkHeader | None":
        """Parse the response's Link header.

        Returns None when the header is absent or yields no usable relation;
        a malformed header is never an error.
        """
        if "link" not in response.headers:
            return None
        try:
            links = response.links
        except (ValueError, IndexError, KeyError):
            logger.debug(f"Ignoring unparseable Link header: {response.headers['link']!r}")
            return None

        try:
            base = response.url
        except RuntimeError:
            # Response built without a request; only absolute targets survive
            base = None

        relations: dict[str, str] = {}
        for link in links.values():
            url = link.get("url")
            rel = link.get("rel")
            if not url or not rel:
                continue
            if base is not None:
                # Relative targets resolve against the request URL (RFC 8288)
                try:
                    url = str(base.join(url))
                except httpx.InvalidURL:
                    continue
            # rel may hold several space-separated relation types
            for name in rel.split():
                relations.setdefault(name, url)

        if not relations:
            return None
        return cls(relations)


@lru_cache(maxsize=256)
def _cached_adapter(into: Any) -> TypeAdapter:
    return TypeAdapter(into)


def _adapter(into: Any) -> TypeAdapter:
    try:
        return _cached_adapter(into)
    except TypeError:
        # Unhashable type expression, e.g. Annotated with a dict in its metadata
        return TypeAdapter(into)


def decode(response: httpx.Response, into: Any) -> Any:
    """Classify a response by status and decode its body.

    Args:
        response: A fully read HTTP response.
        into: The expected payload type, or None when no payload is expected.

    Returns:
        The decoded payload, or None for 204 responses and ``into=None``.

    Raises:
        ApiError: For any status outside [200, 300).
        DecodeError: When a successful body does not match ``into``.
    """
    raise_for_status(response)

    if response.status_code == httpx.codes.NO_CONTENT or into is None:
        return None

    try:
        return _adapter(into).validate_json(response.content, strict=True)
    except ValidationError as e:
        body_text = response.text
        raise DecodeError(
            f"code: {response.status_code}, could not decode body: {e.error_count()} validation error(s)",
            status_code=response.status_code,
            body_text=body_text,
            response=response,
        ) from e


def decode_with_link(response: httpx.Response, into: Any) -> tuple[LinkHeader | None, Any]:
    """Like :func:`decode`, also returning the parsed Link header."""
    link = LinkHeader.from_response(response)
    return link, decode(response, into)

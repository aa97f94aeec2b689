"""Request target normalization."""

import re

import httpx

from giphy_client.errors.exceptions import UrlParseError

DEFAULT_HOST = "https://api.giphy.com/v1"

SECURE_SCHEME_PREFIX = "https://"

# Whitespace and C0/DEL control characters are never valid in a target
_INVALID_CHARS = re.compile(r"[\x00-\x20\x7f]")


def resolve_url(target: str, base_url: str = DEFAULT_HOST) -> httpx.URL:
    """Turn a request target into an absolute URL.

    Targets that already start with ``https://`` are used as-is. Anything
    else is appended verbatim to ``base_url``, so relative paths are expected
    to carry their own leading slash (``"/gifs/search"``).

    Raises:
        UrlParseError: If the resulting string is not a valid absolute URL.
    """
    if target.startswith(SECURE_SCHEME_PREFIX):
        raw = target
    else:
        raw = base_url + target

    match = _INVALID_CHARS.search(raw)
    if match:
        raise UrlParseError(f"Invalid character {match.group()!r} in URL: {raw!r}", url=raw)

    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise UrlParseError(f"Invalid URL {raw!r}: {e}", url=raw) from e

    if not url.scheme:
        raise UrlParseError(f"URL has no scheme: {raw!r}", url=raw)
    if not url.host:
        raise UrlParseError(f"URL has no host: {raw!r}", url=raw)
    return url

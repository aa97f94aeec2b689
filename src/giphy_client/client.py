"""Asynchronous Giphy API client."""

import logging
from collections.abc import AsyncIterator
from typing import Any

import httpx

from giphy_client.auth.bearer import BearerAuth
from giphy_client.auth.credentials import DEFAULT_ENV_VAR, CredentialResolver
from giphy_client.decoding import LinkHeader, decode, decode_with_link
from giphy_client.errors.exceptions import ConstructionError, TransportError
from giphy_client.pagination import iter_items, unfold
from giphy_client.resources.gifs import Gifs
from giphy_client.resources.stickers import Stickers
from giphy_client.transport.urls import DEFAULT_HOST, resolve_url

logger = logging.getLogger(__name__)

JSON_MIME = "application/json"
UPLOAD_CONTENT_TYPE = "application/octet-stream"
DEFAULT_TIMEOUT = 30.0


class GiphyClient:
    """Entrypoint for the Giphy API.

    The client is immutable once built: it holds a bearer credential and one
    shared ``httpx.AsyncClient``, so a single instance can serve any number of
    concurrent calls.

    Args:
        token: API key. Anything convertible to ``str`` is accepted, as is
            an existing ``BearerAuth``.
        base_url: Host prefix for relative request targets.
        timeout: Transport timeout in seconds, passed through to httpx.
        transport: Optional httpx transport (tests inject
            ``httpx.MockTransport`` here).
        http_client: Existing ``httpx.AsyncClient`` to share instead of
            building a new one; ``timeout`` and ``transport`` are ignored.

    Raises:
        ConstructionError: If the HTTP transport cannot be initialized.

    Example:
        ```python
        async with GiphyClient("api-key") as giphy:
            results = await giphy.gifs.search("cats", limit=10)
        ```
    """

    def __init__(
        self,
        token: object,
        *,
        base_url: str = DEFAULT_HOST,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._auth = token if isinstance(token, BearerAuth) else BearerAuth(token)
        self._base_url = base_url
        if http_client is not None:
            self._http = http_client
            return
        try:
            self._http = httpx.AsyncClient(timeout=timeout, transport=transport)
        except (OSError, ValueError, TypeError) as e:
            raise ConstructionError(f"creating HTTP client failed: {e}") from e

    @classmethod
    def from_env(
        cls,
        *,
        env_var_name: str = DEFAULT_ENV_VAR,
        resolver: CredentialResolver | None = None,
        **kwargs: Any,
    ) -> "GiphyClient":
        """Build a client with the token read from the environment.

        Raises:
            CredentialNotFoundError: If ``env_var_name`` is not set.
        """
        resolver = resolver or CredentialResolver()
        token = resolver.resolve(env_var_name=env_var_name, required=True)
        return cls(token, **kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def auth(self) -> BearerAuth:
        return self._auth

    def clone(self) -> "GiphyClient":
        """Return another client sharing these credentials and this transport."""
        return type(self)(self._auth, base_url=self._base_url, http_client=self._http)

    def __copy__(self) -> "GiphyClient":
        return self.clone()

    async def aclose(self) -> None:
        """Close the shared transport, for this client and all its clones."""
        await self._http.aclose()

    async def __aenter__(self) -> "GiphyClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"GiphyClient(base_url={self._base_url!r}, auth={self._auth!r})"

    async def dispatch(
        self,
        method: str,
        target: str,
        body: bytes | str | None = None,
    ) -> httpx.Response:
        """Send one authenticated JSON request and return the raw response.

        Args:
            method: HTTP method.
            target: Path relative to ``base_url``, or an absolute https URL.
            body: Optional payload, sent verbatim.

        Raises:
            UrlParseError: If ``target`` does not resolve to a valid URL.
            TransportError: On any network-level failure.
        """
        url = resolve_url(target, self._base_url)
        headers = {
            "Accept": JSON_MIME,
            "Content-Type": JSON_MIME,
        }
        return await self._send(method, url, headers, body)

    async def dispatch_upload(
        self,
        method: str,
        target: str,
        content: bytes,
        mime_type: str,
    ) -> httpx.Response:
        """Send raw bytes with upload headers instead of the JSON content type."""
        url = resolve_url(target, self._base_url)
        headers = {
            "Accept": JSON_MIME,
            "Content-Type": mime_type,
            "X-Upload-Content-Type": UPLOAD_CONTENT_TYPE,
            "X-Upload-Content-Length": str(len(content)),
        }
        return await self._send(method, url, headers, content or None)

    async def _send(
        self,
        method: str,
        url: httpx.URL,
        headers: dict[str, str],
        body: bytes | str | None,
    ) -> httpx.Response:
        request = self._http.build_request(method.upper(), url, headers=headers, content=body)
        logger.debug(f"{request.method} {request.url}")
        try:
            response = await self._http.send(request, auth=self._auth)
        except httpx.RequestError as e:
            raise TransportError(f"{request.method} {request.url} failed: {e!r}", request=request) from e
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return response

    async def request(
        self,
        method: str,
        target: str,
        into: Any = None,
        body: bytes | str | None = None,
    ) -> Any:
        """Dispatch a request and decode the response into ``into``.

        Pass ``into=None`` for endpoints that return no payload.
        """
        response = await self.dispatch(method, target, body)
        return decode(response, into)

    async def request_with_links(
        self,
        method: str,
        target: str,
        into: Any = None,
        body: bytes | str | None = None,
    ) -> tuple[LinkHeader | None, Any]:
        response = await self.dispatch(method, target, body)
        return decode_with_link(response, into)

    async def request_with_mime(
        self,
        method: str,
        target: str,
        content: bytes,
        mime_type: str,
        into: Any = None,
    ) -> Any:
        response = await self.dispatch_upload(method, target, content, mime_type)
        return decode(response, into)

    async def get(self, target: str, into: Any = None, body: bytes | str | None = None) -> Any:
        return await self.request("GET", target, into, body)

    async def post(self, target: str, into: Any = None, body: bytes | str | None = None) -> Any:
        return await self.request("POST", target, into, body)

    async def put(self, target: str, into: Any = None, body: bytes | str | None = None) -> Any:
        return await self.request("PUT", target, into, body)

    async def patch(self, target: str, into: Any = None, body: bytes | str | None = None) -> Any:
        return await self.request("PATCH", target, into, body)

    async def delete(self, target: str, into: Any = None, body: bytes | str | None = None) -> Any:
        return await self.request("DELETE", target, into, body)

    def iter_items(self, target: str, item: Any) -> AsyncIterator[Any]:
        """Lazily iterate every item of a paginated collection."""
        return iter_items(self, target, item)

    async def unfold(self, target: str, item: Any) -> list[Any]:
        """Fetch every page of a paginated collection as one list."""
        return await unfold(self, target, item)

    async def get_all_pages(self, target: str, item: Any) -> list[Any]:
        return await self.unfold(target, item)

    @property
    def gifs(self) -> Gifs:
        """Access gif endpoints."""
        return Gifs(self)

    @property
    def stickers(self) -> Stickers:
        """Access sticker endpoints."""
        return Stickers(self)

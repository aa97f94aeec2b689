"""Bearer token authentication."""

from collections.abc import Generator

import httpx


class BearerAuth(httpx.Auth):
    """Holds an opaque API token and attaches it to every request.

    Accepts anything convertible to text; the token itself is never
    validated.
    """

    def __init__(self, token: object) -> None:
        self._token = str(token)

    @property
    def token(self) -> str:
        return self._token

    @property
    def header_value(self) -> str:
        return f"Bearer {self._token}"

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self.header_value
        yield request

    def __repr__(self) -> str:
        return "BearerAuth(token='***')"

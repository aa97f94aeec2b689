"""Structured exceptions for Giphy client errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class GiphyClientError(Exception):
    """Base exception for every error raised by the client."""

    pass


class ConstructionError(GiphyClientError):
    """Raised when a client cannot be built.

    A client without a working transport or credential is unusable, so this
    is treated as an unrecoverable precondition failure.
    """

    pass


class UrlParseError(GiphyClientError):
    """Raised when a request target cannot be turned into a valid URL."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class TransportError(GiphyClientError):
    """Network-level failure (DNS, TLS, connection reset, timeout)."""

    def __init__(self, message: str, request: "httpx.Request | None" = None):
        super().__init__(message)
        self.request = request


class DecodeError(GiphyClientError):
    """Successful response whose body does not match the expected type."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body_text: str | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body_text = body_text
        self.response = response


class ApiError(GiphyClientError):
    """Base exception for non-2xx API responses."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body_text: str | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body_text = body_text
        self.response = response


class ClientError(ApiError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class UnprocessableEntityError(ClientError):
    """422 Unprocessable Entity."""

    pass


class TooManyRequestsError(ClientError):
    """429 Too Many Requests."""

    pass


class ServerError(ApiError):
    """5xx server errors."""

    pass

"""Error handling utilities for HTTP responses."""

import logging

import httpx

from giphy_client.errors.exceptions import (
    ApiError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    TooManyRequestsError,
    UnauthorizedError,
    UnprocessableEntityError,
)

logger = logging.getLogger(__name__)

EXCEPTION_MAP: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: TooManyRequestsError,
}


def error_class_for_status(status_code: int) -> type[ApiError]:
    """Pick the ApiError subclass for a status code."""
    if status_code in EXCEPTION_MAP:
        return EXCEPTION_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return ApiError


def _envelope_message(response: httpx.Response) -> str | None:
    # Giphy wraps errors as {"meta": {"status": 401, "msg": "..."}}
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    meta = data.get("meta")
    if isinstance(meta, dict) and isinstance(meta.get("msg"), str) and meta["msg"]:
        return meta["msg"]
    message = data.get("message")
    if isinstance(message, str) and message:
        return message
    return None


def raise_for_status(response: httpx.Response) -> None:
    """Raise the appropriate ApiError for a non-2xx response.

    Anything in [200, 300) is a success and returns silently, whatever the
    body looks like. Otherwise the raised error always carries the literal
    status code, plus the body text when the body is non-empty.

    Args:
        response: HTTP response object (body already read)

    Raises:
        ApiError subclass based on status code
    """
    status_code = response.status_code
    if 200 <= status_code < 300:
        return

    exc_class = error_class_for_status(status_code)

    body_text = response.text if response.content else None
    if body_text is None:
        message = f"code: {status_code}, empty response"
    else:
        detail = _envelope_message(response) or body_text
        message = f"code: {status_code}, error: {detail!r}"

    logger.debug(f"API error response: {message}")

    raise exc_class(
        message,
        status_code=status_code,
        body_text=body_text,
        response=response,
    )

"""Error taxonomy and HTTP status handling for the Giphy client."""

from giphy_client.errors.exceptions import (
    ApiError,
    BadRequestError,
    ClientError,
    ConflictError,
    ConstructionError,
    DecodeError,
    ForbiddenError,
    GiphyClientError,
    NotFoundError,
    ServerError,
    TooManyRequestsError,
    TransportError,
    UnauthorizedError,
    UnprocessableEntityError,
    UrlParseError,
)
from giphy_client.errors.handler import error_class_for_status, raise_for_status

__all__ = [
    "ApiError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ConstructionError",
    "DecodeError",
    "ForbiddenError",
    "GiphyClientError",
    "NotFoundError",
    "ServerError",
    "TooManyRequestsError",
    "TransportError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "UrlParseError",
    "error_class_for_status",
    "raise_for_status",
]

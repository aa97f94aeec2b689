"""Tests for error handling utilities."""

import pytest
from httpx import Response

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
from giphy_client.errors.handler import error_class_for_status, raise_for_status


@pytest.mark.unit
@pytest.mark.parametrize("status_code", [200, 201, 202, 204, 299])
def test_raise_for_status_success_response(status_code):
    """Test raise_for_status doesn't raise for 2xx responses."""
    raise_for_status(Response(status_code=status_code, text="not even json"))


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status_code", "exc_class"),
    [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
        (422, UnprocessableEntityError),
        (429, TooManyRequestsError),
        (418, ClientError),
        (500, ServerError),
        (503, ServerError),
        (302, ApiError),
        (100, ApiError),
    ],
)
def test_error_class_for_status(status_code, exc_class):
    assert error_class_for_status(status_code) is exc_class


@pytest.mark.unit
def test_raise_for_status_400_bad_request():
    """Test raise_for_status raises BadRequestError for 400."""
    response = Response(
        status_code=400,
        headers={"content-type": "text/plain"},
        text="Bad request",
    )

    with pytest.raises(BadRequestError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 400
    assert exc_info.value.body_text == "Bad request"
    assert exc_info.value.response == response
    assert str(exc_info.value) == "code: 400, error: 'Bad request'"


@pytest.mark.unit
def test_raise_for_status_empty_body():
    """Test that an empty error body still carries the status code."""
    response = Response(status_code=502)

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 502
    assert exc_info.value.body_text is None
    assert str(exc_info.value) == "code: 502, empty response"


@pytest.mark.unit
def test_raise_for_status_redirect_is_failure():
    """Test that anything outside [200, 300) is a failure, including 3xx."""
    response = Response(status_code=304)

    with pytest.raises(ApiError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 304
    assert not isinstance(exc_info.value, ClientError)


@pytest.mark.unit
def test_raise_for_status_giphy_envelope():
    """Test that the Giphy meta.msg is used for the message."""
    response = Response(
        status_code=401,
        json={"data": [], "meta": {"status": 401, "msg": "No API key found in request."}},
    )

    with pytest.raises(UnauthorizedError) as exc_info:
        raise_for_status(response)

    assert "No API key found in request." in str(exc_info.value)
    assert "401" in str(exc_info.value)
    assert exc_info.value.body_text == response.text


@pytest.mark.unit
def test_raise_for_status_json_message_field():
    response = Response(status_code=403, json={"message": "Invalid authentication credentials"})

    with pytest.raises(ForbiddenError) as exc_info:
        raise_for_status(response)

    assert "Invalid authentication credentials" in str(exc_info.value)


@pytest.mark.unit
def test_raise_for_status_json_without_known_fields():
    """Test that unknown JSON error bodies fall back to the raw text."""
    response = Response(status_code=400, json={"error": "Something went wrong"})

    with pytest.raises(BadRequestError) as exc_info:
        raise_for_status(response)

    assert "Something went wrong" in str(exc_info.value)
    assert exc_info.value.body_text == response.text


@pytest.mark.unit
def test_raise_for_status_plain_text_error():
    """Test raise_for_status handles plain text errors."""
    response = Response(
        status_code=500,
        headers={"content-type": "text/plain"},
        text="Internal Server Error",
    )

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert "500" in str(exc_info.value)
    assert "Internal Server Error" in str(exc_info.value)

"""Tests for bearer token authentication."""

import httpx
import pytest

from giphy_client.auth import BearerAuth


@pytest.mark.unit
def test_sets_authorization_header():
    auth = BearerAuth("abc123")
    request = httpx.Request("GET", "https://api.giphy.com/v1/gifs")

    flow = auth.auth_flow(request)
    authed = next(flow)

    assert authed.headers["Authorization"] == "Bearer abc123"


@pytest.mark.unit
def test_token_converted_to_text():
    assert BearerAuth(42).token == "42"
    assert BearerAuth(42).header_value == "Bearer 42"


@pytest.mark.unit
def test_repr_masks_token():
    assert "abc123" not in repr(BearerAuth("abc123"))

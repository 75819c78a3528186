"""Tests for the Supabase identity client."""
from unittest.mock import MagicMock, patch

import pytest
import requests

from quillpress.exceptions import ConfigurationError, InfrastructureError
from quillpress.services.identity import SupabaseIdentityClient, VerifiedIdentity


def make_response(status_code, payload=None, json_error=False):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    if json_error:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def identity_client():
    return SupabaseIdentityClient("https://project.supabase.co/", "anon-key", timeout=3)


def test_verify_valid_token(identity_client):
    with patch("quillpress.services.identity.requests.get") as mock_get:
        mock_get.return_value = make_response(200, {"id": "user-1", "email": "a@example.com"})

        identity = identity_client.verify("token-123")

    assert identity == VerifiedIdentity(id="user-1", email="a@example.com")
    mock_get.assert_called_once_with(
        "https://project.supabase.co/auth/v1/user",
        headers={"Authorization": "Bearer token-123", "apikey": "anon-key"},
        timeout=3,
    )


@pytest.mark.parametrize(
    "response",
    [
        make_response(401, {"message": "invalid JWT"}),
        make_response(403, {}),
        make_response(200, {"email": "no-id@example.com"}),
        make_response(200, ["unexpected"]),
        make_response(200, json_error=True),
    ],
)
def test_verify_rejected_token_returns_none(identity_client, response):
    with patch("quillpress.services.identity.requests.get", return_value=response):
        assert identity_client.verify("bad") is None


def test_verify_provider_error_raises(identity_client):
    with patch(
        "quillpress.services.identity.requests.get", return_value=make_response(503, {})
    ):
        with pytest.raises(InfrastructureError):
            identity_client.verify("token")


def test_verify_transport_error_raises(identity_client):
    with patch(
        "quillpress.services.identity.requests.get",
        side_effect=requests.ConnectionError("connection refused"),
    ):
        with pytest.raises(InfrastructureError):
            identity_client.verify("token")


def test_verify_without_url_is_configuration_error():
    with pytest.raises(ConfigurationError):
        SupabaseIdentityClient("", "anon-key").verify("token")

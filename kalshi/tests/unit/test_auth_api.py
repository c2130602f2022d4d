"""
Unit tests for the synchronous session endpoints and base client.
"""

import logging

import orjson
import pytest
import requests
from unittest.mock import MagicMock

from kalshi.api.auth import AuthAPI
from kalshi.auth.authenticator import Authenticator, format_bearer
from kalshi.config import KalshiSettings
from kalshi.exceptions import TransportError, DeserializationError, SessionStateError
from kalshi.models import LoginRequest, LoginResponse


def make_response(status_code: int = 200, content: bytes = b"{}") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = content
    response.encoding = "utf-8"
    return response


@pytest.fixture
def session():
    mock_session = MagicMock(spec=requests.Session)
    mock_session.headers = {}
    return mock_session


@pytest.fixture
def api(session):
    settings = KalshiSettings(connect_timeout=5.0, request_timeout=15.0)
    return AuthAPI("https://example.test/trade-api/v2/", settings, session=session)


class TestAuthAPI:
    """Test AuthAPI.login() and AuthAPI.logout()."""

    def test_login_posts_credentials(self, api, session):
        session.request.return_value = make_response(
            content=orjson.dumps({"member_id": "42", "token": "xyz"})
        )

        result = api.login("a@b.com", "pw")

        assert result == LoginResponse(member_id="42", token="xyz")
        session.request.assert_called_once_with(
            method="POST",
            url="https://example.test/trade-api/v2/login",
            headers=None,
            json={"email": "a@b.com", "password": "pw"},
            timeout=(5.0, 15.0),
        )

    def test_login_returns_raw_token(self, api, session):
        """Formatting as a bearer value is the handle's job."""
        session.request.return_value = make_response(
            content=orjson.dumps({"member_id": "42", "token": "xyz"})
        )

        assert api.login("a@b.com", "pw").token == "xyz"

    def test_login_list_body_raises_deserialization_error(self, api, session):
        session.request.return_value = make_response(content=b"[]")

        with pytest.raises(DeserializationError):
            api.login("a@b.com", "pw")

    def test_login_truncated_json_raises_deserialization_error(self, api, session):
        session.request.return_value = make_response(content=b'{"member_id": "4')

        with pytest.raises(DeserializationError) as exc_info:
            api.login("a@b.com", "pw")

        assert exc_info.value.body == '{"member_id": "4'

    def test_login_server_error_raises_transport_error(self, api, session):
        session.request.return_value = make_response(503, content=b"upstream down")

        with pytest.raises(TransportError) as exc_info:
            api.login("a@b.com", "pw")

        assert exc_info.value.status_code == 503
        assert exc_info.value.response is None
        assert "upstream down" in str(exc_info.value)

    def test_logout_sends_auth_headers_without_body(self, api, session):
        session.request.return_value = make_response(content=b"")

        assert api.logout("Bearer xyz") is None

        session.request.assert_called_once_with(
            method="POST",
            url="https://example.test/trade-api/v2/logout",
            headers={"Authorization": "Bearer xyz", "Content-Type": "application/json"},
            json=None,
            timeout=(5.0, 15.0),
        )

    def test_logout_without_token_raises(self, api, session):
        with pytest.raises(SessionStateError):
            api.logout("")

        session.request.assert_not_called()

    def test_logout_connection_error(self, api, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(TransportError):
            api.logout("Bearer xyz")

    def test_close_closes_session(self, api, session):
        api.close()
        session.close.assert_called_once()


class TestAuthenticator:
    """Test bearer header construction."""

    def test_format_bearer(self):
        assert format_bearer("xyz") == "Bearer xyz"

    def test_create_headers(self):
        headers = Authenticator().create_headers("Bearer xyz")
        assert headers == {
            "Authorization": "Bearer xyz",
            "Content-Type": "application/json",
        }

    def test_create_headers_requires_token(self):
        with pytest.raises(SessionStateError):
            Authenticator().create_headers(None)


class TestModels:
    """Test wire models."""

    def test_login_request_repr_hides_password(self):
        request = LoginRequest(email="a@b.com", password="hunter2")
        assert "hunter2" not in repr(request)
        assert request.model_dump() == {"email": "a@b.com", "password": "hunter2"}

    def test_login_response_repr_hides_token(self):
        response = LoginResponse(member_id="42", token="xyz")
        assert "xyz" not in repr(response)


class TestRequestLogging:
    """Test per-request debug logging."""

    def test_log_requests_logs_method_and_status(self, session, caplog):
        settings = KalshiSettings(_env_file=None, log_requests=True)
        api = AuthAPI("https://example.test/trade-api/v2", settings, session=session)
        session.request.return_value = make_response(content=b"")

        with caplog.at_level(logging.DEBUG, logger="kalshi.api.base"):
            api.logout("Bearer xyz")
            api.logout("Bearer xyz")

        messages = [r.getMessage() for r in caplog.records if r.name == "kalshi.api.base"]
        assert messages.count("POST https://example.test/trade-api/v2/logout") == 2
        assert messages.count("POST /logout -> 200") == 2
        assert not hasattr(api, "_request_counter")

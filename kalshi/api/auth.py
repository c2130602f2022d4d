"""
Kalshi session endpoints.

POST /login exchanges credentials for a session token.
POST /logout invalidates it.
"""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from .base import BaseAPIClient
from ..config import KalshiSettings
from ..models import LoginRequest, LoginResponse
from ..auth.authenticator import Authenticator
from ..exceptions import DeserializationError

logger = logging.getLogger(__name__)


class AuthAPI(BaseAPIClient):
    """Login/logout calls over the shared session."""

    def __init__(
        self,
        base_url: str,
        settings: KalshiSettings,
        session: Optional[requests.Session] = None
    ):
        super().__init__(base_url, settings, session=session)
        self.authenticator = Authenticator()

    def login(self, email: str, password: str) -> LoginResponse:
        """
        Exchange credentials for a session.

        Args:
            email: Account email
            password: Account password

        Returns:
            Parsed login response (raw token, not yet formatted)

        Raises:
            TransportError: On request failure
            DeserializationError: If the body is not a login response
        """
        payload = LoginRequest(email=email, password=password)
        data = self.post("/login", json_data=payload.model_dump())

        try:
            return LoginResponse.model_validate(data)
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            logger.error(f"Unexpected login response shape, bad fields: {fields}")
            raise DeserializationError(
                f"Unexpected login response: invalid or missing {', '.join(fields) or 'body'}"
            ) from e

    def logout(self, bearer_token: str) -> None:
        """
        Invalidate a session. The response body is ignored.

        Args:
            bearer_token: Stored "Bearer ..." header value
        """
        headers = self.authenticator.create_headers(bearer_token)
        self.post_no_content("/logout", headers=headers)

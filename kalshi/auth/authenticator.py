"""
Authentication headers for the Kalshi trade API.

Session tokens are sent as bearer credentials; nothing is signed.
"""

import logging
from typing import Optional

from ..exceptions import SessionStateError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def format_bearer(token: str) -> str:
    """Turn a raw session token into an Authorization header value."""
    return f"{BEARER_PREFIX}{token}"


class Authenticator:
    """Builds request headers from a stored bearer token."""

    def create_headers(self, bearer_token: Optional[str]) -> dict[str, str]:
        """
        Create headers for an authenticated request.

        Args:
            bearer_token: Token already formatted by format_bearer()

        Returns:
            Headers dict

        Raises:
            SessionStateError: If there is no token to send
        """
        if not bearer_token:
            raise SessionStateError("No session token; log in first")

        logger.debug("Created bearer headers")

        return {
            "Authorization": bearer_token,
            "Content-Type": "application/json",
        }

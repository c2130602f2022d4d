"""
Main Kalshi client handle.

A handle is an immutable value tagged with its authentication state.
login() and logout() return new handles and never change the one they
are called on; all handles derived from one Kalshi.new() share a single
HTTP session.

Usage:
    kalshi = Kalshi.new(TradingEnvironment.DEMO)
    kalshi = await kalshi.login("johndoe@example.com", "example_password")
    ...
    kalshi = await kalshi.logout()
"""

import asyncio
import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Generic, Optional, Type, TypeVar

from .config import get_settings, KalshiSettings
from .models import TradingEnvironment
from .api.auth import AuthAPI
from .auth.authenticator import format_bearer
from .exceptions import SessionStateError

logger = logging.getLogger(__name__)


class LoggedOut:
    """State tag: no session token held."""


class LoggedIn:
    """State tag: holds a bearer token and member ID."""


S = TypeVar("S", LoggedOut, LoggedIn)


@dataclass(frozen=True, repr=False)
class Kalshi(Generic[S]):
    """
    Client handle for the Kalshi trade API.

    Type checkers only accept login() on Kalshi[LoggedOut] and logout()
    on Kalshi[LoggedIn]; the same rule is enforced at runtime through
    the state tag.

    Attributes:
        base_url: Trade API root, no trailing slash
        transport: Shared HTTP client
        state: LoggedOut or LoggedIn
        token: "Bearer ..." header value when logged in
        member_id: Exchange member ID when logged in
    """

    base_url: str
    transport: AuthAPI
    state: Type[S]
    token: Optional[str] = field(default=None)
    member_id: Optional[str] = field(default=None)

    def __post_init__(self) -> None:
        if self.state not in (LoggedOut, LoggedIn):
            raise SessionStateError(f"Unknown session state: {self.state!r}")

        has_token = self.token is not None
        if has_token != (self.member_id is not None):
            raise SessionStateError("token and member_id must be set together")
        if has_token != (self.state is LoggedIn):
            raise SessionStateError(
                f"{self.state.__name__} handle cannot "
                f"{'carry' if has_token else 'lack'} a session token"
            )

    @classmethod
    def new(
        cls,
        environment: Optional[TradingEnvironment] = None,
        settings: Optional[KalshiSettings] = None
    ) -> "Kalshi[LoggedOut]":
        """
        Create a logged-out handle with a fresh HTTP session.

        Args:
            environment: Demo or live (defaults to settings.environment)
            settings: Optional settings (loads from env if not provided)

        Returns:
            Logged-out handle
        """
        settings = settings or get_settings()
        base_url = settings.resolve_base_url(environment)
        logger.info(f"Kalshi client initialized for {base_url}")
        return cls(base_url=base_url, transport=AuthAPI(base_url, settings), state=LoggedOut)

    @property
    def is_logged_in(self) -> bool:
        return self.state is LoggedIn

    def get_user_token(self) -> Optional[str]:
        """Return the stored bearer header value, or None when logged out."""
        return self.token

    def _require(self, state: type, operation: str) -> None:
        if self.state is not state:
            raise SessionStateError(
                f"{operation}() requires a {state.__name__} handle, "
                f"got {self.state.__name__}"
            )

    async def login(
        self: "Kalshi[LoggedOut]",
        email: str,
        password: str
    ) -> "Kalshi[LoggedIn]":
        """
        Log into the exchange.

        Runs in thread pool to avoid blocking the event loop. This handle
        is left unchanged whatever the outcome.

        Args:
            email: Account email
            password: Account password

        Returns:
            Logged-in handle sharing this handle's transport

        Raises:
            SessionStateError: If this handle is already logged in
            TransportError: On connection failure, timeout or non-2xx status
            DeserializationError: If the response lacks member_id or token
        """
        self._require(LoggedOut, "login")

        result = await asyncio.to_thread(self.transport.login, email, password)

        logger.info(f"Logged in as member {result.member_id}")
        return dataclasses.replace(
            self,
            state=LoggedIn,
            token=format_bearer(result.token),
            member_id=result.member_id
        )

    async def logout(self: "Kalshi[LoggedIn]") -> "Kalshi[LoggedOut]":
        """
        Log out of the exchange.

        The server's response body is ignored. If the request fails the
        error propagates and no handle is returned.

        Returns:
            Logged-out handle sharing this handle's transport

        Raises:
            SessionStateError: If this handle is not logged in
            TransportError: On connection failure, timeout or non-2xx status
        """
        self._require(LoggedIn, "logout")

        await asyncio.to_thread(self.transport.logout, self.token)

        logger.info(f"Logged out member {self.member_id}")
        return dataclasses.replace(self, state=LoggedOut, token=None, member_id=None)

    def close(self) -> None:
        """Close the shared HTTP session (affects every derived handle)."""
        self.transport.close()

    def __repr__(self) -> str:
        """Safe repr without the session token."""
        return (
            f"Kalshi[{self.state.__name__}]("
            f"base_url={self.base_url}, "
            f"member_id={self.member_id}"
            ")"
        )

"""Authentication modules for Kalshi client."""

from .authenticator import Authenticator, format_bearer

__all__ = ["Authenticator", "format_bearer"]

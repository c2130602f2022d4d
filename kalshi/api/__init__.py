"""API modules for Kalshi client."""

from .base import BaseAPIClient
from .auth import AuthAPI

__all__ = ["BaseAPIClient", "AuthAPI"]

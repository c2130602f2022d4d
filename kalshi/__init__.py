"""
Kalshi Client Library

Session authentication for the Kalshi trade API. A client handle is
typed by its login state; login() and logout() return new handles.
"""

from .client import Kalshi, LoggedIn, LoggedOut
from .config import KalshiSettings, get_settings
from .models import TradingEnvironment, LoginRequest, LoginResponse
from .exceptions import (
    KalshiError,
    TransportError,
    DeserializationError,
    SessionStateError,
)
from .logging_config import setup_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Main client
    "Kalshi",
    "LoggedIn",
    "LoggedOut",

    # Configuration
    "KalshiSettings",
    "get_settings",
    "setup_logging",
    "get_logger",

    # Types
    "TradingEnvironment",
    "LoginRequest",
    "LoginResponse",

    # Exceptions
    "KalshiError",
    "TransportError",
    "DeserializationError",
    "SessionStateError",
]

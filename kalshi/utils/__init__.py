"""Utility modules for Kalshi client."""

from .structured_logging import CredentialRedactionFilter

__all__ = ["CredentialRedactionFilter"]

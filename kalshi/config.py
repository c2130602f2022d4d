"""
Configuration management for Kalshi client.

Loads settings from environment variables with validation.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import TradingEnvironment


# Trade API roots per environment
BASE_URLS = {
    TradingEnvironment.DEMO: "https://demo-api.kalshi.co/trade-api/v2",
    TradingEnvironment.LIVE: "https://trading-api.kalshi.com/trade-api/v2",
}


class KalshiSettings(BaseSettings):
    """
    Kalshi client settings.

    Loads from environment variables with KALSHI_ prefix.
    """
    model_config = SettingsConfigDict(
        env_prefix="KALSHI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API URLs
    environment: TradingEnvironment = Field(
        default=TradingEnvironment.DEMO,
        description="Trading environment (demo or live)"
    )
    base_url: Optional[str] = Field(
        None,
        description="Override for the trade API root URL"
    )

    # Timeouts
    request_timeout: float = Field(default=30.0, ge=1.0, description="Request timeout (seconds)")
    connect_timeout: float = Field(default=10.0, ge=1.0, description="Connection timeout (seconds)")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_requests: bool = Field(default=False, description="Log all HTTP requests")

    def resolve_base_url(self, environment: Optional[TradingEnvironment] = None) -> str:
        """
        Get the API root for requests.

        An explicit base_url wins over the environment mapping.

        Args:
            environment: Environment to use instead of the configured one

        Returns:
            Base URL without trailing slash
        """
        if self.base_url:
            return self.base_url.rstrip("/")
        return BASE_URLS[environment or self.environment]

    def __repr__(self) -> str:
        """Safe repr without sensitive data."""
        return (
            f"KalshiSettings("
            f"environment={self.environment.value}, "
            f"base_url={self.resolve_base_url()}"
            ")"
        )


def get_settings() -> KalshiSettings:
    """
    Get Kalshi settings singleton.

    Returns:
        Validated settings instance
    """
    return KalshiSettings()

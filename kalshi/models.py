"""
Type definitions for Kalshi client.

Uses Pydantic for runtime validation of request and response bodies.
"""

from enum import Enum
from pydantic import BaseModel, Field, ConfigDict


class TradingEnvironment(str, Enum):
    """Exchange environment the client talks to."""
    DEMO = "demo"  # Paper trading sandbox
    LIVE = "live"  # Real money


# Request Models
class LoginRequest(BaseModel):
    """Credentials sent to POST /login."""

    email: str = Field(..., description="Account email")
    password: str = Field(..., repr=False, description="Account password")


# Response Models
class LoginResponse(BaseModel):
    """Session issued by POST /login."""
    model_config = ConfigDict(extra="ignore")

    member_id: str = Field(..., description="Exchange member ID")
    token: str = Field(..., repr=False, description="Raw session token")

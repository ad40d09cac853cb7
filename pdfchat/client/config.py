"""Client configuration with environment variable loading.

Pydantic-based configuration for reaching the document Q&A backend.
The backend origin is never hard-coded; set API_BASE_URL to point elsewhere.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class ClientConfig(BaseModel):
    """Configuration for the backend HTTP client.

    Environment values are strings; validate_default lets Pydantic coerce
    them ("30" -> 30.0, "false" -> False) and run the validators below.

    Attributes:
        api_base_url: Origin (plus optional path prefix) of the backend.
        request_timeout: Per-request timeout in seconds (None for HTTPX default).
        serialize_asks: Answer questions one at a time, in submission order.
    """

    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:8000"),
        description="Base URL of the document Q&A backend",
    )
    request_timeout: float | None = Field(
        default_factory=lambda: os.getenv("REQUEST_TIMEOUT") or None,
        gt=0,
        description="Request timeout in seconds (None for the HTTPX default)",
    )
    serialize_asks: bool = Field(
        default_factory=lambda: os.getenv("SERIALIZE_ASKS") or True,
        description="Append answers in the order questions were asked",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Validate that the base URL is an http(s) URL and drop trailing slashes."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "API base URL must start with http:// or https://. Set API_BASE_URL in .env"
            )
        return v.rstrip("/")


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If API_BASE_URL or REQUEST_TIMEOUT is invalid.
    """
    return ClientConfig()

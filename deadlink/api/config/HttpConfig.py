"""HTTP client configuration."""

from pydantic import BaseModel, ConfigDict, Field


class HttpConfig(BaseModel):
    """Settings for liveness-check requests."""

    model_config = ConfigDict(extra="forbid")

    timeout: float | None = Field(None, gt=0, description="Seconds per request; None waits indefinitely")

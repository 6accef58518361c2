"""API response models."""

from pydantic import BaseModel
from typing import Literal

from spectraget import __version__


class ValidResponse(BaseModel):
    """Returned when the payload conforms to its schema."""

    valid: bool = True


class FailureResponse(BaseModel):
    """Returned with status 400 when the payload violates its schema."""

    error: str
    status_code: int = 400


class SchemaListResponse(BaseModel):
    """Names of the schemas available for validation."""

    schemas: list[str]


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "degraded"]
    version: str = __version__
    uptime_seconds: float
    schemas_loaded: int

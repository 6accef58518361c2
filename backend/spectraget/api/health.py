"""Health check endpoint."""

import time
from fastapi import APIRouter

from spectraget.models.responses import HealthResponse
from spectraget.schemas import get_all_schemas

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """System health check. Degraded when no schema files could be loaded."""
    schemas_loaded = len(get_all_schemas())

    return HealthResponse(
        status="healthy" if schemas_loaded else "degraded",
        uptime_seconds=round(time.time() - _start_time, 2),
        schemas_loaded=schemas_loaded,
    )

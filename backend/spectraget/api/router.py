"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from spectraget.api.health import router as health_router
from spectraget.api.validation import router as validation_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Payload validation and named schemas
api_router.include_router(validation_router, tags=["Validation"])

"""Parameter validators — schema-driven checks for request parameters.

Usage:
    from spectraget.validators import validation_engine

    failure = validation_engine.validate(schema, payload)
    if failure:
        # Respond with failure.status_code and failure.message
"""

from spectraget.validators.base import BaseChecker
from spectraget.validators.engine import ValidationEngine, validation_engine
from spectraget.validators.models import (
    ParameterSpec,
    ParameterType,
    ValidationFailure,
    ValidationOutcome,
    build_schema,
)

__all__ = [
    "BaseChecker",
    "ValidationEngine",
    "validation_engine",
    "ParameterSpec",
    "ParameterType",
    "ValidationFailure",
    "ValidationOutcome",
    "build_schema",
]

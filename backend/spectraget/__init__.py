"""SpectraGet — declarative request-parameter validation.

Usage:
    from spectraget import validation_engine

    failure = validation_engine.validate(
        [{"name": "age", "type": "int", "mandatory": True}],
        {"age": "30"},
    )
"""

__version__ = "1.0.0"

from spectraget.validators import (
    ParameterSpec,
    ParameterType,
    ValidationEngine,
    ValidationFailure,
    build_schema,
    validation_engine,
)

__all__ = [
    "ParameterSpec",
    "ParameterType",
    "ValidationEngine",
    "ValidationFailure",
    "build_schema",
    "validation_engine",
]

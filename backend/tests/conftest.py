"""Shared fixtures for the SpectraGet test-suite."""

import pytest

from spectraget.schemas import clear_schema_cache
from spectraget.validators import ValidationEngine


@pytest.fixture(autouse=True)
def _fresh_schema_cache():
    """Every test sees schema files as they are on disk."""
    clear_schema_cache()
    yield
    clear_schema_cache()


@pytest.fixture
def engine() -> ValidationEngine:
    """A private engine with the default checker chain."""
    return ValidationEngine()

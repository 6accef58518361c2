"""API request models."""

from typing import Any

from pydantic import BaseModel, Field

from spectraget.validators.models import ParameterSpec


class ValidateRequest(BaseModel):
    """Ad-hoc validation: a schema and the payload to check against it."""

    parameters: list[ParameterSpec] = Field(
        ...,
        alias="schema",
        description="Parameter specs, one per expected parameter",
        examples=[[{"name": "age", "type": "int", "mandatory": True, "range": [0, 150]}]],
    )
    payload: dict[str, Any] = Field(
        default_factory=dict,
        description="Decoded request parameters",
        examples=[{"age": "30"}],
    )

    model_config = {"populate_by_name": True}

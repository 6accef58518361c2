"""Validation models — parameter specs, schemas, and the failure result.

A schema is a flat, ordered list of ParameterSpec entries. Each entry carries
an explicit set of optional directives; a directive left unset is skipped.
"""

import re
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator

# Every failure is reported as a client error
FAILURE_STATUS_CODE = 400

Number = Union[int, float]


class ParameterType(str, Enum):
    """Types accepted by the ``type`` directive."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    DATE = "date"


class ParameterSpec(BaseModel):
    """Expected shape of a single request parameter.

    Directive fields accept their camelCase wire names (``isEmail``,
    ``arrayLength``...) as well as the snake_case attribute names.
    """

    name: str = Field(min_length=1)
    mandatory: bool = False

    type: Optional[ParameterType] = None
    length: Optional[int] = None
    range: Optional[tuple[Number, Number]] = None
    values: Optional[list[str]] = None
    regex: Optional[str] = None
    is_email: bool = Field(default=False, alias="isEmail")
    is_strong_password: bool = Field(default=False, alias="isStrongPassword")
    pattern_contains: Optional[str] = Field(default=None, alias="patternContains")
    array_length: Optional[int] = Field(default=None, alias="arrayLength")
    is_array_of_numbers: bool = Field(default=False, alias="isArrayOfNumbers")
    ip_range: Optional[tuple[str, str]] = Field(default=None, alias="ipRange")
    date_range: Optional[tuple[str, str]] = Field(default=None, alias="dateRange")
    is_json: bool = Field(default=False, alias="isJSON")

    model_config = {"populate_by_name": True, "extra": "forbid", "frozen": True}

    @field_validator("regex")
    @classmethod
    def _regex_must_compile(cls, value: Optional[str]) -> Optional[str]:
        if value:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"Invalid regex pattern '{value}': {e}") from e
        return value


class ValidationFailure(BaseModel):
    """The first violation found in a payload."""

    message: str
    status_code: int = FAILURE_STATUS_CODE

    def to_response(self) -> dict:
        """Body suitable for an HTTP error response."""
        return {"error": self.message, "status_code": self.status_code}


# None means the payload is valid
ValidationOutcome = Optional[ValidationFailure]

SchemaEntry = Union[ParameterSpec, Mapping[str, Any]]


def build_schema(entries: Iterable[SchemaEntry]) -> list[ParameterSpec]:
    """Coerce raw entries into ParameterSpecs and enforce unique names.

    Raises:
        ValueError: if two entries share a name
        pydantic.ValidationError: if an entry is malformed
    """
    schema: list[ParameterSpec] = []
    seen: set[str] = set()

    for entry in entries:
        spec = entry if isinstance(entry, ParameterSpec) else ParameterSpec.model_validate(entry)
        if spec.name in seen:
            raise ValueError(f"Duplicate parameter '{spec.name}' in schema")
        seen.add(spec.name)
        schema.append(spec)

    return schema

"""Type Checker — validates the ``type`` directive."""

from typing import Any, Optional

from spectraget.validators.base import BaseChecker
from spectraget.validators.coercion import parse_date, parse_float_prefix, parse_int_prefix
from spectraget.validators.models import ParameterType, ValidationFailure


class TypeChecker(BaseChecker):
    """Checks a value against one of the declared parameter types.

    Numeric types are parsed leniently: ``"42abc"`` is an int because it
    starts with one. Strings and booleans must have that runtime type.
    """

    directive = "type"

    @property
    def name(self) -> str:
        return "TypeChecker"

    def check(self, param_name: str, value: Any, argument: ParameterType) -> Optional[ValidationFailure]:
        expected = ParameterType(argument)

        if expected is ParameterType.INT:
            if parse_int_prefix(value) is None:
                return self._fail(f"{param_name} should be an integer")
        elif expected is ParameterType.FLOAT:
            if parse_float_prefix(value) is None:
                return self._fail(f"{param_name} should be a floating point number")
        elif expected is ParameterType.STRING:
            if not isinstance(value, str):
                return self._fail(f"{param_name} should be a string")
        elif expected is ParameterType.BOOLEAN:
            if not isinstance(value, bool):
                return self._fail(f"{param_name} should be a boolean")
        elif expected is ParameterType.DATE:
            if parse_date(value) is None:
                return self._fail(f"{param_name} should be a valid date")

        return None

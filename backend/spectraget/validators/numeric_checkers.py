"""Numeric checkers — numeric range, array shape, and IPv4 range."""

from typing import Any, Optional

from spectraget.validators.base import BaseChecker
from spectraget.validators.coercion import format_number, ip_to_number, is_number
from spectraget.validators.models import Number, ValidationFailure


class RangeChecker(BaseChecker):
    """Inclusive numeric range. Values that are not numbers are not checked."""

    directive = "range"

    @property
    def name(self) -> str:
        return "RangeChecker"

    def check(self, param_name: str, value: Any, argument: tuple[Number, Number]) -> Optional[ValidationFailure]:
        low, high = argument
        if is_number(value) and (value < low or value > high):
            return self._fail(
                f"{param_name} should be in the range [{format_number(low)}, {format_number(high)}]"
            )
        return None


class ArrayLengthChecker(BaseChecker):
    directive = "array_length"

    @property
    def name(self) -> str:
        return "ArrayLengthChecker"

    def check(self, param_name: str, value: Any, argument: int) -> Optional[ValidationFailure]:
        if not isinstance(value, (list, tuple)) or len(value) != argument:
            return self._fail(f"{param_name} should be an array with length of {argument}")
        return None


class ArrayOfNumbersChecker(BaseChecker):
    directive = "is_array_of_numbers"

    @property
    def name(self) -> str:
        return "ArrayOfNumbersChecker"

    def check(self, param_name: str, value: Any, argument: bool) -> Optional[ValidationFailure]:
        if not isinstance(value, (list, tuple)) or not all(is_number(item) for item in value):
            return self._fail(f"{param_name} should be an array of numbers")
        return None


class IpRangeChecker(BaseChecker):
    """Inclusive IPv4 range, compared on the folded 32-bit form of each address.

    Octets are not range checked, so malformed addresses compare on whatever
    number they fold to.
    """

    directive = "ip_range"

    @property
    def name(self) -> str:
        return "IpRangeChecker"

    def check(self, param_name: str, value: Any, argument: tuple[str, str]) -> Optional[ValidationFailure]:
        start, end = argument
        address = ip_to_number(value)
        # NaN compares false both ways and passes
        if address < ip_to_number(start) or address > ip_to_number(end):
            return self._fail(f"{param_name} should be in the IP range {start} - {end}")
        return None

"""Date checkers — inclusive date range."""

from typing import Any, Optional

from spectraget.validators.base import BaseChecker
from spectraget.validators.coercion import parse_date
from spectraget.validators.models import ValidationFailure


class DateRangeChecker(BaseChecker):
    """The value must be a valid date within [start, end], bounds inclusive.

    A bound that does not parse does not constrain the value.
    """

    directive = "date_range"

    @property
    def name(self) -> str:
        return "DateRangeChecker"

    def check(self, param_name: str, value: Any, argument: tuple[str, str]) -> Optional[ValidationFailure]:
        start, end = argument
        moment = parse_date(value)
        start_ms = parse_date(start)
        end_ms = parse_date(end)

        if (
            moment is None
            or (start_ms is not None and moment < start_ms)
            or (end_ms is not None and moment > end_ms)
        ):
            return self._fail(f"{param_name} should be a date between {start} and {end}")
        return None

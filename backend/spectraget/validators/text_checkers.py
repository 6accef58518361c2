"""Text checkers — length, allowed values, regex, email, password, substring, JSON."""

import json
import re
from typing import Any, Optional

from spectraget.validators.base import BaseChecker
from spectraget.validators.coercion import to_text
from spectraget.validators.models import ValidationFailure
from spectraget.validators.reference_data import (
    EMAIL_PATTERN,
    PASSWORD_REQUIREMENTS,
    STRONG_PASSWORD_PATTERN,
)


class LengthChecker(BaseChecker):
    """Exact string length. Non-string values are not checked."""

    directive = "length"

    @property
    def name(self) -> str:
        return "LengthChecker"

    def check(self, param_name: str, value: Any, argument: int) -> Optional[ValidationFailure]:
        if isinstance(value, str) and len(value) != argument:
            return self._fail(f"{param_name} should have a length of {argument}")
        return None


class ValuesChecker(BaseChecker):
    """Every space-separated token of the value must be an allowed value."""

    directive = "values"

    @property
    def name(self) -> str:
        return "ValuesChecker"

    def check(self, param_name: str, value: Any, argument: list[str]) -> Optional[ValidationFailure]:
        for token in to_text(value).split(" "):
            if token not in argument:
                return self._fail(f"{param_name} should have a value among {', '.join(argument)}")
        return None


class RegexChecker(BaseChecker):
    """The pattern must match somewhere in the value.

    Patterns use Python `re` syntax, so `$` also matches before a single
    trailing newline.
    """

    directive = "regex"

    @property
    def name(self) -> str:
        return "RegexChecker"

    def check(self, param_name: str, value: Any, argument: str) -> Optional[ValidationFailure]:
        if not re.compile(argument).search(to_text(value)):
            return self._fail(f"{param_name} should match the format /{argument}/")
        return None


class EmailChecker(BaseChecker):
    directive = "is_email"

    @property
    def name(self) -> str:
        return "EmailChecker"

    def check(self, param_name: str, value: Any, argument: bool) -> Optional[ValidationFailure]:
        if not EMAIL_PATTERN.fullmatch(to_text(value)):
            return self._fail(f"{param_name} should be a valid email address")
        return None


class StrongPasswordChecker(BaseChecker):
    directive = "is_strong_password"

    @property
    def name(self) -> str:
        return "StrongPasswordChecker"

    def check(self, param_name: str, value: Any, argument: bool) -> Optional[ValidationFailure]:
        if not STRONG_PASSWORD_PATTERN.fullmatch(to_text(value)):
            return self._fail(f"{param_name} should be a strong password ({PASSWORD_REQUIREMENTS})")
        return None


class PatternContainsChecker(BaseChecker):
    """The value must contain the substring; list values must contain the element."""

    directive = "pattern_contains"

    @property
    def name(self) -> str:
        return "PatternContainsChecker"

    def check(self, param_name: str, value: Any, argument: str) -> Optional[ValidationFailure]:
        haystack = value if isinstance(value, (list, tuple)) else to_text(value)
        if argument not in haystack:
            return self._fail(f'{param_name} should contain the pattern "{argument}"')
        return None


def _reject_constant(constant: str) -> None:
    raise ValueError(f"{constant} is not valid JSON")


class JsonChecker(BaseChecker):
    """The value's text form must be well-formed JSON."""

    directive = "is_json"

    @property
    def name(self) -> str:
        return "JsonChecker"

    def check(self, param_name: str, value: Any, argument: bool) -> Optional[ValidationFailure]:
        try:
            json.loads(to_text(value), parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            return self._fail(f"{param_name} should be a valid JSON string")
        return None

"""Validation Engine — checks a request payload against a parameter schema.

This is the main entry point for parameter validation. It detects missing
mandatory parameters, rejects unknown ones, and runs the checker chain on
every payload value, stopping at the first violation.

Usage:
    engine = ValidationEngine()
    failure = engine.validate(schema, payload)
    if failure:
        return JSONResponse(status_code=failure.status_code, content=failure.to_response())
"""

import time
from typing import Any, Iterable, Mapping, Optional

import structlog

from spectraget.config import get_settings
from spectraget.validators.base import BaseChecker
from spectraget.validators.coercion import is_loosely_falsy
from spectraget.validators.models import (
    ParameterSpec,
    SchemaEntry,
    ValidationFailure,
    ValidationOutcome,
    build_schema,
)

# Import all checkers
from spectraget.validators.type_checker import TypeChecker
from spectraget.validators.text_checkers import (
    EmailChecker,
    JsonChecker,
    LengthChecker,
    PatternContainsChecker,
    RegexChecker,
    StrongPasswordChecker,
    ValuesChecker,
)
from spectraget.validators.numeric_checkers import (
    ArrayLengthChecker,
    ArrayOfNumbersChecker,
    IpRangeChecker,
    RangeChecker,
)
from spectraget.validators.date_checkers import DateRangeChecker

logger = structlog.get_logger()


class ValidationEngine:
    """Runs the checker chain over a payload and reports the first violation.

    Design principles:
        - Deterministic: same input → same output
        - Fail-fast: the first failing check ends the run
        - Stateless: one instance can serve every caller
    """

    def __init__(self, checkers: Optional[Iterable[BaseChecker]] = None):
        """Initialize with the default checker chain or a custom list.

        Args:
            checkers: Optional list of checkers, run in order. If None, uses all defaults.
        """
        # Immutable; add_checker and remove_checker build new engines
        self.checkers: tuple[BaseChecker, ...] = tuple(
            checkers if checkers is not None else self._default_checkers()
        )

    @staticmethod
    def _default_checkers() -> list[BaseChecker]:
        """Create the default checker chain in execution order."""
        return [
            TypeChecker(),
            LengthChecker(),
            RangeChecker(),
            ValuesChecker(),
            RegexChecker(),
            EmailChecker(),
            StrongPasswordChecker(),
            PatternContainsChecker(),
            ArrayLengthChecker(),
            ArrayOfNumbersChecker(),
            IpRangeChecker(),
            DateRangeChecker(),
            JsonChecker(),
        ]

    def validate(self, schema: Iterable[SchemaEntry], payload: Mapping[str, Any]) -> ValidationOutcome:
        """Check a payload against a schema.

        Args:
            schema: ParameterSpecs, or mappings in the same shape
            payload: Parameter name → raw value

        Returns:
            None if the payload conforms, otherwise the first ValidationFailure
        """
        start_time = time.perf_counter()
        specs = build_schema(schema)

        failure = self._check_mandatory(specs, payload)
        parameter, checker_name = None, "MandatoryCheck"

        if failure is None:
            parameter, checker_name, failure = self._check_payload(specs, payload)

        duration_ms = round((time.perf_counter() - start_time) * 1000, 3)

        if failure is not None:
            logger.info(
                "validation_failed",
                parameter=parameter,
                checker=checker_name,
                message=failure.message,
                duration_ms=duration_ms,
            )
        elif get_settings().LOG_PASSED_VALIDATIONS:
            logger.debug(
                "validation_complete",
                parameters=len(payload),
                duration_ms=duration_ms,
            )

        return failure

    def is_valid(self, schema: Iterable[SchemaEntry], payload: Mapping[str, Any]) -> bool:
        """Shortcut for callers that only need a yes/no answer."""
        return self.validate(schema, payload) is None

    def _check_mandatory(self, specs: list[ParameterSpec], payload: Mapping[str, Any]) -> Optional[ValidationFailure]:
        # Falsy values (0, False, "") count as missing, same as absent keys
        missing = [
            spec.name for spec in specs
            if spec.mandatory and is_loosely_falsy(payload.get(spec.name))
        ]
        if missing:
            return ValidationFailure(message=f"Parameter(s) required missing: {', '.join(missing)}")
        return None

    def _check_payload(
        self,
        specs: list[ParameterSpec],
        payload: Mapping[str, Any],
    ) -> tuple[Optional[str], Optional[str], Optional[ValidationFailure]]:
        """Run the checker chain on every payload value, in payload order.

        Returns:
            (parameter, checker name, failure), with failure None if all passed
        """
        by_name = {spec.name: spec for spec in specs}

        for param_name, value in payload.items():
            spec = by_name.get(param_name)
            if spec is None:
                return param_name, "UnknownParameter", ValidationFailure(
                    message=f"Unknown parameter: {param_name}"
                )

            for checker in self.checkers:
                if not checker.applies_to(spec):
                    continue
                failure = checker.check(param_name, value, checker.argument(spec))
                if failure is not None:
                    return param_name, checker.name, failure

        return None, None, None

    def add_checker(self, checker: BaseChecker) -> "ValidationEngine":
        """Return a new engine with a custom checker appended to the chain."""
        return ValidationEngine([*self.checkers, checker])

    def remove_checker(self, checker_name: str) -> "ValidationEngine":
        """Return a new engine without the named checker."""
        return ValidationEngine([c for c in self.checkers if c.name != checker_name])


# Module-level singleton
validation_engine = ValidationEngine()

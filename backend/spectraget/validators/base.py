"""Base checker — abstract class implementing the Strategy Pattern.

Each checker owns one directive of ParameterSpec and is a standalone,
independently testable unit. New checkers are added without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from spectraget.validators.models import ParameterSpec, ValidationFailure


class BaseChecker(ABC):
    """Abstract base for all constraint checkers.

    Contract:
        - check() is deterministic: same input → same output
        - check() returns a ValidationFailure, or None when the value passes
        - No shared state, no I/O
    """

    #: ParameterSpec attribute holding this checker's argument
    directive: str = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def check(self, param_name: str, value: Any, argument: Any) -> Optional[ValidationFailure]:
        """Check one payload value against the directive argument.

        Args:
            param_name: Parameter name, used in the failure message
            value: Raw payload value
            argument: The directive's value on the ParameterSpec

        Returns:
            ValidationFailure describing the violation, or None
        """
        ...

    def argument(self, spec: ParameterSpec) -> Any:
        """Directive argument for this checker on a spec."""
        return getattr(spec, self.directive)

    def applies_to(self, spec: ParameterSpec) -> bool:
        """Whether the spec carries this checker's directive.

        Empty strings and False count as unset; other values, empty lists
        included, are set.
        """
        argument = self.argument(spec)
        if argument is None or argument is False:
            return False
        if isinstance(argument, str):
            return argument != ""
        return True

    # ── Helper Methods ──

    def _fail(self, message: str) -> ValidationFailure:
        """Convenience method to create a ValidationFailure."""
        return ValidationFailure(message=message)

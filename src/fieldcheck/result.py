"""Result type returned by every primitive schema check.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CheckResult:
    """Outcome of a single schema check.

    Primitive checks never raise for bad data; they return a failed
    CheckResult whose errors describe what went wrong. The chain only looks
    at `valid` and emits its own caller-supplied message.
    """

    valid: bool
    value: Any  # The (possibly parsed) value
    errors: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    def add_error(self, error: str) -> CheckResult:
        """Add an error and mark as invalid (fluent API).

        Args:
            error: Error message to add

        Returns:
            Self for chaining
        """
        self.errors.append(error)
        self.valid = False
        return self

    @classmethod
    def success(cls, value: Any) -> CheckResult:
        """Create a successful result.

        Args:
            value: The validated value

        Returns:
            Successful CheckResult
        """
        return cls(valid=True, value=value, errors=[])

    @classmethod
    def failure(cls, value: Any, errors: list[str]) -> CheckResult:
        """Create a failed result.

        Args:
            value: The value that failed
            errors: List of error messages

        Returns:
            Failed CheckResult
        """
        return cls(valid=False, value=value, errors=errors)

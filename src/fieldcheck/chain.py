"""Fluent validation chain for a single field.

A chain is bound to one value, one error message bundle and one
caller-owned error list. Each check method appends to that list when the
value fails and returns the chain, so checks compose left to right:

    ```python
    errors: list[str] = []
    messages = {"required": "name is required", "invalid": "name is invalid"}

    validate(payload.get("name", MISSING), messages, errors, prefix="user.") \\
        .is_optional() \\
        .is_string(1, 64, not_allowed=["admin"]) \\
        .is_valid(lambda: setattr(user, "name", payload["name"]))
    ```

A value is *missing* when it is ``None`` or :data:`MISSING`. A missing value
on an optional chain passes every check silently; on a required chain each
check records the ``required`` message. Once ``valid`` turns False it stays
False until the chain is re-initialized with :meth:`ValidationChain.validate`.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Mapping
from typing import Any

from .exceptions import ContractViolationError
from .messages import ErrorMessages
from .result import CheckResult
from .schemas import DefaultSchemas, PrimitiveSchemas

logger = logging.getLogger(__name__)


class _Missing:
    """Marker for an absent value, as opposed to an explicit None."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def is_missing(value: Any) -> bool:
    """True when value is None or MISSING. Empty strings and collections are present."""
    return value is None or value is MISSING


_default_schemas: DefaultSchemas | None = None


def _get_default_schemas() -> DefaultSchemas:
    global _default_schemas
    if _default_schemas is None:
        _default_schemas = DefaultSchemas()
    return _default_schemas


def _is_number(value: Any) -> bool:
    """int or float, excluding bool and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def _contains_strict(values: list[Any] | tuple[Any, ...], value: Any) -> bool:
    """Membership without cross-type equality, so True does not match 1."""
    return any(v is value or (type(v) is type(value) and v == value) for v in values)


class ValidationChain:
    """Validation context for one value.

    Attributes:
        value: The candidate value under test
        optional: Whether a missing value passes without error
        valid: Running verdict; never returns to True once False
        errors: Caller-owned list the chain appends messages to
        messages: The required/invalid message bundle
        prefix: String prepended to every emitted message
    """

    def __init__(self, schemas: PrimitiveSchemas | None = None):
        """Initialize an unbound chain.

        Args:
            schemas: Primitive schema checks to delegate to. Defaults to a
                shared DefaultSchemas instance.
        """
        self.schemas = schemas or _get_default_schemas()
        self.value: Any = MISSING
        self.optional = False
        self.valid = True
        self.errors: list[str] = []
        self.messages = ErrorMessages(required="", invalid="")
        self.prefix = ""

    def __repr__(self) -> str:
        return (
            f"ValidationChain(value={self.value!r}, optional={self.optional}, "
            f"valid={self.valid}, errors={len(self.errors)})"
        )

    # Lifecycle

    def validate(
        self,
        value: Any,
        messages: ErrorMessages | Mapping[str, Any],
        errors: list[str],
        prefix: str = "",
    ) -> ValidationChain:
        """Bind the chain to a new value, resetting all state.

        Args:
            value: Value to validate (None or MISSING for an absent value)
            messages: ErrorMessages or mapping with `required` and `invalid`
            errors: List that failures are appended to; replaces any
                previously bound list
            prefix: String prepended to every emitted message

        Returns:
            Self for chaining
        """
        if not isinstance(errors, list):
            raise ContractViolationError(
                "errors must be a list",
                context={"type": type(errors).__name__},
            )
        self.value = value
        self.messages = ErrorMessages.coerce(messages)
        self.errors = errors
        self.optional = False
        self.valid = True
        self.prefix = prefix
        return self

    def is_optional(self) -> ValidationChain:
        """Let a missing value pass. Call before the first check."""
        self.optional = True
        return self

    def is_valid(self, callback: Callable[[], Any]) -> ValidationChain:
        """Invoke callback if every check so far has passed.

        Args:
            callback: Zero-argument callable run for its side effects

        Returns:
            Self for chaining
        """
        if not callable(callback):
            raise ContractViolationError(
                "is_valid requires a callable",
                context={"type": type(callback).__name__},
            )
        if self.valid:
            callback()
        return self

    def result(self) -> CheckResult:
        """Snapshot of the chain outcome. The errors list is copied."""
        return CheckResult(valid=self.valid, value=self.value, errors=list(self.errors))

    # Internal helpers

    def _fail(self, kind: str, check: str) -> None:
        message = self.messages.required if kind == "required" else self.messages.invalid
        self.valid = False
        self.errors.append(self.prefix + message)
        logger.debug(f"{check} failed ({kind}) for {self.prefix or 'value'}: {self.value!r}")

    def _skip_missing(self, check: str) -> bool:
        """Apply the missing-value policy.

        Returns True when the value is missing and the rest of the check
        must be skipped. Records the required message unless optional.
        """
        if not is_missing(self.value):
            return False
        if not self.optional:
            self._fail("required", check)
        return True

    def _schema(self, check: str, schema: Callable[..., CheckResult], *args: Any) -> bool:
        """Run a primitive schema check behind the missing-value policy.

        Returns True only when the value is present and the schema passed.
        """
        if self._skip_missing(check):
            return False
        if schema(self.value, *args):
            return True
        self._fail("invalid", check)
        return False

    # Strings

    def is_string(
        self,
        min_length: int | None = None,
        max_length: int | None = None,
        not_allowed: list[Any] | tuple[Any, ...] | None = None,
    ) -> ValidationChain:
        """Check for a string within [min_length, max_length].

        With both bounds unset any string passes, including "". With
        ``min_length=0`` the empty string passes and ``max_length`` still
        applies. Otherwise the empty string is rejected.

        A value in ``not_allowed`` records a further invalid message, even
        when the length check already failed. Membership requires the same
        type, so ``True`` does not match ``1``.

        Raises:
            ContractViolationError: If ``not_allowed`` is not a list or tuple,
                or a bound is not a non-negative integer
        """
        if not_allowed is not None and not isinstance(not_allowed, (list, tuple)):
            raise ContractViolationError(
                "not_allowed must be a list",
                context={"check": "is_string", "type": type(not_allowed).__name__},
            )
        for name, bound in (("min_length", min_length), ("max_length", max_length)):
            if bound is not None and (not isinstance(bound, int) or isinstance(bound, bool) or bound < 0):
                raise ContractViolationError(
                    f"{name} must be a non-negative integer",
                    context={"check": "is_string", name: bound},
                )
        if min_length is not None and max_length is not None and min_length > max_length:
            raise ContractViolationError(
                f"min_length ({min_length}) cannot be greater than max_length ({max_length})",
                context={"check": "is_string"},
            )

        allow_empty = (min_length is None and max_length is None) or min_length == 0
        self._schema("is_string", self.schemas.string, min_length, max_length, allow_empty)

        if not_allowed and not is_missing(self.value) and _contains_strict(not_allowed, self.value):
            self._fail("invalid", "is_string")

        return self

    def is_string_enum(self, allowed: list[str] | tuple[str, ...]) -> ValidationChain:
        """Check for a non-empty string that is one of ``allowed``."""
        if not isinstance(allowed, (list, tuple, set, frozenset)):
            raise ContractViolationError(
                "allowed must be a collection of strings",
                context={"check": "is_string_enum", "type": type(allowed).__name__},
            )
        if not self._schema("is_string_enum", self.schemas.string, None, None, False):
            return self

        if self.value not in allowed:
            self._fail("invalid", "is_string_enum")
        return self

    def is_email(self) -> ValidationChain:
        self._schema("is_email", self.schemas.email)
        return self

    def is_uuid(self) -> ValidationChain:
        """Check for a version 1 or 4 UUID (versions come from the schema config)."""
        self._schema("is_uuid", self.schemas.uuid)
        return self

    # Numbers

    def is_number(self) -> ValidationChain:
        """Check for an integral number. Strings, bools and NaN are invalid."""
        if self._skip_missing("is_number"):
            return self

        if _is_number(self.value) and self.schemas.integer(self.value):
            return self

        self._fail("invalid", "is_number")
        return self

    def is_float(self) -> ValidationChain:
        """Check for any finite number. Strings, bools and NaN are invalid."""
        if self._skip_missing("is_float"):
            return self

        if _is_number(self.value) and self.schemas.number(self.value):
            return self

        self._fail("invalid", "is_float")
        return self

    def is_boolean(self) -> ValidationChain:
        """Check for True or False; truthy values like 1 or "true" are invalid."""
        self._schema("is_boolean", self.schemas.boolean)
        return self

    # Dates

    def is_date_iso(self) -> ValidationChain:
        self._schema("is_date_iso", self.schemas.iso_date)
        return self

    def is_date_iso8601_duration(self) -> ValidationChain:
        """Check for an ISO-8601 duration string such as ``P1DT2H``."""
        if not self._schema("is_date_iso8601_duration", self.schemas.string, None, None, False):
            return self

        if not self.schemas.iso_duration(self.value):
            self._fail("invalid", "is_date_iso8601_duration")
        return self

    # Objects

    def is_object(self) -> ValidationChain:
        self._schema("is_object", self.schemas.object)
        return self

    def is_object_not_empty(self) -> ValidationChain:
        """Check for a mapping with at least one key."""
        if self._skip_missing("is_object_not_empty"):
            return self

        if not self._schema("is_object_not_empty", self.schemas.object):
            return self

        if len(self.value) == 0:
            self._fail("invalid", "is_object_not_empty")
        return self

    def is_object_id(self) -> ValidationChain:
        if self._skip_missing("is_object_id"):
            return self

        if not self.schemas.object_id(self.value):
            self._fail("invalid", "is_object_id")
        return self

    # Arrays

    def is_array(self) -> ValidationChain:
        self._schema("is_array", self.schemas.array)
        return self

    def is_array_match(self, allowed: list[str] | tuple[str, ...]) -> ValidationChain:
        """Check that every element fully matches one of the ``allowed`` patterns.

        Entries of ``allowed`` are regular expression alternatives, converted
        with ``str()`` and joined into ``^(a|b|...)$``. A single string value
        is treated as a one-element list; any other non-list value is invalid.
        Non-string elements never match. Stops at the first mismatch.
        """
        if not isinstance(allowed, (list, tuple)):
            raise ContractViolationError(
                "allowed must be a list of patterns",
                context={"check": "is_array_match", "type": type(allowed).__name__},
            )
        if self._skip_missing("is_array_match"):
            return self

        pattern = re.compile(f"(?:{'|'.join(map(str, allowed))})")

        items = self.value
        if isinstance(items, str):
            items = [items]
        elif not isinstance(items, (list, tuple)):
            self._fail("invalid", "is_array_match")
            return self

        for item in items:
            if not isinstance(item, str) or pattern.fullmatch(item) is None:
                self._fail("invalid", "is_array_match")
                break
        return self

    def is_array_not_empty(self) -> ValidationChain:
        if not self._schema("is_array_not_empty", self.schemas.array):
            return self

        if len(self.value) == 0:
            self._fail("invalid", "is_array_not_empty")
        return self

    # Custom

    def custom(self, predicate: Callable[[Any], Any]) -> ValidationChain:
        """Check the value with ``predicate``; a falsy return is invalid.

        The predicate is not called for a missing value.
        """
        if not callable(predicate):
            raise ContractViolationError(
                "custom requires a callable predicate",
                context={"check": "custom", "type": type(predicate).__name__},
            )
        if self._skip_missing("custom"):
            return self

        if not predicate(self.value):
            self._fail("invalid", "custom")
        return self


def validate(
    value: Any,
    messages: ErrorMessages | Mapping[str, Any],
    errors: list[str],
    prefix: str = "",
    schemas: PrimitiveSchemas | None = None,
) -> ValidationChain:
    """Start a new validation chain for ``value``.

    Args:
        value: Value to validate (None or MISSING for an absent value)
        messages: ErrorMessages or mapping with `required` and `invalid`
        errors: List that failures are appended to
        prefix: String prepended to every emitted message
        schemas: Optional primitive schema checks to use instead of the defaults

    Returns:
        A fresh ValidationChain bound to the value
    """
    return ValidationChain(schemas).validate(value, messages, errors, prefix)

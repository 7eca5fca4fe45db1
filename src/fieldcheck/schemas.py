"""Primitive schema checks used by the validation chain.

Each primitive judges one aspect of a value (string length, integer-ness,
email syntax, ...) and returns a :class:`CheckResult`. Primitives never
raise on bad data; library exceptions are folded into failed results.

The chain depends only on the :class:`PrimitiveSchemas` protocol, so any
object implementing it can be injected. :class:`DefaultSchemas` is backed by
pydantic type adapters, ``email-validator`` and ``bson``.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from functools import lru_cache
from typing import Annotated, Any, Protocol, Union, runtime_checkable

from bson import ObjectId
from email_validator import EmailNotValidError, validate_email
from pydantic import FiniteFloat, StrictBool, StringConstraints, TypeAdapter, ValidationError
from pydantic.types import UuidVersion

from .config import ValidationConfig
from .duration import parse_duration
from .result import CheckResult

logger = logging.getLogger(__name__)


@runtime_checkable
class PrimitiveSchemas(Protocol):
    """The schema-check capability a ValidationChain delegates to."""

    def string(
        self,
        value: Any,
        min_length: int | None = None,
        max_length: int | None = None,
        allow_empty: bool = True,
    ) -> CheckResult: ...

    def integer(self, value: Any) -> CheckResult: ...

    def number(self, value: Any) -> CheckResult: ...

    def iso_date(self, value: Any) -> CheckResult: ...

    def iso_duration(self, value: Any) -> CheckResult: ...

    def boolean(self, value: Any) -> CheckResult: ...

    def object(self, value: Any) -> CheckResult: ...

    def array(self, value: Any) -> CheckResult: ...

    def object_id(self, value: Any) -> CheckResult: ...

    def email(self, value: Any) -> CheckResult: ...

    def uuid(self, value: Any) -> CheckResult: ...


@lru_cache(maxsize=128)
def _string_adapter(min_length: int | None, max_length: int | None) -> TypeAdapter:
    return TypeAdapter(
        Annotated[str, StringConstraints(strict=True, min_length=min_length, max_length=max_length)]
    )


def _run(adapter: TypeAdapter, value: Any, strict: bool | None = None) -> CheckResult:
    try:
        return CheckResult.success(adapter.validate_python(value, strict=strict))
    except ValidationError as e:
        return CheckResult.failure(value, [error["msg"] for error in e.errors()])


class DefaultSchemas:
    """Primitive schema checks built on pydantic, email-validator and bson."""

    def __init__(self, config: ValidationConfig | None = None):
        """Initialize the adapters.

        Args:
            config: Optional settings for email and UUID checks
        """
        self.config = config or ValidationConfig()

        self._integer = TypeAdapter(int)
        self._number = TypeAdapter(FiniteFloat)
        self._boolean = TypeAdapter(StrictBool)
        self._object = TypeAdapter(dict[Any, Any])
        self._array = TypeAdapter(Union[list[Any], tuple[Any, ...]])

        uuid_types = tuple(
            Annotated[uuid.UUID, UuidVersion(version)] for version in self.config.uuid_versions
        )
        self._uuid = TypeAdapter(Union[uuid_types])  # type: ignore[valid-type]

    def string(
        self,
        value: Any,
        min_length: int | None = None,
        max_length: int | None = None,
        allow_empty: bool = True,
    ) -> CheckResult:
        """Check for a str within the given length bounds.

        When ``allow_empty`` is False the empty string is rejected even if
        ``min_length`` would allow it.
        """
        if not allow_empty:
            min_length = max(min_length or 0, 1)
        return _run(_string_adapter(min_length, max_length), value)

    def integer(self, value: Any) -> CheckResult:
        """Check for an integral, finite number. Integral floats pass."""
        return _run(self._integer, value)

    def number(self, value: Any) -> CheckResult:
        """Check for a finite number."""
        return _run(self._number, value)

    def iso_date(self, value: Any) -> CheckResult:
        """Check for a date/datetime or a string in ISO-8601 date format."""
        if isinstance(value, date):
            return CheckResult.success(value)
        if not isinstance(value, str):
            return CheckResult.failure(value, [f"Expected ISO date string, got {type(value).__name__}"])
        try:
            return CheckResult.success(datetime.fromisoformat(value))
        except ValueError as e:
            return CheckResult.failure(value, [str(e)])

    def iso_duration(self, value: Any) -> CheckResult:
        return parse_duration(value)

    def boolean(self, value: Any) -> CheckResult:
        return _run(self._boolean, value)

    def object(self, value: Any) -> CheckResult:
        return _run(self._object, value)

    def array(self, value: Any) -> CheckResult:
        return _run(self._array, value, strict=True)

    def object_id(self, value: Any) -> CheckResult:
        """Check for a BSON ObjectId: 24-char hex string, 12 bytes, or ObjectId."""
        if ObjectId.is_valid(value):
            return CheckResult.success(value)
        return CheckResult.failure(value, ["Not a valid ObjectId"])

    def email(self, value: Any) -> CheckResult:
        """Check email syntax. DNS is only consulted if configured."""
        if not isinstance(value, str):
            return CheckResult.failure(value, [f"Expected email string, got {type(value).__name__}"])
        try:
            validate_email(
                value,
                allow_smtputf8=self.config.email_allow_smtputf8,
                allow_quoted_local=self.config.email_allow_quoted_local,
                check_deliverability=self.config.email_check_deliverability,
            )
        except EmailNotValidError as e:
            return CheckResult.failure(value, [str(e)])
        return CheckResult.success(value)

    def uuid(self, value: Any) -> CheckResult:
        """Check for a UUID string or instance of one of the configured versions."""
        if not isinstance(value, (str, uuid.UUID)):
            return CheckResult.failure(value, [f"Expected UUID string, got {type(value).__name__}"])
        result = _run(self._uuid, value)
        if result and result.value.variant != uuid.RFC_4122:
            return CheckResult.failure(value, ["UUID variant must be RFC 4122"])
        return result

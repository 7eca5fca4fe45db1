"""Error message bundle attached to a validation chain."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import ContractViolationError


@dataclass(frozen=True)
class ErrorMessages:
    """The two messages a chain can emit for one field.

    Attributes:
        required: Emitted when the value is missing and the field is not optional
        invalid: Emitted when a present value fails a check
    """

    required: str
    invalid: str

    @classmethod
    def coerce(cls, messages: ErrorMessages | Mapping[str, Any]) -> ErrorMessages:
        """Accept either a bundle or a mapping with `required` and `invalid` keys.

        Raises:
            ContractViolationError: If the mapping lacks one of the keys or
                the argument is neither a bundle nor a mapping
        """
        if isinstance(messages, ErrorMessages):
            return messages
        if not isinstance(messages, Mapping):
            raise ContractViolationError(
                "Error messages must be an ErrorMessages or a mapping",
                context={"type": type(messages).__name__},
            )

        missing = [key for key in ("required", "invalid") if key not in messages]
        if missing:
            raise ContractViolationError(
                f"Error messages missing keys: {', '.join(missing)}",
                context={"missing": missing, "keys": sorted(str(k) for k in messages)},
            )
        return cls(required=str(messages["required"]), invalid=str(messages["invalid"]))

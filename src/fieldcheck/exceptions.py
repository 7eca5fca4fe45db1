"""Exception hierarchy for fieldcheck.

Validation failures are never raised: they are appended to the caller's
error list by the chain. The exceptions here signal misuse of the API
(contract violations) and broken configuration, and always propagate.

Example:
    ```python
    from fieldcheck.exceptions import ContractViolationError, FieldcheckError

    try:
        validate(value, messages, errors).is_string(not_allowed="admin")
    except ContractViolationError as e:
        logger.error(f"Bad call: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from typing import Any, Dict


class FieldcheckError(Exception):
    """Base exception for fieldcheck.

    Attributes:
        context: Dictionary containing contextual information about the error

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (argument names, values)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = context or {}


class ContractViolationError(FieldcheckError, TypeError):
    """Raised when a check is called with arguments that break its contract.

    This is a programmer error, distinct from a validation failure. Examples:
    - `is_string(not_allowed=...)` given something other than a list or tuple
    - an error message bundle without a `required` or `invalid` entry
    - a non-callable predicate passed to `custom()`

    Example:
        ```python
        raise ContractViolationError(
            "not_allowed must be a list",
            context={"check": "is_string", "argument": "not_allowed", "type": "str"}
        )
        ```
    """

    pass


class ConfigurationError(FieldcheckError):
    """Raised when validation configuration is invalid or cannot be loaded.

    Example:
        ```python
        raise ConfigurationError(
            "Unknown configuration keys",
            context={"keys": ["uuid_version"], "source": "fieldcheck.yaml"}
        )
        ```
    """

    pass


__all__ = [
    "FieldcheckError",
    "ContractViolationError",
    "ConfigurationError",
]

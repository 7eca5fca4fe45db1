"""Fluent, chainable validation for single field values.

- **Chain**: `validate()` binds a value, message bundle and error list;
  checks such as `is_string()` or `is_uuid()` append failures and chain
- **Schemas**: pluggable primitive checks (pydantic, email-validator, bson)
- **Config**: settings for the default primitive checks
- **Exceptions**: contract violations raised for API misuse

Example:
    ```python
    from fieldcheck import MISSING, validate

    errors: list[str] = []
    validate(body.get("email", MISSING), {"required": "email required", "invalid": "bad email"}, errors) \\
        .is_email() \\
        .is_valid(lambda: save(body["email"]))
    ```
"""

from fieldcheck.chain import MISSING, ValidationChain, is_missing, validate
from fieldcheck.config import ValidationConfig
from fieldcheck.duration import Duration, parse_duration
from fieldcheck.exceptions import ConfigurationError, ContractViolationError, FieldcheckError
from fieldcheck.messages import ErrorMessages
from fieldcheck.result import CheckResult
from fieldcheck.schemas import DefaultSchemas, PrimitiveSchemas

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Chain
    "validate",
    "ValidationChain",
    "MISSING",
    "is_missing",
    "ErrorMessages",
    "CheckResult",
    # Schemas
    "PrimitiveSchemas",
    "DefaultSchemas",
    "Duration",
    "parse_duration",
    # Config
    "ValidationConfig",
    # Exceptions
    "FieldcheckError",
    "ContractViolationError",
    "ConfigurationError",
]

"""Configuration for the primitive schema checks.

The chain itself has no tunables; configuration only shapes how
:class:`fieldcheck.schemas.DefaultSchemas` judges emails and UUIDs.

Example:
    ```python
    config = ValidationConfig.from_yaml("config/fieldcheck.yaml")
    chain = ValidationChain(schemas=DefaultSchemas(config))
    ```

YAML file format (either at the top level or under a ``fieldcheck`` key):
    ```yaml
    fieldcheck:
      uuid_versions: [1, 4]
      email_allow_smtputf8: true
      email_allow_quoted_local: false
      email_check_deliverability: false
    ```

Environment variables (``FIELDCHECK_`` prefix):
    ``FIELDCHECK_UUID_VERSIONS=1,4,7``, ``FIELDCHECK_EMAIL_ALLOW_SMTPUTF8=false``
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SUPPORTED_UUID_VERSIONS = (1, 3, 4, 5, 6, 7, 8)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ValidationConfig:
    """Settings for the default primitive schema checks.

    Attributes:
        uuid_versions: UUID versions accepted by ``is_uuid``
        email_allow_smtputf8: Accept internationalized local parts
        email_allow_quoted_local: Accept quoted local parts (``"a b"@x.com``)
        email_check_deliverability: Resolve the email domain via DNS
    """

    uuid_versions: tuple[int, ...] = (1, 4)
    email_allow_smtputf8: bool = True
    email_allow_quoted_local: bool = False
    email_check_deliverability: bool = False

    def __post_init__(self) -> None:
        if not self.uuid_versions:
            raise ConfigurationError("uuid_versions cannot be empty")
        unsupported = [v for v in self.uuid_versions if v not in SUPPORTED_UUID_VERSIONS]
        if unsupported:
            raise ConfigurationError(
                f"Unsupported UUID versions: {unsupported}",
                context={"supported": list(SUPPORTED_UUID_VERSIONS)},
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ValidationConfig:
        """Build a config from a mapping, rejecting unknown keys.

        Args:
            data: Mapping of field name to value

        Returns:
            ValidationConfig instance
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                context={"keys": unknown, "known": sorted(known)},
            )

        values: dict[str, Any] = {}
        for name, value in data.items():
            if name == "uuid_versions":
                values[name] = _parse_versions(value)
            else:
                values[name] = _parse_bool(name, value)
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ValidationConfig:
        """Load a config from a YAML file.

        The settings may sit at the top level or under a ``fieldcheck`` key.
        An empty file yields the defaults.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to read config from {path}", context={"path": str(path)}
            ) from e

        if data is None:
            logger.debug(f"Empty config file {path}, using defaults")
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config at {path} must be a mapping at the top level",
                context={"path": str(path), "type": type(data).__name__},
            )
        if "fieldcheck" in data:
            data = data["fieldcheck"] or {}

        logger.info(f"Loaded validation config from {path}")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls, prefix: str = "FIELDCHECK_") -> ValidationConfig:
        """Build a config from environment variables.

        Args:
            prefix: Variable name prefix; the rest is the upper-cased field name

        Returns:
            ValidationConfig with defaults for unset variables
        """
        values: dict[str, Any] = {}
        for f in fields(cls):
            env_name = f"{prefix}{f.name.upper()}"
            if env_name in os.environ:
                values[f.name] = os.environ[env_name]
                logger.debug(f"Config {f.name} set from {env_name}")
        return cls.from_dict(values)


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ConfigurationError(
        f"Invalid boolean for {name}: {value!r}", context={"key": name, "value": value}
    )


def _parse_versions(value: Any) -> tuple[int, ...]:
    if isinstance(value, str):
        value = [part for part in value.split(",") if part.strip()]
    if isinstance(value, int) and not isinstance(value, bool):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise ConfigurationError(
            f"uuid_versions must be a list of integers, got {type(value).__name__}",
            context={"key": "uuid_versions", "value": value},
        )
    try:
        return tuple(int(v) for v in value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"uuid_versions must be a list of integers: {value!r}",
            context={"key": "uuid_versions", "value": value},
        ) from e

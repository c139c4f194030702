# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding Configuration Model.

Policy knobs shared by the bindings of one process. Values come from, in
increasing precedence: field defaults, an optional YAML file, then
environment variables.

Environment Variables:
    OMNIBASE_BINDING_REJECT_START_AFTER_UNBIND: ``true``/``false``
    OMNIBASE_BINDING_WARN_ON_ANONYMOUS_START: ``true``/``false``

YAML Structure::

    reject_start_after_unbind: true
    warn_on_anonymous_start: true

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from omnibase_binding.errors import BindingConfigurationError, ModelBindingErrorContext

logger = logging.getLogger(__name__)

ENV_PREFIX: Final[str] = "OMNIBASE_BINDING_"

# Maximum config file size (1 MB)
MAX_CONFIG_SIZE_BYTES: Final[int] = 1024 * 1024

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"false", "0", "no", "off"})


class ModelBindingConfig(BaseModel):
    """Configuration model for binding lifecycle policy.

    Attributes:
        reject_start_after_unbind: When True, ``start()`` on an unbound
            binding raises BindingStateError. When False, an unbound binding
            with a group may be started again.
        warn_on_anonymous_start: Log a WARNING when ``start()`` is refused
            for an anonymous binding. The refusal itself is unconditional.

    Example:
        >>> config = ModelBindingConfig(reject_start_after_unbind=False)
        >>> binding = BindingController("orders-in", "grp1", target, config=config)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    reject_start_after_unbind: bool = Field(
        default=True,
        description="Raise BindingStateError when starting an unbound binding",
    )
    warn_on_anonymous_start: bool = Field(
        default=True,
        description="Log a warning when an anonymous binding refuses to start",
    )

    @classmethod
    def default(cls) -> ModelBindingConfig:
        """Create a configuration from defaults plus environment overrides."""
        return cls.from_env()

    @classmethod
    def from_env(cls) -> ModelBindingConfig:
        """Create a configuration from environment variables.

        Returns:
            ModelBindingConfig with overrides from ``OMNIBASE_BINDING_*``.

        Raises:
            BindingConfigurationError: If an environment value is not a boolean.
        """
        return cls._build({}, source="environment")

    @classmethod
    def from_yaml(cls, path: str | Path) -> ModelBindingConfig:
        """Create a configuration from a YAML file with environment overrides.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            ModelBindingConfig loaded from the file.

        Raises:
            BindingConfigurationError: If the file is missing, too large,
                not valid YAML, not a mapping, or fails validation.
        """
        config_path = Path(path)
        context = ModelBindingErrorContext.with_correlation(operation="load_config")

        if not config_path.is_file():
            raise BindingConfigurationError(
                f"Binding config file not found: {config_path}",
                context=context,
                config_path=str(config_path),
            )

        file_size = config_path.stat().st_size
        if file_size > MAX_CONFIG_SIZE_BYTES:
            raise BindingConfigurationError(
                f"Binding config file too large: {file_size} bytes "
                f"(max {MAX_CONFIG_SIZE_BYTES})",
                context=context,
                config_path=str(config_path),
            )

        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise BindingConfigurationError(
                f"Invalid YAML in binding config: {e}",
                context=context,
                config_path=str(config_path),
            ) from e

        # An empty document means "all defaults"
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise BindingConfigurationError(
                f"Binding config must be a mapping, got {type(data).__name__}",
                context=context,
                config_path=str(config_path),
            )

        return cls._build(data, source=str(config_path))

    @classmethod
    def _build(cls, data: dict[str, object], source: str) -> ModelBindingConfig:
        merged = dict(data)
        merged.update(_environment_overrides())
        try:
            config = cls.model_validate(merged)
        except ValidationError as e:
            raise BindingConfigurationError(
                f"Invalid binding config from {source}: {e.error_count()} error(s)",
                context=ModelBindingErrorContext.with_correlation(
                    operation="load_config"
                ),
                source=source,
            ) from e

        logger.debug(
            "Loaded binding config",
            extra={
                "source": source,
                "reject_start_after_unbind": config.reject_start_after_unbind,
                "warn_on_anonymous_start": config.warn_on_anonymous_start,
            },
        )
        return config


def _environment_overrides() -> dict[str, object]:
    """Collect ``OMNIBASE_BINDING_<FIELD>`` overrides for known fields."""
    overrides: dict[str, object] = {}
    for field_name in ModelBindingConfig.model_fields:
        env_name = f"{ENV_PREFIX}{field_name.upper()}"
        raw = os.environ.get(env_name)
        if raw is None:
            continue
        overrides[field_name] = _parse_bool(env_name, raw)
    return overrides


def _parse_bool(env_name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise BindingConfigurationError(
        f"Environment variable {env_name} must be a boolean, got {raw!r}",
        context=ModelBindingErrorContext.with_correlation(operation="load_config"),
        env_var=env_name,
    )


__all__: list[str] = ["ENV_PREFIX", "ModelBindingConfig"]

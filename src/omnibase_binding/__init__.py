# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Binding Layer - lifecycle control for bound runnable resources.

This package associates a logical binding (a target name and an optional
consumer group) with an externally supplied runnable resource, such as a
message channel endpoint, and governs its start/stop/unbind transitions
under concurrent access.

Key Components:
    - BindingController: Per-binding lifecycle state machine
    - BindingRegistry: Thread-safe owner of named bindings
    - ModelBindingConfig: Post-unbind and diagnostic policy
    - Binding error hierarchy with ModelBindingErrorContext
"""

from omnibase_binding.binding import BindingController, BindingRegistry
from omnibase_binding.enums import EnumBindingErrorCode, EnumBindingState
from omnibase_binding.errors import (
    BindingConfigurationError,
    BindingError,
    BindingRegistryError,
    BindingStateError,
    InvalidBindingArgumentError,
    ModelBindingErrorContext,
)
from omnibase_binding.models import ModelBindingConfig
from omnibase_binding.protocols import ProtocolComponentNamed, ProtocolRunnableResource

__all__: list[str] = [
    "BindingConfigurationError",
    "BindingController",
    "BindingError",
    "BindingRegistry",
    "BindingRegistryError",
    "BindingStateError",
    "EnumBindingErrorCode",
    "EnumBindingState",
    "InvalidBindingArgumentError",
    "ModelBindingConfig",
    "ModelBindingErrorContext",
    "ProtocolComponentNamed",
    "ProtocolRunnableResource",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Binding Lifecycle Module.

Exports:
    BindingController: Lifecycle controller for one bound runnable resource
    BindingRegistry: Thread-safe registry driving many bindings
"""

from omnibase_binding.binding.binding_controller import BindingController
from omnibase_binding.binding.registry_binding import BindingRegistry

__all__: list[str] = [
    "BindingController",
    "BindingRegistry",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Binding Enumerations Module.

Exports:
    EnumBindingErrorCode: Error classification for binding errors
    EnumBindingState: Computed lifecycle state of a binding
"""

from omnibase_binding.enums.enum_binding_error_code import EnumBindingErrorCode
from omnibase_binding.enums.enum_binding_state import EnumBindingState

__all__: list[str] = [
    "EnumBindingErrorCode",
    "EnumBindingState",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Binding Models Module."""

from omnibase_binding.models.model_binding_config import ModelBindingConfig

__all__: list[str] = ["ModelBindingConfig"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Binding Errors Module.

Exports:
    ModelBindingErrorContext: Configuration model for bundled error context
    BindingError: Base binding error class
    InvalidBindingArgumentError: Missing or invalid constructor arguments
    BindingStateError: Transition not allowed in the current state
    BindingRegistryError: Unknown or duplicate registry names
    BindingConfigurationError: Invalid binding configuration

Correlation ID Assignment:
    Propagate correlation_id from the caller when one exists, otherwise use
    ModelBindingErrorContext.with_correlation() to generate a UUID4.

    Example::

        from omnibase_binding.errors import (
            BindingRegistryError,
            ModelBindingErrorContext,
        )

        raise BindingRegistryError(
            "No binding registered with name: 'orders-in'",
            context=ModelBindingErrorContext.with_correlation(
                operation="get",
                binding_name="orders-in",
            ),
        )
"""

from omnibase_binding.errors.binding_errors import (
    BindingConfigurationError,
    BindingError,
    BindingRegistryError,
    BindingStateError,
    InvalidBindingArgumentError,
)
from omnibase_binding.errors.model_binding_error_context import (
    ModelBindingErrorContext,
)

__all__: list[str] = [
    # Configuration model
    "ModelBindingErrorContext",
    # Error classes
    "BindingError",
    "InvalidBindingArgumentError",
    "BindingStateError",
    "BindingRegistryError",
    "BindingConfigurationError",
]

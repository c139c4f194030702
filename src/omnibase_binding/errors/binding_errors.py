# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding-Specific Error Classes.

Error Hierarchy:
    BindingError (base binding error)
    ├── InvalidBindingArgumentError (also ValueError)
    ├── BindingStateError (also RuntimeError)
    ├── BindingRegistryError (also LookupError)
    └── BindingConfigurationError

All errors:
    - Carry an EnumBindingErrorCode for classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Support correlation IDs for request tracking
    - Accept ModelBindingErrorContext for bundled context parameters

Errors raised by a bound resource's own start/stop are never wrapped in
these classes; they reach the caller unchanged.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from omnibase_binding.enums import EnumBindingErrorCode
from omnibase_binding.errors.model_binding_error_context import (
    ModelBindingErrorContext,
)


class BindingError(Exception):
    """Base error class for binding layer errors.

    Structured Fields (via ModelBindingErrorContext):
        operation: Operation being performed
        binding_name: Binding the error relates to
        group: Consumer group of the binding
        correlation_id: Request correlation ID for tracking

    Example:
        >>> context = ModelBindingErrorContext(
        ...     operation="register",
        ...     binding_name="orders-in",
        ... )
        >>> raise BindingError("Operation failed", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumBindingErrorCode] = None,
        context: Optional[ModelBindingErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize BindingError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled binding context (operation, binding_name, etc.)
            **extra_context: Additional context information
        """
        super().__init__(message)
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id: Optional[UUID] = None
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.binding_name is not None:
                structured_context["binding_name"] = context.binding_name
            if context.group is not None:
                structured_context["group"] = context.group
            correlation_id = context.correlation_id

        self.message = message
        self.error_code = error_code or EnumBindingErrorCode.OPERATION_FAILED
        self.correlation_id = correlation_id
        self.context = structured_context

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"error_code={self.error_code.value!r}, "
            f"correlation_id={self.correlation_id!r})"
        )


class InvalidBindingArgumentError(BindingError, ValueError):
    """Raised when a binding is constructed or registered with a missing argument.

    Example:
        >>> raise InvalidBindingArgumentError(
        ...     "target must not be None",
        ...     context=ModelBindingErrorContext(
        ...         operation="construct", binding_name="orders-in"
        ...     ),
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelBindingErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumBindingErrorCode.INVALID_ARGUMENT,
            context=context,
            **extra_context,
        )


class BindingStateError(BindingError, RuntimeError):
    """Raised when a transition is not permitted in the binding's current state.

    Used when ``start()`` is called on a binding that has already been
    unbound and the configuration rejects resurrection.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelBindingErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumBindingErrorCode.ILLEGAL_STATE,
            context=context,
            **extra_context,
        )


class BindingRegistryError(BindingError, LookupError):
    """Raised for registry lookups of unknown names or duplicate registrations.

    Example:
        >>> raise BindingRegistryError(
        ...     "No binding registered with name: 'orders-in'",
        ...     error_code=EnumBindingErrorCode.NOT_FOUND,
        ...     registered_names=["payments-out"],
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumBindingErrorCode] = None,
        context: Optional[ModelBindingErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or EnumBindingErrorCode.NOT_FOUND,
            context=context,
            **extra_context,
        )


class BindingConfigurationError(BindingError):
    """Raised when binding configuration cannot be loaded or validated.

    Used for missing files, YAML syntax errors, non-mapping documents,
    unknown keys and unparseable environment overrides.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelBindingErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumBindingErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


__all__ = [
    "BindingConfigurationError",
    "BindingError",
    "BindingRegistryError",
    "BindingStateError",
    "InvalidBindingArgumentError",
]

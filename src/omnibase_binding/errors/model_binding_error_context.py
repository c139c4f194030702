# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding Error Context Configuration Model.

This module defines the configuration model for binding error context,
bundling the structured fields shared by every binding error so error
constructors keep a short parameter list.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelBindingErrorContext(BaseModel):
    """Configuration model for binding error context.

    Attributes:
        operation: Operation being performed (construct, start, register, etc.)
        binding_name: Name of the binding the error relates to
        group: Consumer group of the binding, if any
        correlation_id: Request correlation ID for distributed tracing

    Example:
        >>> context = ModelBindingErrorContext(
        ...     operation="start",
        ...     binding_name="orders-in",
        ...     group="grp1",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise BindingStateError("Binding already unbound", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (construct, start, register, etc.)",
    )
    binding_name: Optional[str] = Field(
        default=None,
        description="Name of the binding the error relates to",
    )
    group: Optional[str] = Field(
        default=None,
        description="Consumer group of the binding, if any",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for distributed tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: Optional[str],
    ) -> ModelBindingErrorContext:
        """Create a context, generating a UUID4 correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to propagate.
            **kwargs: Remaining context fields.

        Returns:
            ModelBindingErrorContext with a non-None correlation_id.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelBindingErrorContext"]

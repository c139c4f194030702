# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding Error Code Enumeration.

Defines the error classification carried by every binding error.
"""

from enum import Enum


class EnumBindingErrorCode(str, Enum):
    """Error codes for the binding layer.

    Attributes:
        INVALID_ARGUMENT: A required constructor or call argument was missing
        ILLEGAL_STATE: The operation is not allowed in the current state
        INVALID_CONFIGURATION: Binding configuration failed validation
        NOT_FOUND: A named binding is not registered
        CONFLICT: A named binding is already registered
        OPERATION_FAILED: Generic binding failure
    """

    INVALID_ARGUMENT = "invalid_argument"
    ILLEGAL_STATE = "illegal_state"
    INVALID_CONFIGURATION = "invalid_configuration"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    OPERATION_FAILED = "operation_failed"


__all__ = ["EnumBindingErrorCode"]

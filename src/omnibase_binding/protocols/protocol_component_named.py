# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Component Named Protocol.

Optional capability a runnable resource may expose so bindings can render
a human-readable component name in diagnostics instead of ``str(resource)``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolComponentNamed(Protocol):
    """Protocol for resources that carry a diagnostic component name."""

    def get_component_name(self) -> str:
        """Return the component name used in binding descriptions."""
        ...


__all__: list[str] = ["ProtocolComponentNamed"]

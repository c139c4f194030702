# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Binding Protocols Module.

Exports:
    ProtocolRunnableResource: start/stop/is_running capability a binding drives
    ProtocolComponentNamed: Optional diagnostic name capability
"""

from omnibase_binding.protocols.protocol_component_named import (
    ProtocolComponentNamed,
)
from omnibase_binding.protocols.protocol_runnable_resource import (
    ProtocolRunnableResource,
)

__all__: list[str] = [
    "ProtocolComponentNamed",
    "ProtocolRunnableResource",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding lifecycle states.

The state is never stored on the controller. It is computed from the
resource's own ``is_running()`` answer plus whether a transition or an
unbind has been driven.

FSM Diagram::

    +---------+   start   +---------+   stop   +---------+
    | created | --------> | running | -------> | stopped |
    +---------+           +---------+          +---------+
                               ^                 |   |
                               +------ start ----+   | unbind
                                                     v
                                               +---------+
                                               | unbound |
                                               +---------+
"""

from enum import Enum


class EnumBindingState(str, Enum):
    """Binding lifecycle states.

    Attributes:
        CREATED: No transition driven yet and the resource is not running.
        RUNNING: The attached resource reports it is running.
        STOPPED: Resource absent or halted after a start/stop was driven.
        UNBOUND: ``unbind()`` has been invoked at least once.
    """

    CREATED = "created"
    RUNNING = "running"
    STOPPED = "stopped"
    UNBOUND = "unbound"


__all__: list[str] = ["EnumBindingState"]

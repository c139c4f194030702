# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runnable Resource Protocol.

This module provides the protocol interface for the resource a binding
drives: a message channel endpoint, a consumer container, or anything else
that can be started, stopped and asked whether it is running.

The protocol captures the minimal interface required by BindingController:
    - start(): Begin running
    - stop(): Halt
    - is_running(): Report current run state

Thread Safety:
    BindingController serializes its own start()/stop() calls per binding,
    but ``is_running()`` may be called from any thread at any time and must
    be safe to call concurrently with start()/stop().

Failure Semantics:
    Anything raised by start() or stop() is not wrapped by the binding
    layer; it surfaces verbatim to the caller of the binding operation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolRunnableResource(Protocol):
    """Protocol for resources whose lifecycle a binding governs.

    Note:
        Method bodies in this Protocol use ``...`` (Ellipsis) rather than
        ``raise NotImplementedError()``, per PEP 544 convention.

    Example:
        >>> class ChannelEndpoint:
        ...     def __init__(self) -> None:
        ...         self._running = False
        ...
        ...     def start(self) -> None:
        ...         self._running = True
        ...
        ...     def stop(self) -> None:
        ...         self._running = False
        ...
        ...     def is_running(self) -> bool:
        ...         return self._running
        >>> isinstance(ChannelEndpoint(), ProtocolRunnableResource)
        True
    """

    def start(self) -> None:
        """Start the resource."""
        ...

    def stop(self) -> None:
        """Stop the resource."""
        ...

    def is_running(self) -> bool:
        """Return True while the resource is running."""
        ...


__all__: list[str] = ["ProtocolRunnableResource"]

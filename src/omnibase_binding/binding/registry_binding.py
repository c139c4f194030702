# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding Registry - owner of the named bindings of one process.

The registry holds BindingController instances by name and drives them
collectively: start_all() on boot, unbind_all() on shutdown. It decides
when a binding is discarded; the bindings themselves only govern their
own resource.

Thread Safety:
    The name -> binding mapping is protected by a threading.Lock. Lifecycle
    calls (start/stop/unbind) are made on a snapshot, outside the registry
    lock, so a slow resource never blocks lookups or registrations.

Example Usage:
    ```python
    registry = BindingRegistry()
    registry.register(BindingController("orders-in", "grp1", channel, endpoint))
    registry.start_all()
    ...
    registry.unbind_all()
    ```
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from omnibase_binding.binding.binding_controller import BindingController
from omnibase_binding.enums import EnumBindingErrorCode
from omnibase_binding.errors import (
    BindingRegistryError,
    InvalidBindingArgumentError,
    ModelBindingErrorContext,
)

logger = logging.getLogger(__name__)


class BindingRegistry:
    """Thread-safe registry of bindings keyed by binding name.

    Attributes:
        _bindings: Internal mapping of binding name to controller
        _lock: Threading lock guarding _bindings

    Example:
        >>> registry = BindingRegistry()
        >>> registry.register(BindingController("orders-in", "grp1", channel))
        >>> registry.list_names()
        ['orders-in']
    """

    def __init__(self) -> None:
        """Initialize an empty registry with thread lock."""
        self._bindings: dict[str, BindingController[Any]] = {}
        self._lock: threading.Lock = threading.Lock()

    def register(self, binding: BindingController[Any]) -> None:
        """Register a binding under its name.

        Args:
            binding: Binding to register. Must have a non-empty name.

        Raises:
            InvalidBindingArgumentError: If the binding has no name.
            BindingRegistryError: If the name is already registered.
        """
        if not binding.name:
            raise InvalidBindingArgumentError(
                "Anonymous bindings without a name cannot be registered",
                context=ModelBindingErrorContext(
                    operation="register",
                    group=binding.group or None,
                ),
            )
        with self._lock:
            if binding.name in self._bindings:
                raise BindingRegistryError(
                    f"Binding already registered with name: {binding.name!r}",
                    error_code=EnumBindingErrorCode.CONFLICT,
                    context=ModelBindingErrorContext(
                        operation="register",
                        binding_name=binding.name,
                        group=binding.group or None,
                    ),
                )
            self._bindings[binding.name] = binding

        logger.info(
            "Registered binding",
            extra={"binding_name": binding.name, "group": binding.group},
        )

    def get(self, name: str) -> BindingController[Any]:
        """Get the binding registered under name.

        Raises:
            BindingRegistryError: If no binding is registered under name.
        """
        with self._lock:
            binding = self._bindings.get(name)

        if binding is None:
            registered = self.list_names()
            raise BindingRegistryError(
                f"No binding registered with name: {name!r}. "
                f"Registered bindings: {registered}",
                context=ModelBindingErrorContext(operation="get", binding_name=name),
                registered_names=registered,
            )
        return binding

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self._bindings

    def list_names(self) -> list[str]:
        """List registered binding names, sorted alphabetically."""
        with self._lock:
            return sorted(self._bindings)

    def unregister(self, name: str) -> bool:
        """Remove a binding without touching its lifecycle.

        Returns:
            True if the binding was removed, False if it wasn't registered.
        """
        with self._lock:
            return self._bindings.pop(name, None) is not None

    def start_all(self) -> None:
        """Start every registered binding, in name order.

        Errors from a binding's resource propagate immediately; bindings
        after the failing one are not started.
        """
        for binding in self._snapshot():
            binding.start()

    def stop_all(self) -> None:
        """Stop every registered binding, in name order."""
        for binding in self._snapshot():
            binding.stop()

    def unbind(self, name: str) -> None:
        """Unbind a single binding and remove it from the registry.

        Raises:
            BindingRegistryError: If no binding is registered under name.
        """
        binding = self.get(name)
        binding.unbind()
        self.unregister(name)

    def unbind_all(self) -> None:
        """Unbind and remove every registered binding.

        Every binding is attempted even if an earlier one fails. Failures
        are logged and the first one is re-raised once all bindings have
        been processed.
        """
        with self._lock:
            bindings = [self._bindings[name] for name in sorted(self._bindings)]
            self._bindings.clear()

        errors: list[Exception] = []
        for binding in bindings:
            try:
                binding.unbind()
            except Exception as e:
                logger.exception(
                    "Failed to unbind binding",
                    extra={"binding_name": binding.name, "group": binding.group},
                )
                errors.append(e)

        logger.info(
            "Unbound all bindings",
            extra={"binding_count": len(bindings), "failure_count": len(errors)},
        )
        if errors:
            raise errors[0]

    def _snapshot(self) -> list[BindingController[Any]]:
        with self._lock:
            return [self._bindings[name] for name in sorted(self._bindings)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._bindings


__all__: list[str] = ["BindingRegistry"]

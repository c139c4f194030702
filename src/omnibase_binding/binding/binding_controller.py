# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding Controller - lifecycle control for one bound runnable resource.

This module provides the BindingController class, which associates a
binding name and an optional consumer group with a target handle and an
externally supplied runnable resource, and governs that resource's
start/stop/unbind transitions under concurrent access.

Lifecycle Policy:
    - start(): delegates to the resource only when a resource is attached
      and the binding has a group. Anonymous bindings (no group) are not
      restartable; the call is logged at WARNING and ignored.
    - stop(): delegates only while the resource reports it is running.
    - unbind(): marks the binding unbound, calls stop(), then runs the
      after_unbind hook outside the lock.

Thread Safety:
    start() and stop() share one threading.Lock per controller, so
    check-then-act sequences are atomic and at most one transition is in
    flight per binding. unbind() sets its flag under the same lock before
    calling stop(). is_running() is not locked and is a best-effort
    snapshot. The after_unbind hook runs outside the lock and may run
    concurrently when unbind() is called from several threads.

Example Usage:
    ```python
    from omnibase_binding.binding import BindingController

    binding = BindingController(
        "orders-in",
        "grp1",
        channel,
        endpoint,
        after_unbind=lambda: registry.unregister("orders-in"),
    )
    binding.start()
    ...
    binding.unbind()
    ```
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Generic, Optional, TypeVar

from omnibase_binding.enums import EnumBindingState
from omnibase_binding.errors import (
    BindingStateError,
    InvalidBindingArgumentError,
    ModelBindingErrorContext,
)
from omnibase_binding.models import ModelBindingConfig
from omnibase_binding.protocols import ProtocolComponentNamed, ProtocolRunnableResource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BindingController(Generic[T]):
    """Lifecycle controller for a single binding.

    The controller never constructs or destroys the resource; it only calls
    its start/stop/is_running operations. Errors raised by the resource are
    not caught or retried and reach the caller unchanged.

    Attributes:
        name: Binding name (identity), empty for an anonymous binding
        group: Consumer group, empty for an anonymous binding
        target: Bound target handle, never None
        resource: Attached runnable resource, or None
        config: Post-unbind and diagnostic policy

    Example:
        >>> binding = BindingController("orders-in", "grp1", channel, endpoint)
        >>> binding.start()
        >>> binding.is_running()
        True
        >>> binding.unbind()
        >>> binding.state
        <EnumBindingState.UNBOUND: 'unbound'>
    """

    def __init__(
        self,
        name: Optional[str],
        group: Optional[str],
        target: T,
        resource: Optional[ProtocolRunnableResource] = None,
        *,
        after_unbind: Optional[Callable[[], None]] = None,
        config: Optional[ModelBindingConfig] = None,
    ) -> None:
        """Initialize the controller.

        Args:
            name: Binding name. None is treated as empty.
            group: Consumer group. None or blank marks the binding anonymous.
            target: Bound target handle.
            resource: Runnable resource that runs while the binding is
                active and is stopped during unbind.
            after_unbind: Callback invoked once per unbind() after stop()
                has returned.
            config: Lifecycle policy. Defaults to ModelBindingConfig.default(),
                which applies OMNIBASE_BINDING_* environment overrides.

        Raises:
            InvalidBindingArgumentError: If target is None.
        """
        if target is None:
            raise InvalidBindingArgumentError(
                "target must not be None",
                context=ModelBindingErrorContext(
                    operation="construct",
                    binding_name=name or None,
                    group=group or None,
                ),
            )
        self._name: str = name or ""
        self._group: str = group or ""
        self._target: T = target
        self._resource = resource
        self._after_unbind_callback = after_unbind
        self._config = config if config is not None else ModelBindingConfig.default()

        self._lock: threading.Lock = threading.Lock()
        # Set once any start/stop has been driven; distinguishes CREATED from STOPPED
        self._transitioned = False
        self._unbound = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def group(self) -> str:
        return self._group

    @property
    def target(self) -> T:
        return self._target

    @property
    def resource(self) -> Optional[ProtocolRunnableResource]:
        return self._resource

    @property
    def config(self) -> ModelBindingConfig:
        return self._config

    @property
    def unbound(self) -> bool:
        """True once unbind() has been invoked."""
        return self._unbound

    @property
    def anonymous(self) -> bool:
        """True when the binding has no group and therefore cannot be restarted."""
        return not self._group.strip()

    def get_name(self) -> str:
        return self._name

    def get_identity(self) -> str:
        return self._name

    def get_group(self) -> str:
        return self._group

    @property
    def state(self) -> EnumBindingState:
        """Current lifecycle state, computed from the resource and history."""
        if self.is_running():
            return EnumBindingState.RUNNING
        if self._unbound:
            return EnumBindingState.UNBOUND
        if self._transitioned:
            return EnumBindingState.STOPPED
        return EnumBindingState.CREATED

    def is_running(self) -> bool:
        """Return True if a resource is attached and reports it is running."""
        return self._resource is not None and self._resource.is_running()

    def start(self) -> None:
        """Start the bound resource if it is not already running.

        Raises:
            BindingStateError: If the binding was unbound and the config
                rejects restarting unbound bindings.
        """
        with self._lock:
            if self._unbound and self._config.reject_start_after_unbind:
                raise BindingStateError(
                    f"Binding {self._name!r} has been unbound and cannot be started",
                    context=ModelBindingErrorContext(
                        operation="start",
                        binding_name=self._name or None,
                        group=self._group or None,
                    ),
                )
            if self.is_running():
                logger.debug(
                    "Binding already running, start ignored",
                    extra=self._log_extra(),
                )
                return
            if self._resource is not None and not self.anonymous:
                self._resource.start()
                self._transitioned = True
                logger.debug("Binding started", extra=self._log_extra())
            elif self._config.warn_on_anonymous_start:
                logger.warning(
                    "Can not re-bind an anonymous binding",
                    extra=self._log_extra(),
                )

    def stop(self) -> None:
        """Stop the bound resource if it is running. Idempotent."""
        with self._lock:
            resource = self._resource
            if resource is None or not resource.is_running():
                return
            resource.stop()
            self._transitioned = True
            logger.debug("Binding stopped", extra=self._log_extra())

    def unbind(self) -> None:
        """Mark the binding unbound, call stop(), then run after_unbind().

        The unbound flag is set under the lifecycle lock before stop() runs,
        so a concurrent start() either completed earlier or is rejected.
        The hook runs outside the lock, once per call, and is skipped if
        stop() raises.
        """
        with self._lock:
            self._unbound = True
        self.stop()
        logger.debug("Binding unbound", extra=self._log_extra())
        self.after_unbind()

    def after_unbind(self) -> None:
        """Hook invoked after unbinding.

        Calls the after_unbind callback supplied at construction, if any.
        Subclasses may override this to release auxiliary resources; an
        override must tolerate concurrent invocation.
        """
        if self._after_unbind_callback is not None:
            self._after_unbind_callback()

    def describe(self) -> str:
        """Return a human-readable description for logs and debugging."""
        resource = self._resource
        if isinstance(resource, ProtocolComponentNamed):
            lifecycle = resource.get_component_name()
        else:
            lifecycle = str(resource)
        return f"Binding [name={self._name}, target={self._target}, lifecycle={lifecycle}]"

    def _log_extra(self) -> dict[str, str]:
        return {"binding_name": self._name, "group": self._group}

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, group={self._group!r}, "
            f"state={self.state.value!r})"
        )


__all__: list[str] = ["BindingController"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared fixtures for binding lifecycle tests.

Provides a recording runnable resource that counts start/stop calls under
its own lock, optionally sleeps inside start/stop to widen race windows, and
can be told to raise from start/stop.
"""

from __future__ import annotations

import threading
import time

import pytest

from omnibase_binding.binding import BindingController


class SimulatedResourceError(Exception):
    """Custom exception for simulating resource failures in tests."""


class RecordingResource:
    """Runnable resource that records every start/stop call."""

    def __init__(
        self,
        *,
        running: bool = False,
        delay_seconds: float = 0.0,
    ) -> None:
        self._running = running
        self._delay_seconds = delay_seconds
        self._counter_lock = threading.Lock()
        self.start_calls = 0
        self.stop_calls = 0
        self.fail_on_start = False
        self.fail_on_stop = False

    def start(self) -> None:
        with self._counter_lock:
            self.start_calls += 1
        if self.fail_on_start:
            raise SimulatedResourceError("start failed")
        if self._delay_seconds:
            time.sleep(self._delay_seconds)
        self._running = True

    def stop(self) -> None:
        with self._counter_lock:
            self.stop_calls += 1
        if self.fail_on_stop:
            raise SimulatedResourceError("stop failed")
        if self._delay_seconds:
            time.sleep(self._delay_seconds)
        self._running = False

    def is_running(self) -> bool:
        return self._running

    def __str__(self) -> str:
        return "RecordingResource"


class NamedRecordingResource(RecordingResource):
    """Recording resource that also exposes a component name."""

    def __init__(self, component_name: str, **kwargs: object) -> None:
        super().__init__(**kwargs)  # type: ignore[arg-type]
        self._component_name = component_name

    def get_component_name(self) -> str:
        return self._component_name


@pytest.fixture(autouse=True)
def clean_binding_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep OMNIBASE_BINDING_* overrides from the host out of default configs."""
    monkeypatch.delenv("OMNIBASE_BINDING_REJECT_START_AFTER_UNBIND", raising=False)
    monkeypatch.delenv("OMNIBASE_BINDING_WARN_ON_ANONYMOUS_START", raising=False)


@pytest.fixture
def resource() -> RecordingResource:
    """Create a fresh, stopped recording resource."""
    return RecordingResource()


@pytest.fixture
def slow_resource() -> RecordingResource:
    """Recording resource whose start/stop take long enough to overlap."""
    return RecordingResource(delay_seconds=0.01)


@pytest.fixture
def target() -> object:
    """Opaque target handle."""
    return object()


@pytest.fixture
def group_binding(
    resource: RecordingResource, target: object
) -> BindingController[object]:
    """Restartable binding with a group and an attached resource."""
    return BindingController("orders-in", "grp1", target, resource)


@pytest.fixture
def anonymous_binding(
    resource: RecordingResource, target: object
) -> BindingController[object]:
    """Anonymous binding (empty group) with an attached resource."""
    return BindingController("orders-in", "", target, resource)


@pytest.fixture
def running_resource() -> RecordingResource:
    """Recording resource that is already running."""
    return RecordingResource(running=True)


@pytest.fixture
def named_resource() -> NamedRecordingResource:
    """Recording resource exposing the component name 'orders-in.consumer'."""
    return NamedRecordingResource("orders-in.consumer")


@pytest.fixture
def resource_error_type() -> type[Exception]:
    """Exception type raised by a failing recording resource."""
    return SimulatedResourceError

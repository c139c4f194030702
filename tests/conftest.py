"""Pytest configuration and shared helpers for omnibase_binding tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

# =============================================================================
# Duck Typing Conformance Helpers
# =============================================================================


def assert_has_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required methods (duck typing conformance).

    Protocol conformance is verified by checking for required method presence
    and callability, rather than relying on isinstance checks alone.

    Args:
        obj: The object to check for method presence.
        required_methods: List of method names that must be present and callable.
        protocol_name: Optional protocol name for clearer error messages.

    Raises:
        AssertionError: If any required method is missing or not callable.
    """
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        # __len__ and __contains__ are reached through len()/in
        if not method_name.startswith("__"):
            assert callable(
                getattr(obj, method_name)
            ), f"{name}.{method_name} must be callable"


def assert_binding_contract_interface(binding: object) -> None:
    """Assert that an object exposes the binding contract used by registries.

    Example:
        >>> binding = BindingController("orders-in", "grp1", target)
        >>> assert_binding_contract_interface(binding)
    """
    required_methods = [
        "get_identity",
        "get_name",
        "get_group",
        "is_running",
        "start",
        "stop",
        "unbind",
        "describe",
    ]
    assert_has_methods(binding, required_methods, protocol_name="BindingController")


def assert_binding_registry_interface(registry: object) -> None:
    """Assert that an object implements the BindingRegistry interface.

    Collection-like protocols must include __len__ for complete duck typing.
    """
    required_methods = [
        "register",
        "get",
        "is_registered",
        "list_names",
        "unregister",
        "start_all",
        "stop_all",
        "unbind",
        "unbind_all",
        "__len__",
        "__contains__",
    ]
    assert_has_methods(registry, required_methods, protocol_name="BindingRegistry")


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def binding_logs(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Capture DEBUG and above from the omnibase_binding loggers only."""
    with caplog.at_level(logging.DEBUG, logger="omnibase_binding"):
        yield caplog

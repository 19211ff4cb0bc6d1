"""Pytest fixtures shared across the chart builder tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from chartjs_wrapper.charts import TimePolicy, ValueTypeRegistry


@pytest.fixture
def registry() -> ValueTypeRegistry:
    """Return a fresh registry writing date/time values as RFC-3339 text."""

    return ValueTypeRegistry(TimePolicy.RFC3339)


@pytest.fixture
def epoch_registry() -> ValueTypeRegistry:
    """Return a fresh registry writing date/time values as epoch milliseconds."""

    return ValueTypeRegistry(TimePolicy.EPOCH_MILLIS)


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, in-memory tests.
    - `integration`: tests touching the filesystem or the CLI.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            invalid.append(item.nodeid)

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            f"`@pytest.mark.integration`.\n{joined}"
        )

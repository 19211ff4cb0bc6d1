"""Tests for environment-backed configuration and logging setup."""

from __future__ import annotations

import logging

import pytest

from chartjs_wrapper.charts import TimePolicy
from chartjs_wrapper.config import time_policy_from_env
from chartjs_wrapper.errors import ConfigurationError
from chartjs_wrapper.logging_setup import setup_logging

pytestmark = pytest.mark.unit


def test_time_policy_defaults_to_rfc3339(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without the environment variable, dates are written as RFC-3339 text."""

    monkeypatch.delenv("CHARTJS_WRAPPER_TIME_POLICY", raising=False)

    assert time_policy_from_env() is TimePolicy.RFC3339


def test_time_policy_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """The environment variable selects the policy, case-insensitively."""

    monkeypatch.setenv("CHARTJS_WRAPPER_TIME_POLICY", " EPOCH_MILLIS ")

    assert time_policy_from_env() is TimePolicy.EPOCH_MILLIS


def test_explicit_policy_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """An explicit value ignores the environment."""

    monkeypatch.setenv("CHARTJS_WRAPPER_TIME_POLICY", "epoch_millis")

    assert time_policy_from_env("rfc3339") is TimePolicy.RFC3339


def test_unknown_policy_lists_choices() -> None:
    """Invalid text is a configuration error naming the valid policies."""

    with pytest.raises(ConfigurationError, match="rfc3339, epoch_millis"):
        time_policy_from_env("unix")


def test_setup_logging_keeps_existing_handlers() -> None:
    """An already configured root logger is left alone."""

    root = logging.getLogger()
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    try:
        before = list(root.handlers)
        setup_logging("DEBUG")
        assert root.handlers == before
    finally:
        root.removeHandler(sentinel)

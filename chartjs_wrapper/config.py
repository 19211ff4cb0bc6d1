"""Global configuration and constants for chart building and rendering."""

from __future__ import annotations

import os
from typing import Final

from .charts.types import TimePolicy
from .errors import ConfigurationError

CHARTJS_URL: Final = os.environ.get(
    "CHARTJS_WRAPPER_CHARTJS_URL", "https://cdn.jsdelivr.net/npm/chart.js@4.4.1/dist/chart.umd.min.js"
)
# Time axes need a date adapter loaded after Chart.js itself
DATE_ADAPTER_URL: Final = os.environ.get(
    "CHARTJS_WRAPPER_ADAPTER_URL",
    "https://cdn.jsdelivr.net/npm/chartjs-adapter-date-fns@3.0.0/dist/chartjs-adapter-date-fns.bundle.min.js",
)
DEFAULT_WIDTH_PX: Final = 600
DEFAULT_HEIGHT_PX: Final = 400
R_SQUARED_PRECISION: Final = 4


def time_policy_from_env(value: str | None = None) -> TimePolicy:
    """
    Resolve the date/time wire policy from text or the environment.

    Args:
        value: Policy name ("rfc3339" or "epoch_millis"). When None, the
            CHARTJS_WRAPPER_TIME_POLICY variable is read, defaulting to rfc3339.

    Returns:
        The matching TimePolicy.

    Raises:
        ConfigurationError: If the text names no known policy.
    """
    raw = value if value is not None else os.environ.get("CHARTJS_WRAPPER_TIME_POLICY", "rfc3339")
    try:
        return TimePolicy(raw.strip().lower())
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in TimePolicy)
        raise ConfigurationError(f"Unknown time policy: {raw!r}. Available: {choices}") from exc

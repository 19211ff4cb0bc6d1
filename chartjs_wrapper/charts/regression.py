"""Ordinary least-squares line fitting for scatter series."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np

from ..errors import NumericError
from .data import SERIES_TYPES, PairSeries, Series
from .registry import ValueTypeRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegressionResult:
    """
    Outcome of a line fit.

    Args:
        fitted: Fitted points (x_i, y_hat_i) in input order.
        r_squared: Coefficient of determination.
        slope: Fitted slope, None for empty input.
        intercept: Fitted intercept, None for empty input.
    """

    fitted: PairSeries
    r_squared: float
    slope: float | None = None
    intercept: float | None = None


def r_squared(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Compute R² as 1 - SS_res / SS_tot.

    Args:
        y_true: Observed values.
        y_pred: Fitted values, same length as y_true.

    Returns:
        0.0 for empty input. When every observed value is identical the
        result is 1.0 for an exact fit and 0.0 otherwise.
    """
    if len(y_true) == 0:
        return 0.0
    y_true = np.asarray(y_true, dtype=np.float64)
    y_pred = np.asarray(y_pred, dtype=np.float64)
    ss_res = float(np.sum((y_true - y_pred) ** 2))
    ss_tot = float(np.sum((y_true - y_true.mean()) ** 2))
    if ss_tot == 0.0 or np.all(y_true == y_true[0]):
        return 1.0 if ss_res == 0.0 else 0.0
    return 1.0 - ss_res / ss_tot


def fit(points: Series | Iterable[Any], registry: ValueTypeRegistry | None = None) -> RegressionResult:
    """
    Fit y = intercept + slope * x by least squares.

    Args:
        points: A Series or an iterable of (x, y) pairs convertible to float.
            Radius and tooltip data of a Series are ignored.
        registry: Registry used to wrap the fitted values.

    Returns:
        A RegressionResult whose fitted series keeps the original x values
        and input order.

    Raises:
        NumericError: If values are not finite numbers, fewer than two distinct
            x values are given, or the solve fails.
    """
    try:
        pairs = points.to_pairs() if isinstance(points, SERIES_TYPES) else [tuple(p) for p in points]
        data = np.asarray(pairs, dtype=np.float64) if pairs else None
    except (TypeError, ValueError, OverflowError) as exc:
        raise NumericError(f"Regression input is not convertible to float64: {exc}") from exc
    if data is None:
        return RegressionResult(fitted=PairSeries(), r_squared=0.0)
    if data.ndim != 2 or data.shape[1] != 2:
        raise NumericError(f"Regression input must be (x, y) pairs, got shape {data.shape}")
    if not np.all(np.isfinite(data)):
        raise NumericError("Regression input contains NaN or infinite values")

    x = data[:, 0]
    y = data[:, 1]
    # Intercept column of ones followed by the raw x column
    design = np.column_stack([np.ones(len(x)), x])
    try:
        beta, _, rank, _ = np.linalg.lstsq(design, y, rcond=None)
    except np.linalg.LinAlgError as exc:
        raise NumericError(f"Least-squares solve failed: {exc}") from exc
    if rank < 2:
        raise NumericError(
            f"Design matrix is rank deficient (rank {rank}): need at least two distinct x values"
        )
    if not np.all(np.isfinite(beta)):
        raise NumericError("Least-squares solve produced a non-finite solution")

    if np.all(y == y[0]):
        # A constant target is its own exact fit
        intercept, slope = float(y[0]), 0.0
        y_pred = y
    else:
        intercept, slope = float(beta[0]), float(beta[1])
        y_pred = design @ beta
    score = r_squared(y, y_pred)
    fitted = PairSeries.from_pairs(
        ((raw_x, float(y_hat)) for (raw_x, _), y_hat in zip(pairs, y_pred)),
        registry,
    )
    logger.debug("Fitted %d points: slope=%g intercept=%g r2=%g", len(pairs), slope, intercept, score)
    return RegressionResult(fitted=fitted, r_squared=score, slope=slope, intercept=intercept)

"""Ordinary least squares over one-dimensional series."""

from collections.abc import Sequence
from typing import NamedTuple

import numpy as np
import pandas as pd
from numpy.typing import NDArray
from sklearn.linear_model import LinearRegression  # type: ignore[import-untyped]

from stockbot.exceptions import DegenerateInputError, InvalidInputError

FloatArray = NDArray[np.float64]
ArrayLike = Sequence[float] | FloatArray | pd.Series


class RegressionResult(NamedTuple):
    """Coefficients of y = alpha + beta * x."""

    alpha: float
    beta: float


def _as_float_array(values: ArrayLike, name: str) -> FloatArray:
    try:
        array = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be numeric") from e
    if array.ndim != 1:
        raise InvalidInputError(f"{name} must be one-dimensional")
    if not np.all(np.isfinite(array)):
        raise InvalidInputError(f"{name} contains NaN or infinite values")
    return array


def linear_regression(x: ArrayLike, y: ArrayLike) -> RegressionResult:
    """
    Fit y = alpha + beta * x by ordinary least squares.

    Uses the two-pass form: means first, then the centred cross and square sums.

    Returns:
        RegressionResult: (alpha, beta)

    Raises:
        InvalidInputError: If x and y differ in length or hold non-finite values
        DegenerateInputError: If x is empty or has zero variance
    """
    x_arr = _as_float_array(x, "x")
    y_arr = _as_float_array(y, "y")

    if len(x_arr) != len(y_arr):
        raise InvalidInputError(f"Input sequences have different sizes ({len(x_arr)} != {len(y_arr)})")
    if len(x_arr) == 0:
        raise DegenerateInputError("Cannot fit a regression to empty input")

    if np.ptp(x_arr) == 0:
        raise DegenerateInputError("x has zero variance; slope is undefined")

    mean_x = float(np.mean(x_arr))
    mean_y = float(np.mean(y_arr))

    dx = x_arr - mean_x
    numerator = float(np.sum(dx * (y_arr - mean_y)))
    denominator = float(np.sum(dx * dx))

    # Catches variance lost to underflow
    if denominator == 0:
        raise DegenerateInputError("x has zero variance; slope is undefined")

    beta = numerator / denominator
    alpha = mean_y - beta * mean_x
    return RegressionResult(alpha=alpha, beta=beta)


def fit_day_index_trend(returns: ArrayLike) -> RegressionResult:
    """Regress returns against their day index 0..n-1.

    Raises:
        DegenerateInputError: If fewer than two returns are given
    """
    y = _as_float_array(returns, "returns")
    if len(y) < 2:
        raise DegenerateInputError("At least two returns are needed to fit a day-index trend")

    X = np.arange(len(y), dtype=np.float64).reshape(-1, 1)
    model = LinearRegression()
    model.fit(X, y)
    return RegressionResult(alpha=float(model.intercept_), beta=float(model.coef_[0]))

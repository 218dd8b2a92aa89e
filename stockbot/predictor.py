import logging
from dataclasses import dataclass

import numpy as np

from stockbot.exceptions import InvalidInputError
from stockbot.fetch_stocks import StockSeries
from stockbot.regression import RegressionResult, fit_day_index_trend, linear_regression

logger = logging.getLogger(__name__)

TREND_MODELS = ("self", "day_index")


@dataclass(frozen=True)
class Prediction:
    symbol: str
    last_price: float
    days: int
    alpha: float
    beta: float
    predicted_return: float
    predicted_price: float
    trend_model: str


class StockPredictor:
    """
    Projects a forward price from a symbol's fitted return trend.

    The default "self" model regresses the return series against itself, which
    always yields alpha=0 and beta=1 for a non-constant series, so the projected
    return is simply the horizon in days. It is kept as the default for
    compatibility and logged as a warning on every fit. "day_index" regresses
    returns against their position in time instead.
    """

    def __init__(self, series: StockSeries, trend_model: str = "self") -> None:
        if trend_model not in TREND_MODELS:
            raise InvalidInputError(f"Unknown trend model {trend_model!r}; expected one of {', '.join(TREND_MODELS)}")
        self.series = series
        self.trend_model = trend_model
        self.coefficients: RegressionResult | None = None

    @property
    def symbol(self) -> str:
        return self.series.symbol

    def fit(self) -> RegressionResult:
        """Fit the trend model to the return series.

        Raises:
            DegenerateInputError: If the returns are too few or constant
        """
        returns = self.series.returns
        if self.trend_model == "self":
            logger.warning(
                "%s: self-regression of returns is degenerate (alpha=0, beta=1); "
                "use the day_index trend model for a real fit",
                self.symbol,
            )
            self.coefficients = linear_regression(returns, returns)
        else:
            self.coefficients = fit_day_index_trend(returns)

        logger.debug(
            "%s: alpha=%.6f beta=%.6f (%s)",
            self.symbol,
            self.coefficients.alpha,
            self.coefficients.beta,
            self.trend_model,
        )
        return self.coefficients

    def projected_return(self, days: int) -> float:
        """Return the log-return applied to the last price for a horizon of ``days``."""
        coefficients = self.coefficients if self.coefficients is not None else self.fit()
        alpha, beta = coefficients

        if self.trend_model == "self":
            return alpha + beta * days

        # Sum of fitted returns for the days after the last observation
        last_index = len(self.series.returns) - 1
        return days * (alpha + beta * last_index) + beta * days * (days + 1) / 2

    def predict(self, days: int) -> Prediction:
        """
        Project the price ``days`` trading days ahead of the last close.

        Negative horizons project backwards. The result is not bounds-checked.

        Raises:
            InvalidInputError: If days is not an integer
            DegenerateInputError: If the trend cannot be fitted
        """
        if isinstance(days, bool) or not isinstance(days, int):
            raise InvalidInputError(f"Horizon must be an integer number of days, got {days!r}")

        last_price = self.series.last_price
        coefficients = self.coefficients if self.coefficients is not None else self.fit()
        predicted_return = self.projected_return(days)
        predicted_price = last_price * float(np.exp(predicted_return))

        return Prediction(
            symbol=self.symbol,
            last_price=last_price,
            days=days,
            alpha=coefficients.alpha,
            beta=coefficients.beta,
            predicted_return=predicted_return,
            predicted_price=predicted_price,
            trend_model=self.trend_model,
        )

    def print_prediction(self, prediction: Prediction) -> None:
        print(f"\n=== {prediction.days}-Day Price Projection for {prediction.symbol} ===")
        print(f"Last Close: ${prediction.last_price:.2f}")
        print(f"Trend Model: {prediction.trend_model}")
        print(f"Alpha: {prediction.alpha:.6f}  Beta: {prediction.beta:.6f}")
        print(f"Projected Return: {prediction.predicted_return:.6f}")
        print(f"Projected Price: ${prediction.predicted_price:.2f}")


def predict_stock_price(series: StockSeries, days: int, trend_model: str = "self") -> float:
    """Fit the trend for ``series`` and return the projected price."""
    return StockPredictor(series, trend_model=trend_model).predict(days).predicted_price

"""Daily stock price fetcher with a linear return-trend projection.

Fetches daily closing prices from the Alpha Vantage ``TIME_SERIES_DAILY``
endpoint, derives simple returns, fits an ordinary least squares trend to them
and projects a price a number of days ahead.

Main modules:
    - fetch_stocks: Price download and return calculation.
    - regression: Ordinary least squares estimators.
    - predictor: StockPredictor and price projection.
    - cli: Command line entry point.

Example usage:
    >>> from stockbot import fetch_stock_data, load_settings, predict_stock_price
    >>> settings = load_settings()
    >>> data = fetch_stock_data(["IBM"], settings)
    >>> predict_stock_price(data["IBM"], days=1)
"""

from .config import Settings, load_settings  # noqa: F401
from .exceptions import (  # noqa: F401
    ApiError,
    ConfigError,
    DataQualityError,
    DegenerateInputError,
    InvalidInputError,
    NetworkError,
    OutputError,
    ParseError,
    StockbotError,
)
from .fetch_stocks import StockSeries, compute_simple_returns, fetch_stock_data  # noqa: F401
from .predictor import Prediction, StockPredictor, predict_stock_price  # noqa: F401
from .regression import RegressionResult, linear_regression  # noqa: F401

__version__ = "0.1.0"
__author__ = "quinn"
PACKAGE_NAME = "stockbot"
DESCRIPTION = "Daily stock price fetcher with a linear return-trend projection"

# Define what should be imported with "from stockbot import *"
__all__ = [
    "ApiError",
    "ConfigError",
    "DataQualityError",
    "DegenerateInputError",
    "InvalidInputError",
    "NetworkError",
    "OutputError",
    "ParseError",
    "Prediction",
    "RegressionResult",
    "Settings",
    "StockPredictor",
    "StockSeries",
    "StockbotError",
    "__version__",
    "__author__",
    "compute_simple_returns",
    "fetch_stock_data",
    "linear_regression",
    "load_settings",
    "predict_stock_price",
]

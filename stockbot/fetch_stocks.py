import logging
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
import pandas as pd
import requests

from stockbot.config import Settings
from stockbot.exceptions import (
    ApiError,
    DataQualityError,
    InvalidInputError,
    NetworkError,
    ParseError,
)

logger = logging.getLogger(__name__)

TIME_SERIES_KEY = "Time Series (Daily)"
CLOSE_KEY = "4. close"
# Keys Alpha Vantage uses for error, rate-limit and premium-endpoint notices
API_MESSAGE_KEYS = ("Error Message", "Note", "Information")


@dataclass(frozen=True)
class StockSeries:
    """Closing prices and simple returns for one symbol, oldest first."""

    symbol: str
    prices: pd.Series
    returns: pd.Series

    @property
    def last_price(self) -> float:
        if self.prices.empty:
            raise DataQualityError(f"No prices available for {self.symbol}")
        return float(self.prices.iloc[-1])


def normalize_symbol(symbol: object) -> str:
    """Strip and upper-case a ticker symbol.

    Raises:
        InvalidInputError: If the symbol is not a non-empty string
    """
    if not isinstance(symbol, str) or not symbol.strip():
        raise InvalidInputError(f"Ticker symbol must be a non-empty string, got {symbol!r}")
    return symbol.strip().upper()


def parse_daily_closes(payload: object, symbol: str) -> pd.Series:
    """Extract a chronologically sorted close series from a decoded response.

    Raises:
        ApiError: If the payload carries an API error or rate-limit message
        ParseError: If the time series or a close field is missing or malformed
        DataQualityError: If the time series holds no observations
    """
    if not isinstance(payload, dict):
        raise ParseError(f"Unexpected response for {symbol}: top level is not an object")

    daily = payload.get(TIME_SERIES_KEY)
    if daily is None:
        for key in API_MESSAGE_KEYS:
            if key in payload:
                raise ApiError(f"API error for {symbol}: {payload[key]}")
        raise ParseError(f"Response for {symbol} has no '{TIME_SERIES_KEY}' section")
    if not isinstance(daily, dict):
        raise ParseError(f"'{TIME_SERIES_KEY}' for {symbol} is not an object")
    if not daily:
        raise DataQualityError(f"No observations returned for {symbol}")

    closes: dict[str, float] = {}
    for date, record in daily.items():
        if not isinstance(record, dict) or CLOSE_KEY not in record:
            raise ParseError(f"Record {date} for {symbol} has no '{CLOSE_KEY}' field")
        try:
            closes[date] = float(record[CLOSE_KEY])
        except (TypeError, ValueError) as e:
            raise ParseError(f"Invalid close price on {date} for {symbol}: {record[CLOSE_KEY]!r}") from e

    try:
        index = pd.to_datetime(list(closes.keys()), format="%Y-%m-%d")
    except (TypeError, ValueError) as e:
        raise ParseError(f"Invalid date key in response for {symbol}") from e

    # Key order of the response is not guaranteed; sort explicitly
    prices = pd.Series(list(closes.values()), index=index, dtype=np.float64, name="close")
    prices.index.name = "date"
    return prices.sort_index()


def compute_simple_returns(prices: pd.Series) -> pd.Series:
    """Calculate simple returns (p[i] - p[i-1]) / p[i-1].

    Returns:
        pd.Series: One return per consecutive pair, indexed by the later date

    Raises:
        DataQualityError: If any price is missing, zero or negative
    """
    prices = pd.Series(prices, dtype=np.float64)
    if prices.isna().any() or prices.le(0).any():
        raise DataQualityError("Invalid price data (contains zeros, negatives or NaNs)")

    values = prices.to_numpy()
    returns = (values[1:] - values[:-1]) / values[:-1]
    return pd.Series(returns, index=prices.index[1:], dtype=np.float64, name="return")


def fetch_daily_closes(
    symbol: str,
    api_key: str,
    *,
    base_url: str,
    timeout: float,
    outputsize: str = "compact",
) -> pd.Series:
    """Fetch one symbol's daily closing prices with a single blocking request.

    Raises:
        NetworkError: If the request fails, times out or returns a non-2xx status
        ParseError: If the body is not valid JSON of the expected shape
    """
    params = {
        "function": "TIME_SERIES_DAILY",
        "symbol": symbol,
        "outputsize": outputsize,
        "apikey": api_key,
    }
    logger.info("Fetching daily prices for %s", symbol)

    try:
        response = requests.get(base_url, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise NetworkError(f"Request for {symbol} failed: {e}") from e

    with response:
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise NetworkError(f"Request for {symbol} returned HTTP {response.status_code}") from e
        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError(f"Failed to parse JSON response for {symbol}") from e

    prices = parse_daily_closes(payload, symbol)
    logger.debug("Parsed %d closes for %s", len(prices), symbol)
    return prices


def fetch_stock_data(symbols: Iterable[str], settings: Settings) -> dict[str, StockSeries]:
    """Fetch prices and returns for each symbol, sequentially.

    Every symbol gets its own StockSeries. The first failure propagates and
    nothing is returned for the symbols already fetched.

    Returns:
        dict: Symbol to StockSeries, in request order
    """
    normalized: list[str] = []
    for symbol in symbols:
        ticker = normalize_symbol(symbol)
        if ticker in normalized:
            logger.warning("Duplicate symbol %s ignored", ticker)
            continue
        normalized.append(ticker)

    if not normalized:
        raise InvalidInputError("At least one ticker symbol is required")

    results: dict[str, StockSeries] = {}
    for ticker in normalized:
        prices = fetch_daily_closes(
            ticker,
            settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            outputsize=settings.outputsize,
        )
        returns = compute_simple_returns(prices)
        results[ticker] = StockSeries(symbol=ticker, prices=prices, returns=returns)
        logger.info("%s: %d prices, %d returns", ticker, len(prices), len(returns))

    return results

"""Shared builders for fake API payloads and price series."""

import pandas as pd

from stockbot.fetch_stocks import StockSeries, compute_simple_returns


def make_payload(closes, start="2024-01-02", symbol="ABC"):
    """Build a TIME_SERIES_DAILY payload, newest date first like the real API."""
    dates = pd.bdate_range(start=start, periods=len(closes))
    records = {}
    for date, close in reversed(list(zip(dates, closes))):
        records[date.strftime("%Y-%m-%d")] = {
            "1. open": f"{close:.4f}",
            "2. high": f"{close:.4f}",
            "3. low": f"{close:.4f}",
            "4. close": f"{close:.4f}",
            "5. volume": "1000",
        }
    return {
        "Meta Data": {"1. Information": "Daily Prices", "2. Symbol": symbol},
        "Time Series (Daily)": records,
    }


def make_series(prices, symbol="ABC", start="2024-01-02"):
    index = pd.bdate_range(start=start, periods=len(prices), name="date")
    closes = pd.Series(prices, index=index, dtype="float64", name="close")
    return StockSeries(symbol=symbol, prices=closes, returns=compute_simple_returns(closes))

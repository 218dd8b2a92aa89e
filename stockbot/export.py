"""CSV export of fetched price series."""

import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

import pandas as pd

from stockbot.exceptions import OutputError
from stockbot.fetch_stocks import StockSeries

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["symbol", "date", "close", "return"]


def series_to_frame(series_by_symbol: Mapping[str, StockSeries]) -> pd.DataFrame:
    """Stack every symbol's closes and returns into one long-format frame.

    The first row of each symbol has no return.
    """
    frames = []
    for symbol, series in series_by_symbol.items():
        frame = pd.DataFrame({"close": series.prices, "return": series.returns})
        frame.index.name = "date"
        frame = frame.reset_index()
        frame.insert(0, "symbol", symbol)
        frames.append(frame)

    if not frames:
        return pd.DataFrame(columns=CSV_COLUMNS)
    result = pd.concat(frames, ignore_index=True)
    result["date"] = pd.to_datetime(result["date"]).dt.strftime("%Y-%m-%d")
    return result[CSV_COLUMNS]


def _discard(tmp_name: str) -> None:
    if os.path.exists(tmp_name):
        os.unlink(tmp_name)


def write_csv(series_by_symbol: Mapping[str, StockSeries], path: str | os.PathLike) -> Path:
    """Write all series to ``path`` atomically.

    The frame is written to a temporary file in the target directory and moved
    into place, so an interrupted write never leaves a partial CSV.

    Raises:
        OutputError: If the file cannot be written
    """
    target = Path(path)
    frame = series_to_frame(series_by_symbol)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    except OSError as e:
        raise OutputError(f"Cannot write CSV to {target}: {e}") from e

    try:
        with os.fdopen(fd, "w", newline="", encoding="utf-8") as fh:
            frame.to_csv(fh, index=False)
        os.replace(tmp_name, target)
    except OSError as e:
        _discard(tmp_name)
        raise OutputError(f"Cannot write CSV to {target}: {e}") from e
    except BaseException:
        _discard(tmp_name)
        raise

    logger.info("Wrote %d rows to %s", len(frame), target)
    return target

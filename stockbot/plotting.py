from collections.abc import Mapping, Sequence

import pandas as pd

from stockbot.fetch_stocks import StockSeries
from stockbot.predictor import Prediction


def plot_predictions(
    series_by_symbol: Mapping[str, StockSeries],
    predictions: Sequence[Prediction],
    show: bool = True,
):
    """
    Plot historical closes with the projected price for each symbol.

    Args:
        series_by_symbol: Fetched series keyed by symbol
        predictions: One Prediction per symbol to mark on its chart
        show: Call plt.show() once the figure is drawn

    Returns:
        The matplotlib Figure

    Raises:
        ValueError: If there is nothing to plot
        ImportError: If matplotlib is not installed
    """
    if not predictions:
        raise ValueError("No predictions to plot")

    missing = [p.symbol for p in predictions if p.symbol not in series_by_symbol]
    if missing:
        raise ValueError(f"No price series for: {', '.join(missing)}")

    try:
        import matplotlib.dates as mdates
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise ImportError("Plotting requires matplotlib. Install with: pip install matplotlib") from e

    fig, axes = plt.subplots(len(predictions), 1, figsize=(12, 4 * len(predictions)), squeeze=False)

    for ax, prediction in zip(axes[:, 0], predictions):
        prices = series_by_symbol[prediction.symbol].prices
        last_date = prices.index[-1]
        target_date = last_date + pd.offsets.BDay(prediction.days)

        ax.plot(prices.index, prices.values, "b-", linewidth=2, label="Historical")
        ax.plot(
            [last_date, target_date],
            [prediction.last_price, prediction.predicted_price],
            "r--",
            marker="o",
            label=f"Projected: ${prediction.predicted_price:.2f}",
        )
        ax.set_title(f"{prediction.symbol} - {prediction.days} Day Projection ({prediction.trend_model} trend)")
        ax.set_xlabel("Date")
        ax.set_ylabel("Price ($)")
        ax.legend()
        ax.grid(True, alpha=0.3)
        ax.xaxis.set_major_formatter(mdates.DateFormatter("%Y-%m-%d"))
        plt.setp(ax.xaxis.get_majorticklabels(), rotation=45)

    fig.tight_layout()
    if show:
        plt.show()
    return fig

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence

from stockbot.config import LOG_LEVELS, load_settings
from stockbot.exceptions import OutputError, StockbotError
from stockbot.export import write_csv
from stockbot.fetch_stocks import fetch_stock_data
from stockbot.logging_config import setup_logging
from stockbot.predictor import TREND_MODELS, StockPredictor

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stockbot",
        description="Fetch daily closing prices, fit a return trend and project a future price.",
    )
    parser.add_argument(
        "--tickers",
        "-t",
        nargs="*",
        help="Ticker symbols (e.g. IBM MSFT). Defaults to STOCKBOT_SYMBOLS.",
    )
    parser.add_argument(
        "--days",
        "-d",
        type=int,
        default=None,
        help="Projection horizon in days (default: STOCKBOT_HORIZON_DAYS or 1)",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="CSV file for the fetched series (default: STOCKBOT_OUTPUT_FILE or stockData.csv)",
    )
    parser.add_argument(
        "--no-csv",
        action="store_true",
        help="Do not write the CSV file",
    )
    parser.add_argument(
        "--plot",
        "-p",
        action="store_true",
        help="Plot the series and projections (requires matplotlib)",
    )
    parser.add_argument(
        "--trend-model",
        choices=TREND_MODELS,
        default="self",
        help="Trend fit: 'self' regresses returns on themselves, 'day_index' on time (default: self)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: STOCKBOT_TIMEOUT or 10)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: STOCKBOT_LOG_LEVEL or INFO)",
    )
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    """Run the whole pipeline; StockbotError propagates to the caller."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or "INFO")

    settings = load_settings()
    overrides = {}
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.output is not None:
        overrides["output_file"] = args.output
    if args.days is not None:
        overrides["horizon_days"] = args.days
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    setup_logging(settings.log_level)

    symbols = args.tickers if args.tickers else list(settings.symbols)
    if not symbols:
        print("No ticker provided. Use --tickers or set STOCKBOT_SYMBOLS.", file=sys.stderr)
        return 1

    # Everything is fetched and projected before any output is written
    series_by_symbol = fetch_stock_data(symbols, settings)
    predictors = [StockPredictor(series, trend_model=args.trend_model) for series in series_by_symbol.values()]
    predictions = [predictor.predict(settings.horizon_days) for predictor in predictors]

    for predictor, prediction in zip(predictors, predictions):
        predictor.print_prediction(prediction)

    if not args.no_csv:
        path = write_csv(series_by_symbol, settings.output_file)
        print(f"\nSaved price series to {path}")

    if args.plot:
        try:
            from stockbot.plotting import plot_predictions

            plot_predictions(series_by_symbol, predictions)
        except (ImportError, ValueError) as e:
            raise OutputError(f"Could not plot projections: {e}") from e

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    try:
        return run(argv)
    except StockbotError as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

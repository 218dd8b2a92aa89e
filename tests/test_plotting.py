"""
Tests for the projection charts.
"""

# type: ignore  # Ignore type checking for this test file
from unittest import TestCase

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402

from stockbot.plotting import plot_predictions  # noqa: E402
from stockbot.predictor import StockPredictor  # noqa: E402
from tests.helpers import make_series  # noqa: E402


class TestPlotPredictions(TestCase):
    def setUp(self):
        self.series_by_symbol = {
            "AAA": make_series([100.0, 105.0, 112.0], symbol="AAA"),
            "BBB": make_series([10.0, 11.0, 10.5, 10.8], symbol="BBB"),
        }
        self.predictions = [StockPredictor(s).predict(1) for s in self.series_by_symbol.values()]

    def tearDown(self):
        plt.close("all")

    def test_one_axis_per_symbol(self):
        fig = plot_predictions(self.series_by_symbol, self.predictions, show=False)
        self.assertEqual(len(fig.axes), 2)
        self.assertIn("AAA", fig.axes[0].get_title())
        self.assertIn("BBB", fig.axes[1].get_title())

    def test_projection_lands_on_a_business_day(self):
        prediction = StockPredictor(self.series_by_symbol["AAA"]).predict(2)

        fig = plot_predictions(self.series_by_symbol, [prediction], show=False)

        projected = fig.axes[0].lines[1].get_xdata()
        # Thursday 2024-01-04 plus two trading days is Monday 2024-01-08
        self.assertEqual(pd.Timestamp(projected[1]), pd.Timestamp("2024-01-08"))

    def test_no_predictions(self):
        with self.assertRaises(ValueError):
            plot_predictions(self.series_by_symbol, [], show=False)

    def test_missing_series(self):
        with self.assertRaises(ValueError):
            plot_predictions({"AAA": self.series_by_symbol["AAA"]}, self.predictions, show=False)


if __name__ == "__main__":
    pytest.main()

"""
Tests for the CSV export of fetched series.
"""

# type: ignore  # Ignore type checking for this test file
import os
import tempfile
from pathlib import Path
from unittest import TestCase, mock

import pandas as pd
import pytest

from stockbot import export as export_mod
from stockbot.exceptions import OutputError
from tests.helpers import make_series


class TestExport(TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.series_by_symbol = {
            "AAA": make_series([100.0, 110.0, 99.0], symbol="AAA"),
            "BBB": make_series([20.0, 21.0], symbol="BBB"),
        }

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_frame_layout(self):
        frame = export_mod.series_to_frame(self.series_by_symbol)

        self.assertEqual(list(frame.columns), ["symbol", "date", "close", "return"])
        self.assertEqual(len(frame), 5)
        self.assertEqual(list(frame["symbol"]), ["AAA", "AAA", "AAA", "BBB", "BBB"])
        self.assertEqual(frame["date"].iloc[0], "2024-01-02")
        self.assertTrue(pd.isna(frame["return"].iloc[0]))
        self.assertAlmostEqual(frame["return"].iloc[1], 0.1)
        self.assertAlmostEqual(frame["return"].iloc[4], 0.05)

    def test_empty_mapping(self):
        frame = export_mod.series_to_frame({})
        self.assertTrue(frame.empty)
        self.assertEqual(list(frame.columns), export_mod.CSV_COLUMNS)

    def test_write_csv(self):
        path = Path(self.tmpdir.name) / "nested" / "stockData.csv"

        written = export_mod.write_csv(self.series_by_symbol, path)

        self.assertEqual(written, path)
        frame = pd.read_csv(path)
        self.assertEqual(list(frame.columns), ["symbol", "date", "close", "return"])
        self.assertEqual(len(frame), 5)
        self.assertEqual(os.listdir(path.parent), ["stockData.csv"])

    def test_failed_write_leaves_no_file(self):
        path = Path(self.tmpdir.name) / "stockData.csv"

        with mock.patch.object(pd.DataFrame, "to_csv", side_effect=OSError("disk full")):
            with self.assertRaises(OutputError):
                export_mod.write_csv(self.series_by_symbol, path)

        self.assertEqual(os.listdir(self.tmpdir.name), [])

    def test_directory_as_target(self):
        target = Path(self.tmpdir.name) / "out"
        target.mkdir()

        with self.assertRaises(OutputError):
            export_mod.write_csv(self.series_by_symbol, target)

        self.assertEqual(os.listdir(self.tmpdir.name), ["out"])
        self.assertEqual(os.listdir(target), [])


if __name__ == "__main__":
    pytest.main()

"""
Test suite for stockbot

This package contains all unit and integration tests for the stockbot package.

Test modules:
- test_fetch_stocks: Price download, parsing and return calculation
- test_regression: Ordinary least squares estimators
- test_stock_predictor: StockPredictor and price projection
- test_config: Settings loaded from the environment
- test_export: CSV export of fetched series
- test_plotting: Projection charts
- test_cli: End-to-end runs of the command line entry point

Running tests:
    pytest                          # Run all tests
    pytest -v                       # Verbose output
    pytest --cov=stockbot           # With coverage report
    pytest -k "regression"          # Run tests matching "regression"
"""

import sys
from pathlib import Path

# Add parent directory to path for imports during testing
# This ensures tests can import from stockbot regardless of where pytest is run
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

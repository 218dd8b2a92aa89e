"""Exception hierarchy for stockbot.

Library code raises these; only the command line entry point decides how a
failure ends the run.
"""


class StockbotError(Exception):
    """Base class for all stockbot errors."""


class NetworkError(StockbotError):
    """Raised when the upstream request fails (connection, timeout, non-2xx)."""


class ParseError(StockbotError):
    """Raised when a response body is not the expected structured data."""


class ApiError(ParseError):
    """Raised when the API answers with an error payload instead of a time series."""


class InvalidInputError(StockbotError, ValueError):
    """Raised for malformed caller input, e.g. sequences of different lengths."""


class DegenerateInputError(StockbotError, ValueError):
    """Raised when a regression input has zero variance or too few points."""


class DataQualityError(StockbotError, ValueError):
    """Raised when fetched prices are empty, missing, zero or negative."""


class ConfigError(StockbotError):
    """Raised when required configuration is missing or malformed."""


class OutputError(StockbotError):
    """Raised when the CSV file or the plot cannot be produced."""

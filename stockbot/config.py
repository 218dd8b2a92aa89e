"""Runtime configuration loaded from the environment and an optional .env file."""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from stockbot.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"
DEFAULT_OUTPUT_FILE = "stockData.csv"
DEFAULT_TIMEOUT = 10.0  # seconds per request
DEFAULT_HORIZON_DAYS = 1
OUTPUT_SIZES = ("compact", "full")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Settings for one run. The API key is excluded from repr."""

    api_key: str = field(repr=False)
    symbols: tuple[str, ...] = ()
    output_file: str = DEFAULT_OUTPUT_FILE
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    outputsize: str = "compact"
    horizon_days: int = DEFAULT_HORIZON_DAYS
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigError("ALPHAVANTAGE_API_KEY is not set")
        if self.timeout <= 0:
            raise ConfigError(f"Timeout must be positive, got {self.timeout}")
        if self.outputsize not in OUTPUT_SIZES:
            raise ConfigError(f"outputsize must be one of {', '.join(OUTPUT_SIZES)}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")


def parse_symbols(raw: str) -> tuple[str, ...]:
    """Split a comma-separated symbol list, dropping blanks."""
    return tuple(s.strip().upper() for s in raw.split(",") if s.strip())


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def load_settings(env_file: str | None = None) -> Settings:
    """Build Settings from environment variables.

    Values from ``env_file`` (or a ``.env`` found from the working directory)
    are loaded first without overriding variables already set.

    Raises:
        ConfigError: If the API key is missing or a value is malformed
    """
    if env_file is not None:
        loaded = load_dotenv(env_file, override=False)
    else:
        loaded = load_dotenv(override=False)
    if loaded:
        logger.debug("Loaded environment from .env file")

    return Settings(
        api_key=os.getenv("ALPHAVANTAGE_API_KEY", "").strip(),
        symbols=parse_symbols(os.getenv("STOCKBOT_SYMBOLS", "")),
        output_file=os.getenv("STOCKBOT_OUTPUT_FILE", DEFAULT_OUTPUT_FILE),
        base_url=os.getenv("STOCKBOT_BASE_URL", DEFAULT_BASE_URL),
        timeout=_env_float("STOCKBOT_TIMEOUT", DEFAULT_TIMEOUT),
        outputsize=os.getenv("STOCKBOT_OUTPUTSIZE", "compact").strip().lower(),
        horizon_days=_env_int("STOCKBOT_HORIZON_DAYS", DEFAULT_HORIZON_DAYS),
        log_level=os.getenv("STOCKBOT_LOG_LEVEL", "INFO").strip().upper(),
    )

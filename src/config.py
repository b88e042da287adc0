"""Runtime configuration for userdir."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from constants import (
    API_URL,
    DEFAULT_PAGE_SIZE,
    ENV_API_URL,
    ENV_PAGE_SIZE,
    ENV_TIMEOUT,
    FETCH_TIMEOUT,
    PAGE_SIZES,
)

log = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration value is unusable."""


@dataclass
class DirectoryConfig:
    """Where users come from and how the table starts out."""

    api_url: str = API_URL
    data_file: Path | None = None  # Local JSON file instead of the API
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = FETCH_TIMEOUT

    @property
    def source(self) -> str:
        """Human-readable description of the data source."""
        return str(self.data_file) if self.data_file else self.api_url


def _parse_page_size(value: str | int) -> int:
    try:
        size = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid page size: {value!r}") from None
    if size not in PAGE_SIZES:
        choices = ", ".join(str(n) for n in PAGE_SIZES)
        raise ConfigError(f"Page size must be one of {choices} (got {size})")
    return size


def _parse_timeout(value: str | float) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid timeout: {value!r}") from None
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive (got {timeout})")
    return timeout


def load_config(
    api_url: str | None = None,
    data_file: str | Path | None = None,
    page_size: str | int | None = None,
    timeout: str | float | None = None,
) -> DirectoryConfig:
    """Build a DirectoryConfig.

    Explicit arguments (usually from the command line) win, then the
    USERDIR_* environment variables, then the defaults in constants.

    Raises:
        ConfigError: If the page size or timeout is invalid.
    """
    url = api_url or os.environ.get(ENV_API_URL) or API_URL

    if page_size is None:
        page_size = os.environ.get(ENV_PAGE_SIZE, DEFAULT_PAGE_SIZE)
    if timeout is None:
        timeout = os.environ.get(ENV_TIMEOUT, FETCH_TIMEOUT)

    path = Path(data_file).expanduser() if data_file else None

    config = DirectoryConfig(
        api_url=url,
        data_file=path,
        page_size=_parse_page_size(page_size),
        timeout=_parse_timeout(timeout),
    )
    log.debug(f"Loaded config: {config}")
    return config

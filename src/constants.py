"""Shared constants for userdir."""

USERDIR_VERSION = "0.3.0"

# Remote user source (read-only; edits never go back to it)
API_URL = "https://jsonplaceholder.typicode.com/users"
FETCH_TIMEOUT = 10  # seconds

# Rows-per-page choices offered in the pagination footer
PAGE_SIZES = (5, 10, 25, 50)
DEFAULT_PAGE_SIZE = 10

# Environment overrides read by config.load_config
ENV_API_URL = "USERDIR_API_URL"
ENV_PAGE_SIZE = "USERDIR_PAGE_SIZE"
ENV_TIMEOUT = "USERDIR_TIMEOUT"

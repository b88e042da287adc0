"""Fetch user records from the remote directory API."""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request
from pathlib import Path
from typing import TYPE_CHECKING, Any

from constants import API_URL, FETCH_TIMEOUT, USERDIR_VERSION
from model import UserRecord

if TYPE_CHECKING:
    from config import DirectoryConfig

log = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when users cannot be fetched or the payload is malformed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load users from {source}: {reason}")
        self.source = source
        self.reason = reason


def parse_user(item: Any) -> UserRecord:
    """Map one API object to a UserRecord.

    Expected shape: {"id": 1, "name": "...", "email": "...", "company": {"name": "..."}}

    Raises:
        ValueError: If a required key is missing or has the wrong type.
    """
    if not isinstance(item, dict):
        raise ValueError(f"expected an object, got {type(item).__name__}")

    user_id = item.get("id")
    # bool is an int subclass; reject it explicitly
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise ValueError(f"missing or non-integer id: {user_id!r}")

    name = item.get("name")
    email = item.get("email")
    if not isinstance(name, str) or not isinstance(email, str):
        raise ValueError(f"user {user_id}: name and email must be strings")

    company = item.get("company") or {}
    department = company.get("name") if isinstance(company, dict) else None
    if department is None:
        department = ""

    return UserRecord(
        id=user_id,
        full_name=name.strip(),
        email=email.strip(),
        department=str(department).strip(),
    )


def parse_users(payload: Any, source: str) -> list[UserRecord]:
    """Map a decoded JSON array to UserRecords.

    Raises:
        FetchError: If the payload is not a list of well-formed user objects.
    """
    if not isinstance(payload, list):
        raise FetchError(source, f"expected a JSON array, got {type(payload).__name__}")
    try:
        users = [parse_user(item) for item in payload]
    except ValueError as e:
        raise FetchError(source, str(e)) from e

    seen: set[int] = set()
    for user in users:
        if user.id in seen:
            raise FetchError(source, f"duplicate user id: {user.id}")
        seen.add(user.id)
    return users


def fetch_users(url: str = API_URL, timeout: float = FETCH_TIMEOUT) -> list[UserRecord]:
    """GET the user list from the API.

    Args:
        url: Endpoint returning a JSON array of users
        timeout: Socket timeout in seconds

    Returns:
        Records in the order the API returned them

    Raises:
        FetchError: On network, HTTP, decode or shape failure. No retry is attempted.
    """
    log.info(f"Fetching users from {url}")
    try:
        req = urllib.request.Request(
            url,
            headers={
                "Accept": "application/json",
                "User-Agent": f"userdir/{USERDIR_VERSION}",
            },
        )
        with urllib.request.urlopen(req, timeout=timeout) as response:
            body = response.read()
    except urllib.error.HTTPError as e:
        log.error(f"HTTP {e.code} from {url}")
        raise FetchError(url, f"HTTP {e.code} {e.reason}") from e
    except (urllib.error.URLError, OSError) as e:
        log.error(f"Network error fetching {url}: {e}")
        raise FetchError(url, str(getattr(e, "reason", e))) from e
    except (ValueError, http.client.HTTPException) as e:
        # Malformed URL or a truncated / garbled response
        log.error(f"Bad request or response for {url}: {e!r}")
        raise FetchError(url, str(e) or type(e).__name__) from e

    try:
        payload = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise FetchError(url, f"invalid JSON: {e}") from e

    users = parse_users(payload, url)
    log.info(f"Fetched {len(users)} users")
    return users


def load_users_file(path: Path) -> list[UserRecord]:
    """Read users from a local JSON file in the API's format.

    Raises:
        FetchError: If the file is unreadable or malformed.
    """
    source = str(path)
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise FetchError(source, e.strerror or str(e)) from e
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise FetchError(source, f"invalid JSON: {e}") from e
    users = parse_users(payload, source)
    log.info(f"Loaded {len(users)} users from {source}")
    return users


def load_users(config: DirectoryConfig) -> list[UserRecord]:
    """Load users from the configured source: local file if set, else the API.

    Raises:
        FetchError: If the source cannot be read.
    """
    if config.data_file is not None:
        return load_users_file(config.data_file)
    return fetch_users(config.api_url, config.timeout)

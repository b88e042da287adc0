"""Shared fixtures for userdir tests."""

import copy

import pytest

from controller import DirectoryController
from model import UserRecord, ViewState
from store import UserStore


# Shape returned by the remote API (trimmed to the fields we read)
API_USERS = [
    {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "company": {"name": "Romaguera-Crona", "catchPhrase": "Multi-layered"},
    },
    {
        "id": 2,
        "name": "Ervin Howell",
        "username": "Antonette",
        "email": "Shanna@melissa.tv",
        "company": {"name": "Deckow-Crist"},
    },
    {
        "id": 3,
        "name": "Clementine Bauch",
        "username": "Samantha",
        "email": "Nathan@yesenia.net",
        "company": {"name": "Romaguera-Jacobson"},
    },
    {
        "id": 4,
        "name": "Patricia Lebsack",
        "username": "Karianne",
        "email": "Julianne.OConner@kory.org",
        "company": {"name": "Robel-Corkery"},
    },
    {
        "id": 5,
        "name": "Mrs. Dennis Schulist",
        "username": "Kamren",
        "email": "Karley_Dach@jasper.info",
        "company": {"name": "Keebler LLC"},
    },
]


class RecordingSurface:
    """DirectorySurface that records every call instead of drawing."""

    def __init__(self, confirm_answer: bool = True) -> None:
        self.confirm_answer = confirm_answer
        self.renders = []
        self.notices = []
        self.prompts = []
        self.form = None
        self.invalid = []

    def render_projection(self, projection, view):
        self.renders.append(projection)

    def show_notice(self, message, error=False):
        self.notices.append((message, error))

    def confirm(self, message, on_result):
        self.prompts.append(message)
        on_result(self.confirm_answer)

    def open_form(self, title, draft):
        self.form = (title, draft)

    def close_form(self):
        self.form = None
        self.invalid = []

    def mark_invalid(self, fields):
        self.invalid = list(fields)

    @property
    def last(self):
        """Most recent projection rendered."""
        return self.renders[-1]

    @property
    def last_notice(self):
        return self.notices[-1]


@pytest.fixture
def api_payload():
    """Fresh copy of the API payload (tests may mutate it)."""
    return copy.deepcopy(API_USERS)


@pytest.fixture
def users():
    """UserRecords matching API_USERS."""
    return [
        UserRecord(id=u["id"], full_name=u["name"], email=u["email"], department=u["company"]["name"])
        for u in API_USERS
    ]


@pytest.fixture
def store(users):
    """Store pre-loaded with the sample users."""
    return UserStore(users)


@pytest.fixture
def surface():
    """Surface that answers yes to confirmations."""
    return RecordingSurface()


@pytest.fixture
def controller(surface, store):
    """Controller over the sample store, 10 rows per page, already rendered once."""
    ctrl = DirectoryController(surface, store=store, view=ViewState(rows_per_page=10))
    ctrl.refresh()
    return ctrl


@pytest.fixture
def mock_env(monkeypatch):
    """Clean environment for config tests."""
    monkeypatch.delenv("USERDIR_API_URL", raising=False)
    monkeypatch.delenv("USERDIR_PAGE_SIZE", raising=False)
    monkeypatch.delenv("USERDIR_TIMEOUT", raising=False)

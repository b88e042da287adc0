"""In-memory user store."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from form_validators import describe_missing, missing_fields
from model import UserDraft, UserRecord

log = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when a draft is missing required fields."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Please fill in all fields (missing: {describe_missing(missing)})")
        self.missing = missing


class NotFoundError(Exception):
    """Raised when an edit or delete targets an id that is not in the store."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class DuplicateIdError(Exception):
    """Raised when a loaded list holds the same id more than once."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"Duplicate user id: {user_id}")
        self.user_id = user_id


def _validated(draft: UserDraft) -> UserDraft:
    missing = missing_fields(draft)
    if missing:
        raise ValidationError(missing)
    return draft.stripped()


class UserStore:
    """Authoritative list of users for the session.

    The list itself is never reordered or filtered in place; display order
    comes from projection.project.
    """

    def __init__(self, records: Iterable[UserRecord] = ()) -> None:
        self._records: list[UserRecord] = list(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[UserRecord]:
        return iter(self._records)

    def __contains__(self, user_id: object) -> bool:
        return any(r.id == user_id for r in self._records)

    @property
    def records(self) -> tuple[UserRecord, ...]:
        """Snapshot of the records in store order."""
        return tuple(self._records)

    def get(self, user_id: int) -> UserRecord:
        """Look up a record by id.

        Raises:
            NotFoundError: If no record has this id.
        """
        for record in self._records:
            if record.id == user_id:
                return record
        raise NotFoundError(user_id)

    def next_id(self) -> int:
        """Next free id: one past the largest id in use.

        Unlike len + 1, this never hands out an id that is still in use
        after deletions.
        """
        return max((r.id for r in self._records), default=0) + 1

    def replace(self, records: Iterable[UserRecord]) -> None:
        """Swap in a freshly loaded list.

        Raises:
            DuplicateIdError: If two records share an id (store unchanged).
        """
        incoming = list(records)
        seen: set[int] = set()
        for record in incoming:
            if record.id in seen:
                raise DuplicateIdError(record.id)
            seen.add(record.id)
        self._records[:] = incoming
        log.info(f"Store replaced: {len(self._records)} users")

    def add(self, draft: UserDraft) -> UserRecord:
        """Validate a draft and append it as a new record.

        Raises:
            ValidationError: If any field is blank.
        """
        clean = _validated(draft)
        record = UserRecord(
            id=self.next_id(),
            full_name=clean.full_name,
            email=clean.email,
            department=clean.department,
        )
        self._records.append(record)
        log.info(f"Added user {record}")
        return record

    def update(self, user_id: int, draft: UserDraft) -> UserRecord:
        """Overwrite name, email and department of an existing record.

        Raises:
            ValidationError: If any field is blank (store unchanged).
            NotFoundError: If the id is not in the store (store unchanged).
        """
        clean = _validated(draft)
        record = self.get(user_id)
        record.full_name = clean.full_name
        record.email = clean.email
        record.department = clean.department
        log.info(f"Updated user {record}")
        return record

    def remove(self, user_id: int) -> UserRecord:
        """Delete a record.

        Raises:
            NotFoundError: If the id is not in the store.
        """
        record = self.get(user_id)
        self._records.remove(record)
        log.info(f"Removed user {record}")
        return record

"""User record and form draft models."""

from dataclasses import dataclass, replace
from typing import ClassVar


def split_full_name(full_name: str) -> tuple[str, str]:
    """Split a full name at the first whitespace boundary.

    "Ada Lovelace" -> ("Ada", "Lovelace")
    "Mrs. Dennis Schulist" -> ("Mrs.", "Dennis Schulist")
    "Cher" -> ("Cher", "")
    """
    parts = full_name.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


@dataclass
class UserRecord:
    """A user in the directory."""

    id: int
    full_name: str
    email: str
    department: str

    @property
    def first_name(self) -> str:
        return split_full_name(self.full_name)[0]

    @property
    def last_name(self) -> str:
        return split_full_name(self.full_name)[1]

    def __str__(self) -> str:
        return f"#{self.id} {self.full_name} <{self.email}>"


@dataclass
class UserDraft:
    """Values entered in the add/edit form."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    department: str = ""

    # Field order as shown in the form
    FIELDS: ClassVar[tuple[str, ...]] = ("first_name", "last_name", "email", "department")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def stripped(self) -> "UserDraft":
        """Return a copy with surrounding whitespace removed from every field."""
        return replace(
            self,
            first_name=self.first_name.strip(),
            last_name=self.last_name.strip(),
            email=self.email.strip(),
            department=self.department.strip(),
        )

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserDraft":
        """Pre-fill a draft for editing an existing record."""
        first, last = split_full_name(record.full_name)
        return cls(
            first_name=first,
            last_name=last,
            email=record.email,
            department=record.department,
        )

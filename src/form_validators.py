"""Presence validation for the add/edit user form."""

from model import UserDraft

FIELD_LABELS = {
    "first_name": "First Name",
    "last_name": "Last Name",
    "email": "Email",
    "department": "Department",
}


def missing_fields(draft: UserDraft) -> list[str]:
    """Return the draft fields that are blank after trimming.

    Only presence is checked. Email format is not validated.

    Args:
        draft: Values from the form

    Returns:
        Field names in form order; empty if every field is filled in
    """
    return [name for name in UserDraft.FIELDS if not getattr(draft, name).strip()]


def describe_missing(fields: list[str]) -> str:
    """Format missing field names for a notice, e.g. "Email, Department"."""
    return ", ".join(FIELD_LABELS.get(name, name) for name in fields)

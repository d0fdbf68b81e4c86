import re
from typing import Any

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.]+$")


def normalize_username(value: str) -> str:
    value = value.strip()
    if not USERNAME_PATTERN.fullmatch(value):
        raise ValueError(
            "Username may only contain letters, digits, underscores and dots."
        )
    return value


def normalize_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Text must not be empty.")
    return value


def reject_null(value: Any, field_name: str) -> Any:
    # Update fields may be omitted, but not cleared when the column is NOT NULL
    if value is None:
        raise ValueError(f"{field_name} may not be null.")
    return value

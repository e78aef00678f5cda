"""Display formatting for page metadata."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Union

FRENCH_MONTHS = (
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
)


def format_french_date(value: Optional[Union[date, datetime]]) -> str:
    """Long French date, e.g. ``15 janvier 2024``; empty string for None.

    Aware timestamps are read in UTC.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        value = value.date()
    return f"{value.day} {FRENCH_MONTHS[value.month - 1]} {value.year}"

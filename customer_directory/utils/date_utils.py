"""
Date helpers for converting between the display form accepted from users
(``DD/MM/YYYY``) and the canonical form customer records are stored in
(``YYYY-MM-DD``).

Only the shape of a date is checked. ``32/13/2023`` is well formed and
converts to ``2023-13-32``; it simply never equals a stored date.
"""

import re
from typing import Optional

DISPLAY_DATE_PATTERN = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})", re.ASCII)
CANONICAL_DATE_PATTERN = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})", re.ASCII)


def convert_date_format(ddmmyyyy: Optional[str]) -> Optional[str]:
    """
    Convert a ``D/M/YYYY`` or ``DD/MM/YYYY`` string to ``YYYY-MM-DD``.

    Returns None when the input is empty or not in day/month/year form.
    """
    if not ddmmyyyy:
        return None

    match = DISPLAY_DATE_PATTERN.fullmatch(ddmmyyyy)
    if not match:
        return None

    day, month, year = match.groups()
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def is_valid_date_format(date_string: Optional[str]) -> bool:
    """Check whether a string is in day/month/year form"""
    return bool(date_string) and DISPLAY_DATE_PATTERN.fullmatch(date_string) is not None


def convert_to_display_format(yyyymmdd: Optional[str]) -> Optional[str]:
    """Convert a ``YYYY-MM-DD`` string to ``DD/MM/YYYY``, or None if malformed"""
    if not yyyymmdd:
        return None

    match = CANONICAL_DATE_PATTERN.fullmatch(yyyymmdd)
    if not match:
        return None

    year, month, day = match.groups()
    return f"{day.zfill(2)}/{month.zfill(2)}/{year}"

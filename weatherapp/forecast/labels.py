"""Day labels for forecast slots."""

import re
from datetime import date

from weatherapp.models.common import TODAY_LABEL, UNKNOWN_LABEL

# Fixed English abbreviations, independent of the process locale
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def label(date_string: str, is_today: bool) -> str:
    """Return "Today" or the weekday abbreviation of a YYYY-MM-DD date.

    Never raises: unparseable dates yield "???".
    """
    if is_today:
        return TODAY_LABEL
    parsed = _parse_date(date_string)
    if parsed is None:
        return UNKNOWN_LABEL
    return _WEEKDAYS[parsed.weekday()]


def _parse_date(date_string: str) -> date | None:
    """Parse the literal date components of a YYYY-MM-DD string."""
    if not isinstance(date_string, str):
        return None
    match = _DATE_RE.fullmatch(date_string)
    if match is None:
        return None
    try:
        return date(*(int(part) for part in match.groups()))
    except ValueError:
        return None

"""
Short time labels for the sales comparison chart axis.

Accepted input is a timestamp string of the form ``"<date> <time>"``, e.g.
``"2024-05-01 14:30:00"``. The label is the first five characters of the
time token (``"14:30"``). Rules, in order:

- not a string, or empty/blank       -> ``"Unknown"``
- second whitespace token has >= 5 chars -> its first five characters
- anything else                      -> the original string unchanged
"""

from __future__ import annotations

from typing import Any

UNKNOWN_LABEL = "Unknown"
TIME_LABEL_WIDTH = 5  # "HH:MM"


def parse_time_label(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        return UNKNOWN_LABEL

    parts = value.split()
    if len(parts) > 1 and len(parts[1]) >= TIME_LABEL_WIDTH:
        return parts[1][:TIME_LABEL_WIDTH]
    return value

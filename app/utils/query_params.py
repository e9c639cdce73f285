"""
Query string parsing helpers.

Browsers and front ends send all sorts of junk in pagination parameters
(``page=``, ``page=abc``, ``limit=-5``). Rather than rejecting the request,
invalid values fall back to the endpoint defaults.
"""

import re
from typing import Optional

_DIGITS = re.compile(r"[0-9]+")


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """
    Parse a positive integer query parameter.

    Args:
        raw: The raw query string value, or None when absent.
        default: Value used when ``raw`` is missing, non-numeric or < 1.

    Returns:
        The parsed integer, or ``default``.
    """
    if raw is None:
        return default

    raw = raw.strip()
    if not _DIGITS.fullmatch(raw):
        return default

    try:
        value = int(raw)
    except ValueError:
        # digit strings past the interpreter's conversion limit
        return default
    return value if value >= 1 else default

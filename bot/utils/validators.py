"""
Validation utilities module
Contains regex patterns and input cleaning functions
"""

import re
from typing import Optional

# Regex patterns
NON_AMOUNT_RGX = r"[^0-9.]"

DECIMAL_POINT = "."

def sanitize(s: Optional[str]) -> str:
    """
    Clean raw amount text down to digits and a single decimal point

    Only the first decimal point is kept, later ones are dropped
    ("1.2.3" -> "1.23").

    Args:
        s: Raw text as typed by the user

    Returns:
        Cleaned string, empty if nothing valid is left
    """
    if not s:
        return ""

    cleaned = re.sub(NON_AMOUNT_RGX, "", s)
    head, point, tail = cleaned.partition(DECIMAL_POINT)
    return head + point + tail.replace(DECIMAL_POINT, "")

"""Loose boolean reading for Swagger's boolean-ish fields."""

import re

FALSE_RE = re.compile(r"^(n|false|off)", re.IGNORECASE)


def is_true(value) -> bool:
    """Tell if value looks like a boolean true in any way.

    - None is false, bool is itself
    - dict, list and tuple are true
    - numbers are true unless zero
    - strings are false when empty, "0" or starting with n, false or off
      (case-insensitive), true otherwise
    - anything else follows bool()
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (dict, list, tuple)):
        return True
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        if value in ("", "0"):
            return False
        return not FALSE_RE.match(value)
    return bool(value)

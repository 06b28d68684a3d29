"""Value stringification shared by defaults and validation."""

from __future__ import annotations

from typing import Any, Optional


def format_optional(value: Any, empty: Optional[str] = None) -> Optional[str]:
    """Return the string form of ``value``, or ``empty`` when it is None.

    Strings are returned as-is. Booleans are rendered lower-case
    (``true``/``false``) so they match what a form submits back; numbers and
    any other object use ``str()``.
    """
    if value is None:
        return empty
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

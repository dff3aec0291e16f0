"""Case formatting drill."""

from __future__ import annotations


def format_string(text: str, to_upper: bool | None = None) -> str:
    """Upper-case *text* unless *to_upper* is explicitly False.

    An unset flag behaves like ``True``.
    """
    if to_upper is False:
        return text.lower()
    return text.upper()

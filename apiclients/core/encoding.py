"""Path segment and query string encoding."""
from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any, Iterable, Tuple
from urllib.parse import quote


def encode_path(segment: Any) -> str:
    """Percent-encode a value for use as a single URL path segment.

    Everything outside the unreserved set is escaped, including ``/``,
    ``?``, ``#`` and spaces.
    """
    return quote(str(segment), safe="")


def is_unset(value: Any) -> bool:
    """Return True when an optional parameter should be left out of a request.

    ``None``, the empty string, ``False`` and non-positive numbers all count
    as unset: the remote APIs treat an empty value differently from an
    absent one.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal) and value.is_nan():
        return False
    if isinstance(value, (numbers.Real, Decimal)):
        return value <= 0
    return False


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(pairs: Iterable[Tuple[str, Any]]) -> str:
    """Serialize (name, value) pairs into a query string, skipping unset values.

    Args:
        pairs: Wire parameter names and their values, in send order

    Returns:
        ``name=value`` pairs joined with ``&``; empty string when nothing is set
    """
    parts = []
    for name, value in pairs:
        if is_unset(value):
            continue
        parts.append(f"{quote(name, safe='')}={quote(_format_value(value), safe='')}")
    return "&".join(parts)


def join_url(path: str, query: str) -> str:
    """Append a query string to a path, adding ``?`` or ``&`` only when needed."""
    if not query:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"

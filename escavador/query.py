"""Query-string builder for the Escavador API.

- build_query: required pairs first, then every present optional option;
  list options become repeated ``key[]`` pairs.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence
from urllib.parse import urlencode


def _is_absent(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, (list, tuple)) and not value)


def query_pairs(options: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten ``options`` into ordered ``(key, value)`` pairs.

    Absent options (``None``, empty string, empty list) contribute nothing.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in options.items():
        if _is_absent(value):
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[]", str(item)) for item in value)
        else:
            pairs.append((key, str(value)))
    return pairs


def build_query(
    options: Mapping[str, Any],
    required: Sequence[tuple[str, str]] = (),
) -> str:
    """Serialize ``required`` pairs followed by ``options`` into a query string.

    Args:
        options: Optional query options in the order they should be emitted.
        required: Pairs the endpoint always needs; emitted first, verbatim.

    Returns:
        The url-encoded query string, without the leading ``?``.
    """
    return urlencode([*required, *query_pairs(options)])

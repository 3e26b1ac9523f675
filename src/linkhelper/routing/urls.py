"""
URL building utilities - no external dependencies.

Functions for turning routing options into paths and query strings.
"""

__all__ = [
    "build_query_string",
    "join_path",
]

from typing import Any, Iterator, Mapping
from urllib.parse import quote, urlencode


def _query_pairs(key: str, value: Any) -> Iterator[tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            yield from _query_pairs(f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _query_pairs(f"{key}[]", item)
    elif isinstance(value, bool):
        yield key, "true" if value else "false"
    else:
        yield key, str(value)


def build_query_string(params: Mapping[str, Any]) -> str:
    """
    Build the query string for the ``params`` of routing options.

    Nested mappings become bracketed keys (``post[title]``) and lists
    repeat the key with ``[]``, the form request parsers read back into
    the same structure. None values are dropped and bools become
    "true"/"false".

    Returns:
        Query string starting with "?", or empty string if nothing is left

    Example:
        >>> build_query_string({"page": 2, "post": {"tag": "news"}})
        '?page=2&post%5Btag%5D=news'
        >>> build_query_string({"ids": [1, 2], "draft": None})
        '?ids%5B%5D=1&ids%5B%5D=2'
        >>> build_query_string({})
        ''
    """
    pairs = [pair for key, value in params.items() for pair in _query_pairs(str(key), value)]
    if not pairs:
        return ""
    return "?" + urlencode(pairs)


def join_path(*segments: Any) -> str:
    """
    Join path segments into an absolute path, dropping trailing Nones.

    Each segment is percent-encoded.

    Raises:
        ValueError: If a segment follows a missing one, since it would
            land in the wrong position

    Example:
        >>> join_path("pages", "show", 5)
        '/pages/show/5'
        >>> join_path("pages", None, None)
        '/pages'
    """
    segments = list(segments)
    while segments and segments[-1] is None:
        segments.pop()
    if None in segments:
        raise ValueError(f"Missing path segment before {segments[-1]!r}")
    return "/" + "/".join(quote(str(segment), safe="") for segment in segments)

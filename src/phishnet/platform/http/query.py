"""Where: src/phishnet/platform/http/query.py
What: Turn request dataclasses into URL query parameters.
Why: Every endpoint encodes its filters the same way, so declare names once.
"""

from __future__ import annotations

import dataclasses
from datetime import date
from typing import Any

from phishnet.shared.dates import format_date

from .errors import EncodingError

_MISSING: Any = dataclasses.MISSING
_QUERY_KEY: str = "query"


def query_field(name: str, *, default: Any = _MISSING, default_factory: Any = _MISSING) -> Any:
    """Create a dataclass field bound to the query parameter ``name``.

    Args:
        name: Parameter name sent to the API.
        default: Default value, which is also treated as "unset".
        default_factory: Factory for mutable defaults such as lists.

    Returns:
        Field carrying the parameter name in its metadata.
    """
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={_QUERY_KEY: name},
    )


def encode_query(request: object | None) -> list[tuple[str, str]]:
    """Encode the populated fields of ``request`` as ``(name, value)`` pairs.

    Fields holding a zero value (empty string, ``0``, ``False``, ``None`` or an
    empty sequence) are omitted. Sequences repeat the parameter once per item.

    Raises:
        EncodingError: If ``request`` is not a dataclass instance or holds a
            value of an unsupported type.
    """
    if request is None:
        return []
    if not dataclasses.is_dataclass(request) or isinstance(request, type):
        raise EncodingError(
            f"unable to convert {request!r} to URL values: expected a dataclass instance"
        )

    pairs: list[tuple[str, str]] = []
    for f in dataclasses.fields(request):
        name = f.metadata.get(_QUERY_KEY, f.name)
        value = getattr(request, f.name)
        for item in _encode_value(value, name):
            pairs.append((name, item))
    return pairs


def _encode_value(value: Any, name: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, bool):
        return ["true"] if value else []
    if isinstance(value, int):
        return [str(value)] if value else []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, date):
        return [format_date(value)]
    if isinstance(value, (list, tuple)):
        items: list[str] = []
        for item in value:
            if isinstance(item, bool) or not isinstance(item, (str, int)):
                raise EncodingError(
                    f"unable to encode parameter {name!r}: unsupported item type {type(item).__name__}"
                )
            items.append(str(item))
        return items
    raise EncodingError(
        f"unable to encode parameter {name!r}: unsupported type {type(value).__name__}"
    )


__all__ = ["encode_query", "query_field"]

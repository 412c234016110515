# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Build QueryParams from literal objects with loosely typed values.

Example::

    query_object({"rust": True, "ids": [1, 3, 5], "name": "lumi"})
    # QueryParams([('rust', 'true'), ('ids', '1,3,5'), ('name', 'lumi')])

    query_object(page=2, empty=None).stringify()
    # 'page=2&empty=&'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .query_params import QueryParams

__all__ = ["query_object", "to_text"]


def to_text(value: Any) -> str:
    """Coerce a literal value to query string text.

    ``True``/``False`` become ``"true"``/``"false"``; ``None`` and empty
    containers become ``""``; lists and tuples are joined with ``,``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        if value:
            raise TypeError("Nested mappings are not supported as query values")
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(item) for item in value)
    return str(value)


def query_object(obj: Mapping[str, Any] | None = None, **kwargs: Any) -> QueryParams:
    """Build QueryParams from a mapping and/or keyword arguments.

    Keys from ``obj`` come first, in its order, followed by ``kwargs``.
    Every value goes through :func:`to_text`.
    """
    pairs: list[tuple[str, str]] = []
    for source in (obj or {}, kwargs):
        for key, value in source.items():
            pairs.append((str(key), to_text(value)))
    return QueryParams.from_pairs(pairs)

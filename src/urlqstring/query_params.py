# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Ordered query string parameters.

Purpose
=======
``QueryParams`` is a list of ``(key, value)`` pairs, not a mapping.
Duplicate keys are kept and order is preserved, so the pairs come back
out exactly as they went in.

Parsing Schema::

    Query string: "id=1024&family=ti=an&love&&"
                        ↓
                 split on "&"
                        ↓
    Fields: ["id=1024", "family=ti=an", "love", "", ""]
                        ↓
           split each on the first "="
                        ↓
    Pairs: [("id", "1024"), ("family", "ti=an"), ("love", ""),
            ("", ""), ("", "")]

No percent-decoding happens on parse, and no whitespace is trimmed.

Serialization::

    [("id", "1024"), ("name", "rust")]
        stringify()  →  "id=1024&name=rust&"        (trailing "&" kept)
        json()       →  '{"id":"1024","name":"rust"}'

Rewriting::

    q.replace_key("name", "language")       every pair whose key matches
    q.replace_value("rust", "rust-lang")    every pair whose value matches
    q.replace_keys([...], [...])            applied in order, one at a time

Rewrites match whole keys or values, never substrings. They return a new
instance and leave the original untouched.

Differences from a dict::

    +-----------------+------------------+---------------------+
    | Aspect          | dict             | QueryParams         |
    +-----------------+------------------+---------------------+
    | Duplicate keys  | Last wins        | All kept            |
    | Order           | Insertion        | Insertion / parse   |
    | Lookup          | Hash, O(1)       | First match, O(n)   |
    | Mutability      | Mutable          | Immutable           |
    +-----------------+------------------+---------------------+

Design Notes
============
- Pairs are stored as a tuple of tuples; instances are hashable.
- ``json()`` does not escape quotes inside keys or values. A value
  containing ``"`` yields invalid JSON.
- Associative sources go through ``from_mapping``; ``stringify`` has a
  single input shape.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, overload

from .config import DEFAULT_OPTIONS, QueryStringOptions
from .escape import escape
from .exceptions import InvalidArgument

__all__ = ["QueryParam", "QueryParams", "SEPARATOR", "ASSIGN"]

logger = logging.getLogger("urlqstring.query_params")

QueryParam = tuple[str, str]

SEPARATOR = "&"
ASSIGN = "="


def _split_field(field: str) -> QueryParam:
    key, _, value = field.partition(ASSIGN)
    return key, value


def _is_pair(item: Any) -> bool:
    return isinstance(item, (tuple, list)) and len(item) == 2


def _check_pair(item: Any) -> QueryParam:
    if isinstance(item, (str, bytes)):
        raise InvalidArgument(f"Expected a (key, value) pair, got {item!r}")
    try:
        key, value = item
    except (TypeError, ValueError):
        raise InvalidArgument(f"Expected a (key, value) pair, got {item!r}") from None
    if not isinstance(key, str) or not isinstance(value, str):
        raise InvalidArgument(f"Pair items must be str, got {item!r}")
    return key, value


class QueryParams:
    """
    Immutable ordered sequence of query string pairs.

    Accepts a raw query string (``str`` or ``bytes``), a mapping, another
    QueryParams, or an iterable of ``(key, value)`` pairs.

    Example:
        >>> q = QueryParams("id=1024&name=rust")
        >>> q.value("name")
        'rust'
        >>> q.replace_key("name", "language").stringify()
        'id=1024&language=rust&'
        >>> list(q)
        [('id', '1024'), ('name', 'rust')]
    """

    __slots__ = ("_pairs",)

    def __init__(
        self,
        source: str | bytes | Mapping[str, Any] | Iterable[QueryParam] | None = None,
    ) -> None:
        pairs: tuple[QueryParam, ...]
        if source is None:
            pairs = ()
        elif isinstance(source, QueryParams):
            pairs = source._pairs
        elif isinstance(source, (str, bytes)):
            pairs = self._parse_pairs(source)
        elif isinstance(source, Mapping):
            pairs = self._mapping_pairs(source)
        else:
            pairs = tuple(_check_pair(item) for item in source)
        self._pairs = pairs

    # --- construction -------------------------------------------------

    @staticmethod
    def _parse_pairs(raw: str | bytes) -> tuple[QueryParam, ...]:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", "surrogateescape")
        pairs = tuple(_split_field(field) for field in raw.split(SEPARATOR))
        logger.debug(f"Parsed {len(pairs)} fields from query string")
        return pairs

    @staticmethod
    def _mapping_pairs(mapping: Mapping[str, Any]) -> tuple[QueryParam, ...]:
        pairs: list[QueryParam] = []
        for key, value in mapping.items():
            if isinstance(value, (list, tuple)):
                pairs.extend(_check_pair((key, item)) for item in value)
            else:
                pairs.append(_check_pair((key, value)))
        return tuple(pairs)

    @classmethod
    def _from_tuple(cls, pairs: tuple[QueryParam, ...]) -> QueryParams:
        instance = cls.__new__(cls)
        instance._pairs = pairs
        return instance

    @classmethod
    def parse(cls, raw: str | bytes) -> QueryParams:
        """
        Parse a raw query string (without the leading ``?``).

        Splits on ``&``, then each field on its first ``=``. A field with
        no ``=`` gets an empty value. Never raises.

        Args:
            raw: The query string. Bytes are decoded as UTF-8.

        Returns:
            QueryParams with one pair per field. An empty string gives
            a single ``("", "")`` pair.
        """
        return cls._from_tuple(cls._parse_pairs(raw))

    @classmethod
    def from_pairs(cls, pairs: Iterable[QueryParam]) -> QueryParams:
        """
        Wrap an ordered iterable of ``(key, value)`` pairs.

        Raises:
            InvalidArgument: If an item is not a pair of strings.
        """
        return cls._from_tuple(tuple(_check_pair(item) for item in pairs))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> QueryParams:
        """
        Convert a mapping into pairs, in the mapping's iteration order.

        A list or tuple value expands into one pair per item, all with
        the same key.

        Example:
            >>> QueryParams.from_mapping({"tag": ["a", "b"], "id": "1"}).stringify()
            'tag=a&tag=b&id=1&'
        """
        return cls._from_tuple(cls._mapping_pairs(mapping))

    # --- serialization ------------------------------------------------

    def stringify(self, options: QueryStringOptions | None = None) -> str:
        """
        Produce a percent-encoded query string.

        Every pair is rendered as ``key=value&``, including the last one.

        Args:
            options: Serialization options. Defaults keep ``=`` for empty
                values and the trailing ``&``.

        Example:
            >>> QueryParams.from_pairs([("id", "1024"), ("name", "rust")]).stringify()
            'id=1024&name=rust&'
        """
        if options is None:
            options = DEFAULT_OPTIONS
        parts: list[str] = []
        for key, value in self._pairs:
            if value or options.empty_value_equals:
                parts.append(escape(key) + ASSIGN + escape(value))
            else:
                parts.append(escape(key))
        result = SEPARATOR.join(parts)
        if parts and options.trailing_separator:
            result += SEPARATOR
        return result

    def json(self) -> str:
        """
        Produce a JSON-style object string.

        Keys and values are quoted as they are, without escaping.

        Example:
            >>> QueryParams.parse("idx=1024&family=ti=an&love").json()
            '{"idx":"1024","family":"ti=an","love":""}'
        """
        body = ",".join(f'"{key}":"{value}"' for key, value in self._pairs)
        return "{" + body + "}"

    # --- lookup -------------------------------------------------------

    def value(self, key: str) -> str | None:
        """Return the value of the first pair with ``key``, or None."""
        for k, v in self._pairs:
            if k == key:
                return v
        return None

    def getlist(self, key: str) -> list[str]:
        """Return every value for ``key`` in order; empty list if absent."""
        return [v for k, v in self._pairs if k == key]

    def keys(self) -> list[str]:
        """Return every key in order, duplicates included."""
        return [k for k, _ in self._pairs]

    def values(self) -> list[str]:
        """Return every value in order."""
        return [v for _, v in self._pairs]

    def items(self) -> list[QueryParam]:
        """Return the pairs as a list."""
        return list(self._pairs)

    def to_dict(self) -> dict[str, list[str]]:
        """
        Group values by key, keeping duplicates.

        Example:
            >>> QueryParams("a=1&b=2&a=3").to_dict()
            {'a': ['1', '3'], 'b': ['2']}
        """
        grouped: dict[str, list[str]] = {}
        for key, value in self._pairs:
            grouped.setdefault(key, []).append(value)
        return grouped

    # --- rewrite ------------------------------------------------------

    def replace_key(self, old_key: str, new_key: str) -> QueryParams:
        """Return a copy where every pair keyed ``old_key`` is keyed ``new_key``."""
        return self._from_tuple(
            tuple((new_key if k == old_key else k, v) for k, v in self._pairs)
        )

    def replace_value(self, old_value: str, new_value: str) -> QueryParams:
        """Return a copy where every value equal to ``old_value`` becomes ``new_value``."""
        return self._from_tuple(
            tuple((k, new_value if v == old_value else v) for k, v in self._pairs)
        )

    def replace_keys(self, old_keys: Sequence[str], new_keys: Sequence[str]) -> QueryParams:
        """
        Apply ``replace_key`` for each ``(old, new)`` in order.

        Each substitution sees the result of the previous ones, so
        ``replace_keys(["a", "b"], ["b", "c"])`` turns ``a`` into ``c``.

        Raises:
            InvalidArgument: If the lists differ in length. Nothing is applied.
        """
        self._check_batch("replace_keys", old_keys, new_keys)
        result = self
        for old, new in zip(old_keys, new_keys):
            result = result.replace_key(old, new)
        return result

    def replace_values(
        self, old_values: Sequence[str], new_values: Sequence[str]
    ) -> QueryParams:
        """
        Apply ``replace_value`` for each ``(old, new)`` in order.

        Raises:
            InvalidArgument: If the lists differ in length. Nothing is applied.
        """
        self._check_batch("replace_values", old_values, new_values)
        result = self
        for old, new in zip(old_values, new_values):
            result = result.replace_value(old, new)
        return result

    @staticmethod
    def _check_batch(name: str, olds: Sequence[str], news: Sequence[str]) -> None:
        if len(olds) != len(news):
            logger.debug(f"{name} rejected: {len(olds)} old vs {len(news)} new items")
            raise InvalidArgument(
                f"{name}: got {len(olds)} old and {len(news)} new items"
            )
        logger.debug(f"{name}: applying {len(olds)} substitutions")

    # --- sequence protocol --------------------------------------------

    @overload
    def __getitem__(self, index: int) -> QueryParam: ...

    @overload
    def __getitem__(self, index: slice) -> QueryParams: ...

    def __getitem__(self, index: int | slice) -> QueryParam | QueryParams:
        """Return a pair by position, or a QueryParams for a slice."""
        if isinstance(index, slice):
            return self._from_tuple(self._pairs[index])
        if not isinstance(index, int):
            raise TypeError(
                f"QueryParams indices must be integers or slices, not "
                f"{type(index).__name__}; use value() for key lookup"
            )
        return self._pairs[index]

    def __iter__(self) -> Iterator[QueryParam]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __contains__(self, key: object) -> bool:
        """Check whether any pair has ``key``."""
        return any(k == key for k, _ in self._pairs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryParams):
            return self._pairs == other._pairs
        if isinstance(other, (list, tuple)):
            if not all(_is_pair(item) for item in other):
                return False
            return list(self._pairs) == [tuple(item) for item in other]
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"QueryParams({list(self._pairs)!r})"

# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""urlqstring - Ordered URL query string encoding and rewriting.

Main components:
    QueryParams: Immutable ordered list of (key, value) pairs
    escape: Byte-wise percent encoder
    query_object: Build QueryParams from loosely typed literals
    load_options: Serialization options via genro-toolbox SmartOptions

Functional API (thin wrappers over QueryParams):
    parse, from_pairs, stringify, to_json, json_string, value,
    replace_key, replace_value, replace_keys, replace_values

Usage:
    from urlqstring import parse, stringify

    q = parse("id=1024&name=rust")
    stringify(q.replace_key("name", "language"))  # "id=1024&language=rust&"
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

__version__ = "0.1.0"

from .builder import query_object, to_text
from .config import ConfigError, QueryStringOptions, load_options
from .escape import UNRESERVED, escape, is_unreserved
from .exceptions import InvalidArgument, QueryStringError
from .query_params import QueryParam, QueryParams


def parse(raw: str | bytes) -> QueryParams:
    """Parse a raw query string. See :meth:`QueryParams.parse`."""
    return QueryParams.parse(raw)


def from_pairs(pairs: Iterable[QueryParam]) -> QueryParams:
    """Wrap literal pairs. See :meth:`QueryParams.from_pairs`."""
    return QueryParams.from_pairs(pairs)


def stringify(
    query: QueryParams | Mapping[str, Any] | Iterable[QueryParam],
    options: QueryStringOptions | None = None,
) -> str:
    """Percent-encode ``query`` into ``k=v&`` form.

    Anything that is not already a QueryParams is converted through the
    QueryParams constructor first.
    """
    if not isinstance(query, QueryParams):
        query = QueryParams(query)
    return query.stringify(options)


def to_json(query: QueryParams) -> str:
    """Render ``query`` as a JSON-style object string."""
    return query.json()


def json_string(raw: str | bytes) -> str:
    """Parse ``raw`` and render it as a JSON-style object string."""
    return QueryParams.parse(raw).json()


def value(query: QueryParams, key: str) -> str | None:
    """Return the first value for ``key``, or None."""
    return query.value(key)


def replace_key(query: QueryParams, old_key: str, new_key: str) -> QueryParams:
    return query.replace_key(old_key, new_key)


def replace_value(query: QueryParams, old_value: str, new_value: str) -> QueryParams:
    return query.replace_value(old_value, new_value)


def replace_keys(
    query: QueryParams, old_keys: Sequence[str], new_keys: Sequence[str]
) -> QueryParams:
    return query.replace_keys(old_keys, new_keys)


def replace_values(
    query: QueryParams, old_values: Sequence[str], new_values: Sequence[str]
) -> QueryParams:
    return query.replace_values(old_values, new_values)


__all__ = [
    "__version__",
    "QueryParam",
    "QueryParams",
    "QueryStringOptions",
    "QueryStringError",
    "InvalidArgument",
    "ConfigError",
    "UNRESERVED",
    "escape",
    "is_unreserved",
    "load_options",
    "query_object",
    "to_text",
    "parse",
    "from_pairs",
    "stringify",
    "to_json",
    "json_string",
    "value",
    "replace_key",
    "replace_value",
    "replace_keys",
    "replace_values",
]

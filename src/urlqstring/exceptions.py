# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Exception classes for urlqstring.

The error surface of the library is deliberately small. Parsing never
fails: every ``str`` is a valid query string. Lookups that miss return
``None``. The only failures are contract violations by the caller.

Module Structure
----------------
1. QueryStringError - Base class for every error raised by the package
2. InvalidArgument - Caller passed arguments that break an operation contract

InvalidArgument
---------------
Raised when:
    - ``replace_keys`` / ``replace_values`` receive old/new lists of
      different lengths (nothing is applied)
    - ``from_pairs`` receives an item that is not a 2-item pair of strings

Also a ``ValueError``, so callers that already catch ``ValueError`` keep
working.

Attributes:
    detail (str): Error detail message (default: "")

Example:
    >>> q = QueryParams.parse("id=1&name=rust")
    >>> q.replace_keys(["id", "name"], ["ident"])
    Traceback (most recent call last):
        ...
    urlqstring.exceptions.InvalidArgument: replace_keys: got 2 old and 1 new items
"""

__all__ = ["QueryStringError", "InvalidArgument"]


class QueryStringError(Exception):
    """Base class for urlqstring errors."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)

    def __str__(self) -> str:
        return self.detail

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(detail={self.detail!r})"


class InvalidArgument(QueryStringError, ValueError):
    """
    Arguments violate an operation contract.

    Example:
        >>> raise InvalidArgument("replace_values: got 2 old and 3 new items")
    """

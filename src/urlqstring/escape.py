# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Percent encoding for query string keys and values.

Escaping works on the UTF-8 bytes of the text, one byte at a time. A
multi-byte character becomes several ``%XX`` groups.

Unreserved bytes (left as they are)::

    A-Z  a-z  0-9  *  -  .  _  '  ~  !  (  )

Every other byte becomes ``%`` followed by two uppercase hex digits::

    " "  →  %20
    "/"  →  %2F
    "é"  →  %C3%A9

Uses ``urllib.parse.quote``, which always keeps ``A-Za-z0-9_.-~``; the
rest of the unreserved set is passed as ``safe``. There is no decoder:
the encoding is one-directional.
"""

import string
from urllib.parse import quote

__all__ = ["SAFE", "UNRESERVED", "escape", "is_unreserved"]

SAFE = "*'!()"

UNRESERVED = frozenset(
    (string.ascii_letters + string.digits + "-._~" + SAFE).encode("ascii")
)


def is_unreserved(byte: int) -> bool:
    """Return True if ``byte`` is emitted as-is by :func:`escape`."""
    return byte in UNRESERVED


def escape(text: str) -> str:
    """
    Percent-encode ``text``.

    Args:
        text: Arbitrary text. Surrogates left by ``surrogateescape``
            decoding are restored to their original bytes.

    Returns:
        ASCII-only string.

    Example:
        >>> escape("www. baidu. com/")
        'www.%20baidu.%20com%2F'
    """
    return quote(text, safe=SAFE, encoding="utf-8", errors="surrogateescape")

# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Serialization options for urlqstring.

Options are merged with genro-toolbox ``SmartOptions`` in this order
(later overrides earlier)::

    hardcoded defaults < environment variables < caller arguments

Environment variables use prefix ``URLQSTRING_`` (e.g.
``URLQSTRING_TRAILING_SEPARATOR=false``).

Options:
    empty_value_equals: Render empty values as ``key=&`` (True) or ``key&``.
    trailing_separator: Emit ``&`` after the last pair.

Example::

    from urlqstring import QueryParams
    from urlqstring.config import load_options

    opts = load_options(empty_value_equals=False)
    QueryParams.parse("a=1&flag").stringify(opts)   # "a=1&flag&"
"""

from __future__ import annotations

import logging
from typing import Any

from genro_toolbox import SmartOptions  # type: ignore[import-untyped]

__all__ = [
    "ConfigError",
    "QueryStringOptions",
    "load_options",
    "DEFAULTS",
    "DEFAULT_OPTIONS",
]

logger = logging.getLogger("urlqstring.config")

DEFAULTS = {"empty_value_equals": True, "trailing_separator": True}


def _options_spec(
    empty_value_equals: bool = True,
    trailing_separator: bool = True,
) -> None:
    """Reference function for SmartOptions type extraction."""


class ConfigError(Exception):
    """Configuration error."""


class QueryStringOptions:
    """Resolved serialization options."""

    __slots__ = ("_opts",)

    def __init__(self, opts: SmartOptions | dict[str, Any] | None = None) -> None:
        merged = SmartOptions(DEFAULTS)
        if opts is not None:
            if not isinstance(opts, SmartOptions):
                opts = SmartOptions(dict(opts), ignore_none=True)
            merged = merged + opts
        for name in DEFAULTS:
            if not isinstance(merged[name], bool):
                raise ConfigError(
                    f"Invalid option '{name}': expected bool, got {merged[name]!r}"
                )
        self._opts = merged

    @classmethod
    def default(cls) -> QueryStringOptions:
        """Defaults only, without looking at the environment."""
        return DEFAULT_OPTIONS

    @property
    def empty_value_equals(self) -> bool:
        """Render ``key=`` rather than ``key`` for empty values."""
        result: bool = self._opts["empty_value_equals"]
        return result

    @property
    def trailing_separator(self) -> bool:
        """Append ``&`` after the last pair."""
        result: bool = self._opts["trailing_separator"]
        return result

    def as_dict(self) -> dict[str, Any]:
        return {name: self._opts[name] for name in DEFAULTS}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryStringOptions):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.as_dict().items())))

    def __repr__(self) -> str:
        return f"QueryStringOptions({self.as_dict()!r})"


DEFAULT_OPTIONS = QueryStringOptions()


def load_options(
    empty_value_equals: bool | None = None,
    trailing_separator: bool | None = None,
    argv: list[str] | None = None,
) -> QueryStringOptions:
    """
    Build options from defaults, environment and explicit arguments.

    Args:
        empty_value_equals: Override for ``empty_value_equals``.
        trailing_separator: Override for ``trailing_separator``.
        argv: Command line style overrides forwarded to SmartOptions.

    Returns:
        QueryStringOptions with the merged values.

    Raises:
        ConfigError: If a merged value is not a bool.
    """
    env_argv_opts = SmartOptions(_options_spec, env="URLQSTRING", argv=argv or [])
    caller_opts = SmartOptions(
        dict(
            empty_value_equals=empty_value_equals,
            trailing_separator=trailing_separator,
        ),
        ignore_none=True,
    )
    opts = SmartOptions(DEFAULTS) + env_argv_opts + caller_opts
    options = QueryStringOptions(opts)
    logger.debug(f"Loaded options {options.as_dict()}")
    return options

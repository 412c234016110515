# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for serialization options."""

import pytest

from urlqstring import QueryParams
from urlqstring.config import (
    DEFAULT_OPTIONS,
    DEFAULTS,
    ConfigError,
    QueryStringOptions,
    load_options,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove URLQSTRING_* variables from the environment."""
    monkeypatch.delenv("URLQSTRING_EMPTY_VALUE_EQUALS", raising=False)
    monkeypatch.delenv("URLQSTRING_TRAILING_SEPARATOR", raising=False)
    return monkeypatch


class TestQueryStringOptions:
    """Test QueryStringOptions."""

    def test_defaults(self):
        """Defaults should keep '=' and the trailing separator."""
        opts = QueryStringOptions.default()
        assert opts.empty_value_equals is True
        assert opts.trailing_separator is True
        assert opts.as_dict() == DEFAULTS

    def test_default_is_shared(self):
        """default() should return the module-level instance."""
        assert QueryStringOptions.default() is DEFAULT_OPTIONS
        assert QueryStringOptions.default() is QueryStringOptions.default()

    def test_override(self):
        """Explicit values should override defaults."""
        opts = QueryStringOptions({"trailing_separator": False})
        assert opts.trailing_separator is False
        assert opts.empty_value_equals is True

    def test_none_ignored(self):
        """None values should not override defaults."""
        opts = QueryStringOptions({"empty_value_equals": None})
        assert opts.empty_value_equals is True

    def test_invalid_type(self):
        """Non-bool values should raise ConfigError."""
        with pytest.raises(ConfigError):
            QueryStringOptions({"trailing_separator": "maybe"})

    def test_equality(self):
        """Options with the same values should be equal."""
        assert QueryStringOptions() == QueryStringOptions.default()
        assert QueryStringOptions() != QueryStringOptions({"trailing_separator": False})


class TestLoadOptions:
    """Test load_options()."""

    def test_no_sources(self, clean_env):
        """Without env or arguments the defaults should apply."""
        assert load_options() == DEFAULT_OPTIONS

    def test_caller_overrides(self, clean_env):
        """Caller arguments should win."""
        opts = load_options(empty_value_equals=False, trailing_separator=False)
        assert opts.empty_value_equals is False
        assert opts.trailing_separator is False

    def test_partial_override(self, clean_env):
        """Unset arguments should keep their defaults."""
        opts = load_options(empty_value_equals=False)
        assert opts.empty_value_equals is False
        assert opts.trailing_separator is True

    def test_env_overrides_defaults(self, clean_env):
        """URLQSTRING_* variables should override defaults."""
        clean_env.setenv("URLQSTRING_TRAILING_SEPARATOR", "false")
        clean_env.setenv("URLQSTRING_EMPTY_VALUE_EQUALS", "0")
        opts = load_options()
        assert opts.trailing_separator is False
        assert opts.empty_value_equals is False
        assert QueryParams.parse("a=1&flag").stringify(opts) == "a=1&flag"

    def test_env_true_values(self, clean_env):
        """Truthy env strings should resolve to True."""
        clean_env.setenv("URLQSTRING_TRAILING_SEPARATOR", "yes")
        assert load_options().trailing_separator is True

    def test_caller_beats_env(self, clean_env):
        """Caller arguments should override env variables."""
        clean_env.setenv("URLQSTRING_TRAILING_SEPARATOR", "false")
        opts = load_options(trailing_separator=True)
        assert opts.trailing_separator is True

    def test_argv_beats_env(self, clean_env):
        """A command line flag should override env variables."""
        clean_env.setenv("URLQSTRING_TRAILING_SEPARATOR", "false")
        opts = load_options(argv=["--trailing-separator"])
        assert opts.trailing_separator is True
        assert opts.empty_value_equals is True

# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for the module-level functional API."""

import pytest

import urlqstring
from urlqstring import InvalidArgument, QueryParams


class TestFunctionalApi:
    """Test urlqstring.parse, stringify and friends."""

    def test_stringify_pairs(self):
        """stringify should accept plain pairs."""
        assert urlqstring.stringify([("id", "1024"), ("name", "rust")]) == "id=1024&name=rust&"

    def test_stringify_mapping(self):
        """stringify should accept a mapping through the constructor."""
        assert urlqstring.stringify({"id": "1024"}) == "id=1024&"

    def test_stringify_reference(self):
        """stringify should escape the reference values."""
        q = urlqstring.from_pairs(
            [
                ("params", "www. baidu. com/百度搜索"),
                ("encSecKey", "查询字=-)(*&^%$#@!~"),
            ]
        )
        assert urlqstring.stringify(q) == (
            "params=www.%20baidu.%20com%2F%E7%99%BE%E5%BA%A6%E6%90%9C%E7%B4%A2"
            "&encSecKey=%E6%9F%A5%E8%AF%A2%E5%AD%97%3D-)(*%26%5E%25%24%23%40!~&"
        )

    def test_stringify_rejects_strings(self):
        """stringify should reject strings posing as pairs."""
        with pytest.raises(InvalidArgument):
            urlqstring.stringify(["ab"])

    def test_stringify_options(self):
        """stringify should forward options."""
        opts = urlqstring.load_options(trailing_separator=False)
        assert urlqstring.stringify([("a", "1")], opts) == "a=1"

    def test_parse_value(self):
        """value should find the first match in a parsed string."""
        q = urlqstring.parse("a=1&b=2&a=3")
        assert isinstance(q, QueryParams)
        assert urlqstring.value(q, "a") == "1"
        assert urlqstring.value(q, "z") is None

    def test_to_json(self):
        """to_json should render the JSON view."""
        q = urlqstring.parse("id=1024&name=rust")
        assert urlqstring.to_json(q) == '{"id":"1024","name":"rust"}'

    def test_json_string(self):
        """json_string should split '&' inside values like any separator."""
        assert urlqstring.json_string("idx=1024&name=lumi&family=ti=an&love") == (
            '{"idx":"1024","name":"lumi","family":"ti=an","love":""}'
        )
        assert urlqstring.json_string("k=a&b") == '{"k":"a","b":""}'

    def test_replace_functions(self):
        """Module rewrite functions should delegate to QueryParams."""
        q = urlqstring.parse("id=1024&name=rust")
        renamed = urlqstring.replace_key(q, "name", "language")
        assert urlqstring.stringify(renamed) == "id=1024&language=rust&"
        changed = urlqstring.replace_value(q, "rust", "rust-lang")
        assert urlqstring.value(changed, "name") == "rust-lang"

    def test_batch_functions(self):
        """Batch functions should apply substitutions and check lengths."""
        q = urlqstring.parse("a=1&b=2")
        assert urlqstring.replace_keys(q, ["a"], ["x"]).keys() == ["x", "b"]
        assert urlqstring.replace_values(q, ["2"], ["y"]).values() == ["1", "y"]
        with pytest.raises(InvalidArgument):
            urlqstring.replace_values(q, ["1", "2"], [])

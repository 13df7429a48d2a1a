"""Tests for inflector.mappings."""

import pytest

from inflector import InflectionError, UnknownKey
from inflector.mappings import (
    assert_valid_keys,
    deep_stringify_keys,
    deep_transform_keys,
    stringify_keys,
    to_param,
    to_query,
    transform_keys,
    transform_values,
)


class TestKeys:
    def test_transform_keys(self):
        original = {"name": "Rob", "age": "28"}
        assert transform_keys(original, str.upper) == {"NAME": "Rob", "AGE": "28"}
        assert original == {"name": "Rob", "age": "28"}

    def test_transform_values(self):
        assert transform_values({"a": 1, "b": 2}, lambda v: v * 2) == {"a": 2, "b": 4}
        assert transform_values({}, str) == {}

    def test_stringify_keys(self):
        assert stringify_keys({1: "a", "b": 2, None: 3}) == {"1": "a", "b": 2, "None": 3}

    def test_deep_transform_keys(self):
        nested = {"person": {"name": "Rob", "pets": [{"kind": "cat"}, "fish"]}}
        assert deep_transform_keys(nested, str.upper) == {
            "PERSON": {"NAME": "Rob", "PETS": [{"KIND": "cat"}, "fish"]},
        }

    def test_deep_stringify_keys(self):
        assert deep_stringify_keys({1: {2: [{3: "x"}]}}) == {"1": {"2": [{"3": "x"}]}}
        assert deep_stringify_keys("plain") == "plain"


class TestAssertValidKeys:
    def test_valid_keys_pass(self):
        assert_valid_keys({"name": "Rob", "age": "28"}, "name", "age")
        assert_valid_keys({"name": "Rob"}, ["name", "age"])
        assert_valid_keys({})

    def test_unknown_key(self):
        with pytest.raises(UnknownKey) as exc:
            assert_valid_keys({"name": "Rob", "years": "28"}, "name", "age")
        assert exc.value.key == "years"
        assert exc.value.valid_keys == ("name", "age")
        assert str(exc.value) == "Unknown key: 'years'. Valid keys are: 'name', 'age'"

    def test_keys_are_not_coerced(self):
        with pytest.raises(UnknownKey):
            assert_valid_keys({1: "x"}, "1")

    def test_is_an_inflection_error(self):
        with pytest.raises(InflectionError):
            assert_valid_keys({"x": 1})
        with pytest.raises(ValueError):
            assert_valid_keys({"x": 1})


class TestToQuery:
    def test_flat_mapping(self):
        assert to_query({"name": "David", "nationality": "Danish"}) == "name=David&nationality=Danish"

    def test_namespace(self):
        assert to_query({"name": "David", "nationality": "Danish"}, "user") == (
            "user%5Bname%5D=David&user%5Bnationality%5D=Danish"
        )

    def test_nested_mapping(self):
        assert to_query({"user": {"name": "David"}}) == "user%5Bname%5D=David"

    def test_list(self):
        assert to_query(["Rails", "coding"], "hobbies") == "hobbies%5B%5D=Rails&hobbies%5B%5D=coding"
        assert to_query([], "hobbies") == "hobbies%5B%5D="

    def test_empty_containers_are_skipped(self):
        assert to_query({"a": 1, "b": [], "c": {}}) == "a=1"

    def test_escaping(self):
        assert to_query({"q": "a b&c"}) == "q=a%20b%26c"
        assert to_query({"q": "a b&c"}, space_to_plus=True) == "q=a+b%26c"

    def test_scalar_values(self):
        assert to_query({"on": True, "off": False, "none": None, "n": 3}) == "on=true&off=false&none=&n=3"

    def test_scalar_needs_a_key(self):
        with pytest.raises(TypeError):
            to_query("value")
        assert to_query("value", "key") == "key=value"

    def test_to_param(self):
        assert to_param(["a", 1, None]) == "a/1/"
        assert to_param(False) == "false"

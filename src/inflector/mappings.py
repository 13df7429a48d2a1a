"""Key helpers for option mappings, and query-string encoding.

    stringify_keys({1: "a", "b": 2})                   # => {"1": "a", "b": 2}
    deep_transform_keys({"a": {"b": 1}}, str.upper)    # => {"A": {"B": 1}}
    to_query({"name": "David", "nationality": "Danish"})
    # => "name=David&nationality=Danish"

The functions return new containers and never modify their input.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping, Optional
from urllib.parse import quote, quote_plus

from .errors import UnknownKey


def transform_keys(mapping: Mapping, func: Callable[[Any], Any]) -> Dict:
    return {func(key): value for key, value in mapping.items()}


def transform_values(mapping: Mapping, func: Callable[[Any], Any]) -> Dict:
    return {key: func(value) for key, value in mapping.items()}


def deep_transform_keys(obj: Any, func: Callable[[Any], Any]) -> Any:
    """Apply func to every key of obj and of the mappings nested in it, lists included."""
    if isinstance(obj, Mapping):
        return {func(key): deep_transform_keys(value, func) for key, value in obj.items()}
    if isinstance(obj, list):
        return [deep_transform_keys(item, func) for item in obj]
    return obj


def stringify_keys(mapping: Mapping) -> Dict[str, Any]:
    return transform_keys(mapping, str)


def deep_stringify_keys(obj: Any) -> Any:
    return deep_transform_keys(obj, str)


def _flatten_keys(keys) -> Iterable:
    for key in keys:
        if isinstance(key, (list, tuple)):
            yield from _flatten_keys(key)
        else:
            yield key


def assert_valid_keys(mapping: Mapping, *valid_keys) -> None:
    """Raise UnknownKey for the first key of mapping not in valid_keys.

    Keys are compared as they are, so "1" does not match 1. Lists of keys are
    flattened:

        assert_valid_keys({"name": "Rob", "years": "28"}, "name", "age")
        # UnknownKey: Unknown key: 'years'. Valid keys are: 'name', 'age'
    """
    valid = list(_flatten_keys(valid_keys))
    for key in mapping:
        if key not in valid:
            raise UnknownKey(key, valid)


def to_param(value: Any) -> str:
    """String form of a value inside a query string or URL path."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "/".join(to_param(item) for item in value)
    return str(value)


def to_query(value: Any, key: Optional[str] = None, space_to_plus: bool = False) -> str:
    """Encode value as a URL query string.

    A mapping becomes ``key=value`` pairs joined by "&", in insertion order;
    nested mappings use ``namespace[key]`` names and lists use ``key[]``.
    Empty nested mappings and lists are left out. Names and values are
    percent-escaped; with space_to_plus a space becomes "+".

        to_query({"name": "David"}, "user")     # => "user%5Bname%5D=David"
        to_query(["Rails", "coding"], "hobbies")
        # => "hobbies%5B%5D=Rails&hobbies%5B%5D=coding"
    """
    escape = _escaper(space_to_plus)

    if isinstance(value, Mapping):
        pairs = []
        for name, item in value.items():
            if isinstance(item, (Mapping, list, tuple)) and not item:
                continue
            pairs.append(to_query(item, f"{key}[{name}]" if key else to_param(name), space_to_plus))
        return "&".join(pairs)

    if key is None:
        raise TypeError(f"a key is needed to encode {type(value).__name__} as a query string")

    if isinstance(value, (list, tuple)):
        prefix = f"{key}[]"
        if not value:
            return f"{escape(prefix)}="
        return "&".join(to_query(item, prefix, space_to_plus) for item in value)

    return f"{escape(key)}={escape(to_param(value))}"


def _escaper(space_to_plus: bool) -> Callable[[str], str]:
    if space_to_plus:
        return lambda text: quote_plus(text, safe="")
    return lambda text: quote(text, safe="")

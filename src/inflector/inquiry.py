"""Equality wrapper for environment-style strings."""

from __future__ import annotations


class StringInquirer:
    """Wrap a string for readable equality checks.

        env = StringInquirer("production")
        env.matches("production")           # => True
        env.is_any("staging", "production") # => True
    """

    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def matches(self, candidate: str) -> bool:
        return self.value == candidate

    def is_any(self, *candidates: str) -> bool:
        return any(self.matches(c) for c in candidates)

    def __eq__(self, other) -> bool:
        if isinstance(other, StringInquirer):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"StringInquirer({self.value!r})"

"""Data structures for inflection rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Pattern, Tuple, Union

# Separator between namespace segments in class names (Admin::Post)
NAMESPACE_SEPARATOR = "::"


class RuleScope(Enum):
    ALL = "all"
    PLURALS = "plurals"
    SINGULARS = "singulars"
    UNCOUNTABLES = "uncountables"
    HUMANS = "humans"


@dataclass(frozen=True)
class Rule:
    """A (pattern, replacement) pair used for suffix rewriting.

    A compiled pattern substitutes with backreference expansion (``\\1``).
    A plain string is a literal: it matches only the exact word and the
    replacement is inserted verbatim.
    """

    pattern: Pattern[str]
    replacement: str
    # Original text for literal rules, None for regex rules
    literal: Optional[str] = field(default=None)

    @classmethod
    def build(cls, pattern: Union[str, Pattern[str]], replacement: str) -> "Rule":
        if isinstance(pattern, str):
            return cls(re.compile(r"\A" + re.escape(pattern) + r"\Z"), replacement, literal=pattern)
        return cls(pattern, replacement)

    def apply(self, word: str) -> Tuple[str, bool]:
        """Substitute the first match in word. Returns (result, changed)."""
        if self.literal is not None:
            replacement = self.replacement
            result = self.pattern.sub(lambda _m: replacement, word, count=1)
        else:
            result = self.pattern.sub(self.replacement, word, count=1)
        return result, result != word

    def mentions(self, word: str) -> bool:
        """True when the literal pattern or the replacement is exactly word."""
        return self.literal == word or self.replacement == word

"""Whitespace and truncation helpers for display strings."""

from __future__ import annotations

import re
from typing import Optional, Pattern, Union

Separator = Union[str, Pattern[str]]

_SPACE_RUN_RE = re.compile(r"\s+")


def squish(text: str) -> str:
    """Collapse whitespace runs (ASCII and Unicode) into single spaces and strip the ends.

        squish(" foo   bar    \\n   \\t   boo")  # => "foo bar boo"
    """
    return _SPACE_RUN_RE.sub(" ", text).strip()


def remove(text: str, *patterns: Separator) -> str:
    """remove("foo bar test", " test", re.compile("bar")) => "foo "."""
    for pattern in patterns:
        if isinstance(pattern, str):
            text = text.replace(pattern, "")
        else:
            text = pattern.sub("", text)
    return text


def truncate(text: str, truncate_at: int, omission: str = "...", separator: Optional[Separator] = None) -> str:
    """Shorten text to at most truncate_at characters, ending with omission.

        truncate("Once upon a time in a world far far away", 27)
        # => "Once upon a time in a wo..."
        truncate("Once upon a time in a world far far away", 27, separator=" ")
        # => "Once upon a time in a..."
    """
    if len(text) <= truncate_at:
        return text

    stop = max(truncate_at - len(omission), 0)
    if separator is not None:
        cut = _last_separator(text, separator, stop)
        if cut is not None:
            stop = cut
    return text[:stop] + omission


def _last_separator(text: str, separator: Separator, limit: int) -> Optional[int]:
    """Start of the last separator match beginning at or before limit."""
    if isinstance(separator, str):
        i = text.rfind(separator, 0, limit + len(separator))
        return i if i != -1 else None
    last = None
    for m in separator.finditer(text):
        if m.start() > limit:
            break
        last = m.start()
    return last


def truncate_words(text: str, words_count: int, omission: str = "...", separator: Separator = " ") -> str:
    """Keep the first words_count words, followed by omission.

        truncate_words("Once upon a time in a world far far away", 4)
        # => "Once upon a time..."
    """
    if words_count < 1:
        return omission
    sep = separator.pattern if isinstance(separator, re.Pattern) else re.escape(separator)
    m = re.match(r"\A((?:.+?%s){%d}.+?)%s.*" % (sep, words_count - 1, sep), text, re.DOTALL)
    if m:
        return m.group(1) + omission
    return text

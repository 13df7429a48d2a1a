"""Rule containers owned by an InflectionRuleSet.

Every container keeps its contents in an immutable snapshot (a tuple or a
fresh dict) and swaps the snapshot on write, so a reader iterating a rule list
never observes it half-updated. Writers are serialized by the owning rule set.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, Iterator, List, Optional, Pattern, Tuple

from .errors import InvalidAcronym, InvalidIrregularPair
from .models import Rule

# Matches nothing; used when no acronyms are registered
EMPTY_ACRONYM_PATTERN = r"(?=a)b"


class RuleList:
    """Ordered rules for one category. New rules go to the front."""

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules: Tuple[Rule, ...] = tuple(rules)

    def prepend(self, rule: Rule) -> None:
        self._rules = (rule,) + self._rules

    def remove_word(self, word: str) -> int:
        """Drop rules whose literal pattern or replacement equals word. Returns the count."""
        kept = tuple(r for r in self._rules if not r.mentions(word))
        removed = len(self._rules) - len(kept)
        self._rules = kept
        return removed

    def clear(self) -> None:
        self._rules = ()

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __getitem__(self, index: int) -> Rule:
        return self._rules[index]

    def __repr__(self) -> str:
        return f"RuleList({len(self._rules)} rules)"


def _flatten(words) -> Iterator[str]:
    for w in words:
        if isinstance(w, str):
            yield w
        else:
            yield from _flatten(w)


class UncountableSet:
    """Words that pluralize/singularize leave alone.

    Lookup is a case-insensitive whole-word suffix match: with "fish"
    registered, "Fish" and "blue fish" are uncountable but "swordfish" is not.
    """

    def __init__(self):
        self._entries: Tuple[Tuple[str, Pattern[str]], ...] = ()

    def add(self, *words) -> List[str]:
        """Add words (nested lists are flattened). Returns the lowercased words added."""
        known = {w for w, _ in self._entries}
        added: List[str] = []
        entries = list(self._entries)
        for word in _flatten(words):
            lower = word.lower()
            if lower in known:
                continue
            known.add(lower)
            entries.append((lower, self._to_regex(lower)))
            added.append(lower)
        self._entries = tuple(entries)
        return added

    def discard(self, word: str) -> None:
        lower = word.lower()
        self._entries = tuple(e for e in self._entries if e[0] != lower)

    def is_uncountable(self, word: str) -> bool:
        return any(regex.search(word) for _, regex in self._entries)

    def clear(self) -> None:
        self._entries = ()

    @staticmethod
    def _to_regex(word: str) -> Pattern[str]:
        return re.compile(r"\b" + re.escape(word) + r"\Z", re.IGNORECASE)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and any(w == word.lower() for w, _ in self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter([w for w, _ in self._entries])

    def __len__(self) -> int:
        return len(self._entries)


class AcronymTable:
    """Lowercase acronym -> display form, e.g. "html" -> "HTML"."""

    def __init__(self):
        self._acronyms: Dict[str, str] = {}
        self.pattern: str = EMPTY_ACRONYM_PATTERN

    def add(self, word: str) -> None:
        if not word:
            raise InvalidAcronym(word)
        acronyms = dict(self._acronyms)
        acronyms[word.lower()] = word
        self._acronyms = acronyms
        self.pattern = self._build_pattern(acronyms.values())

    @staticmethod
    def _build_pattern(values: Iterable[str]) -> str:
        # Longest first so that HTTPS is preferred over HTTP
        ordered = sorted(values, key=len, reverse=True)
        if not ordered:
            return EMPTY_ACRONYM_PATTERN
        return "|".join(re.escape(v) for v in ordered)

    def get(self, key: str) -> Optional[str]:
        return self._acronyms.get(key)

    def lookup(self, term: str) -> Optional[str]:
        return self._acronyms.get(term.lower())

    def clear(self) -> None:
        self._acronyms = {}
        self.pattern = EMPTY_ACRONYM_PATTERN

    def __contains__(self, key) -> bool:
        return key in self._acronyms

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._acronyms))

    def __len__(self) -> int:
        return len(self._acronyms)


def irregular_rules(singular: str, plural: str) -> Tuple[List[Rule], List[Rule]]:
    """Generate the plural and singular rules for an irregular pair.

    Rules are returned in registration order (each one is prepended in turn).
    Words sharing a first letter get two rules per direction that capture the
    first letter and keep its case. Otherwise each word gets an uppercase and a
    lowercase variant, four rules per direction.
    """
    if not singular or not plural:
        raise InvalidIrregularPair(singular, plural)

    s0, srest = singular[0], singular[1:]
    p0, prest = plural[0], plural[1:]

    plurals: List[Rule] = []
    singulars: List[Rule] = []

    if s0.upper() == p0.upper():
        s_pattern = re.compile("(" + re.escape(s0) + ")" + re.escape(srest) + "$", re.IGNORECASE)
        p_pattern = re.compile("(" + re.escape(p0) + ")" + re.escape(prest) + "$", re.IGNORECASE)
        # \g<1> rather than \1 so a replacement starting with a digit stays unambiguous
        plurals.append(Rule(s_pattern, r"\g<1>" + _escape_template(prest)))
        plurals.append(Rule(p_pattern, r"\g<1>" + _escape_template(prest)))
        singulars.append(Rule(s_pattern, r"\g<1>" + _escape_template(srest)))
        singulars.append(Rule(p_pattern, r"\g<1>" + _escape_template(srest)))
    else:
        for head, rest in ((s0, srest), (p0, prest)):
            for case in (str.upper, str.lower):
                pattern = re.compile(re.escape(case(head)) + "(?i:" + re.escape(rest) + ")$")
                plurals.append(Rule(pattern, _escape_template(case(p0) + prest)))
                singulars.append(Rule(pattern, _escape_template(case(s0) + srest)))

    return plurals, singulars


def _escape_template(text: str) -> str:
    return text.replace("\\", "\\\\")

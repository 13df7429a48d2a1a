"""Per-locale inflection rule set and its registration API."""

from __future__ import annotations

import logging
import threading
from typing import Pattern, Union

from .errors import UnknownRuleScope
from .models import Rule, RuleScope
from .rules import AcronymTable, RuleList, UncountableSet, irregular_rules

logger = logging.getLogger(__name__)

PatternLike = Union[str, Pattern[str]]


class InflectionRuleSet:
    """Plural, singular and human rules plus uncountables and acronyms for one locale.

    A compiled pattern is a regular expression; a plain string is a literal that
    matches only the exact word. New rules are added at the front of their list,
    so a rule registered after the built-in table takes precedence over it:

        rules.plural(re.compile(r"(?i)(ox)$"), r"\\1en")
        rules.plural("cow", "kine")
        rules.irregular("octopus", "octopi")
        rules.uncountable("equipment")

    Registration is serialized by a lock. Lookups read immutable snapshots and
    take no lock.
    """

    def __init__(self, locale: str = "en"):
        self.locale = locale
        self.plurals = RuleList()
        self.singulars = RuleList()
        self.humans = RuleList()
        self.uncountables = UncountableSet()
        self.acronyms = AcronymTable()
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return (
            f"InflectionRuleSet(locale={self.locale!r}, plurals={len(self.plurals)}, "
            f"singulars={len(self.singulars)}, humans={len(self.humans)}, "
            f"uncountables={len(self.uncountables)}, acronyms={len(self.acronyms)})"
        )

    @property
    def acronym_pattern(self) -> str:
        return self.acronyms.pattern

    def is_uncountable(self, word: str) -> bool:
        return self.uncountables.is_uncountable(word)

    def acronym(self, word: str) -> None:
        """Register a word that keeps its capitalization through case transforms.

            acronym("HTML")
            camelize("html")      # => "HTML"
            underscore("MyHTML")  # => "my_html"

        The acronym must occur as a delimited unit: with only "HTTP" registered,
        camelize("https") is "Https".
        Raises InvalidAcronym for an empty word.
        """
        with self._lock:
            self.acronyms.add(word)
        logger.debug("[%s] acronym %s", self.locale, word)

    def plural(self, pattern: PatternLike, replacement: str) -> None:
        """Add a pluralization rule."""
        with self._lock:
            self._add_rule(self.plurals, pattern, replacement)
        logger.debug("[%s] plural %r -> %r", self.locale, pattern, replacement)

    def singular(self, pattern: PatternLike, replacement: str) -> None:
        with self._lock:
            self._add_rule(self.singulars, pattern, replacement)
        logger.debug("[%s] singular %r -> %r", self.locale, pattern, replacement)

    def _add_rule(self, rules: RuleList, pattern: PatternLike, replacement: str) -> None:
        if isinstance(pattern, str):
            self.uncountables.discard(pattern)
        self.uncountables.discard(replacement)
        rules.prepend(Rule.build(pattern, replacement))

    def irregular(self, singular: str, plural: str) -> None:
        """Register a singular/plural pair that applies in both directions.

            irregular("person", "people")
            irregular("cow", "kine")

        Raises InvalidIrregularPair if either word is empty.
        """
        plural_rules, singular_rules = irregular_rules(singular, plural)
        with self._lock:
            self.uncountables.discard(singular)
            self.uncountables.discard(plural)
            for rule in plural_rules:
                self.plurals.prepend(rule)
            for rule in singular_rules:
                self.singulars.prepend(rule)
        logger.debug(
            "[%s] irregular %s/%s (%d rules)",
            self.locale, singular, plural, len(plural_rules) + len(singular_rules),
        )

    def uncountable(self, *words) -> None:
        """Mark words as uncountable.

            uncountable("money")
            uncountable("money", "information")
            uncountable(["money", "information", "rice"])
        """
        with self._lock:
            added = self.uncountables.add(*words)
            for word in added:
                self.plurals.remove_word(word)
                self.singulars.remove_word(word)
        logger.debug("[%s] uncountable %s", self.locale, ", ".join(added))

    def human(self, pattern: PatternLike, replacement: str) -> None:
        """Add a humanize rule.

            human(re.compile(r"(?i)(\\w+)_cnt$"), r"\\1_count")
            human("legacy_col_person_name", "Name")
        """
        rule = Rule.build(pattern, replacement)
        with self._lock:
            self.humans.prepend(rule)
        logger.debug("[%s] human %r -> %r", self.locale, pattern, replacement)

    def clear(self, scope: Union[str, RuleScope] = RuleScope.ALL) -> None:
        """Empty one rule category, or all of them (acronyms are kept)."""
        try:
            scope = RuleScope(scope)
        except ValueError:
            raise UnknownRuleScope(scope) from None

        with self._lock:
            if scope in (RuleScope.ALL, RuleScope.PLURALS):
                self.plurals.clear()
            if scope in (RuleScope.ALL, RuleScope.SINGULARS):
                self.singulars.clear()
            if scope in (RuleScope.ALL, RuleScope.UNCOUNTABLES):
                self.uncountables.clear()
            if scope in (RuleScope.ALL, RuleScope.HUMANS):
                self.humans.clear()
        logger.debug("[%s] cleared %s", self.locale, scope.value)

"""Locale -> InflectionRuleSet registry.

A registry is an ordinary object owned by whoever sets up the program; there is
no module-level instance. Rule sets are created on first use and live as long
as the registry does.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List, Optional, Union

from .defaults import seed_english
from .inflections import InflectionRuleSet, PatternLike
from .models import RuleScope

logger = logging.getLogger(__name__)

Seeder = Callable[[InflectionRuleSet], None]


class LocaleRegistry:
    def __init__(self, seeders: Optional[Dict[str, Seeder]] = None):
        # Only English ships with rules; other locales start empty
        self._seeders: Dict[str, Seeder] = {"en": seed_english} if seeders is None else dict(seeders)
        self._rule_sets: Dict[str, InflectionRuleSet] = {}
        self._lock = threading.Lock()

    def resolve(self, locale: str) -> InflectionRuleSet:
        """Return the rule set for locale, creating and seeding it on first use."""
        if not isinstance(locale, str) or not locale:
            raise ValueError(f"locale must be a non-empty string, got {locale!r}")

        rule_set = self._rule_sets.get(locale)
        if rule_set is not None:
            return rule_set

        with self._lock:
            # Another thread may have created it while we waited
            rule_set = self._rule_sets.get(locale)
            if rule_set is None:
                rule_set = InflectionRuleSet(locale)
                seeder = self._seeders.get(locale)
                if seeder is not None:
                    seeder(rule_set)
                self._rule_sets[locale] = rule_set
                logger.debug("Created rule set for locale %s (seeded: %s)", locale, seeder is not None)
        return rule_set

    def __contains__(self, locale) -> bool:
        return locale in self._rule_sets

    def locales(self) -> List[str]:
        """Locales that have been resolved so far."""
        return list(self._rule_sets)

    # ─── Registration shortcuts ───

    def register_plural(self, locale: str, pattern: PatternLike, replacement: str) -> None:
        self.resolve(locale).plural(pattern, replacement)

    def register_singular(self, locale: str, pattern: PatternLike, replacement: str) -> None:
        self.resolve(locale).singular(pattern, replacement)

    def register_irregular(self, locale: str, singular: str, plural: str) -> None:
        self.resolve(locale).irregular(singular, plural)

    def register_acronym(self, locale: str, word: str) -> None:
        self.resolve(locale).acronym(word)

    def register_uncountable(self, locale: str, *words) -> None:
        self.resolve(locale).uncountable(*words)

    def register_human(self, locale: str, pattern: PatternLike, replacement: str) -> None:
        self.resolve(locale).human(pattern, replacement)

    def clear_rules(self, locale: str, scope: Union[str, RuleScope] = RuleScope.ALL) -> None:
        self.resolve(locale).clear(scope)


def build_default_registry() -> LocaleRegistry:
    """A registry whose "en" locale carries the built-in English rules."""
    return LocaleRegistry()

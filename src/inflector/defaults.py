"""Built-in English inflection table.

Rules are registered oldest-first; since every registration goes to the front
of its list, the last rule below is the first one tried. A rule whose rewrite
leaves the word unchanged does not count as applied, so the catch-all rules
carry lookbehinds instead of relying on identity rules to shield words that
are already inflected.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from .inflections import InflectionRuleSet

# Regex sources; seed_english compiles them
PLURALS: List[Tuple[str, str]] = [
    (r"(?i)(?<!s)$", "s"),
    (r"(?i)^(ax|test)is$", r"\1es"),
    (r"(?i)(octop|vir)us$", r"\1i"),
    (r"(?i)(alias|status)$", r"\1es"),
    (r"(?i)(bu)s$", r"\1ses"),
    (r"(?i)(buffal|tomat|potat)o$", r"\1oes"),
    (r"(?i)([ti])um$", r"\1a"),
    (r"(?i)sis$", "ses"),
    (r"(?i)(?:([^f])fe|([lr])f)$", r"\1\2ves"),
    (r"(?i)(hive)$", r"\1s"),
    (r"(?i)([^aeiouy]|qu)y$", r"\1ies"),
    (r"(?i)(x|ch|ss|sh)$", r"\1es"),
    (r"(?i)(matr|vert|ind)(?:ix|ex)$", r"\1ices"),
    (r"(?i)^(m|l)ouse$", r"\1ice"),
    (r"(?i)^(ox)$", r"\1en"),
    (r"(?i)(quiz)$", r"\1zes"),
]

# The catch-all leaves -ss, -us and -is endings alone (class, status, analysis)
SINGULARS: List[Tuple[str, str]] = [
    (r"(?i)(?<![sui])s$", ""),
    (r"(?i)([ti])a$", r"\1um"),
    (r"(?i)((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)ses$", r"\1sis"),
    (r"(?i)(^analy)ses$", r"\1sis"),
    (r"(?i)([^f])ves$", r"\1fe"),
    (r"(?i)(hive)s$", r"\1"),
    (r"(?i)(tive)s$", r"\1"),
    (r"(?i)([lr])ves$", r"\1f"),
    (r"(?i)([^aeiouy]|qu)ies$", r"\1y"),
    (r"(?i)(m)ovies$", r"\1ovie"),
    (r"(?i)(x|ch|ss|sh)es$", r"\1"),
    (r"(?i)^(m|l)ice$", r"\1ouse"),
    (r"(?i)(bus)es$", r"\1"),
    (r"(?i)(o)es$", r"\1"),
    (r"(?i)(shoe)s$", r"\1"),
    (r"(?i)(cris|test)es$", r"\1is"),
    (r"(?i)^(a)x[ie]s$", r"\1xis"),
    (r"(?i)(octop|vir)i$", r"\1us"),
    (r"(?i)(alias|status)es$", r"\1"),
    (r"(?i)^(ox)en", r"\1"),
    (r"(?i)(vert|ind)ices$", r"\1ex"),
    (r"(?i)(matr)ices$", r"\1ix"),
    (r"(?i)(quiz)zes$", r"\1"),
    (r"(?i)(database)s$", r"\1"),
]
# (singular, plural); human/humans must come after man/men to override it
IRREGULARS: List[Tuple[str, str]] = [
    ("person", "people"),
    ("man", "men"),
    ("human", "humans"),
    ("child", "children"),
    ("sex", "sexes"),
    ("move", "moves"),
    ("zombie", "zombies"),
]

UNCOUNTABLES: List[str] = [
    "equipment",
    "information",
    "rice",
    "money",
    "species",
    "series",
    "fish",
    "sheep",
    "jeans",
    "police",
    "news",
]


def seed_english(rule_set: InflectionRuleSet) -> None:
    """Load the built-in English rules into rule_set."""
    for pattern, replacement in PLURALS:
        rule_set.plural(re.compile(pattern), replacement)
    for pattern, replacement in SINGULARS:
        rule_set.singular(re.compile(pattern), replacement)
    for singular, plural in IRREGULARS:
        rule_set.irregular(singular, plural)
    rule_set.uncountable(UNCOUNTABLES)

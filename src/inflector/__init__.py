"""Locale-aware inflection: plural/singular forms, case conversion and naming helpers."""

from .config import DEFAULT_LOCALE, load_rules, load_rules_file
from .errors import (
    ConfigError,
    InflectionError,
    InvalidAcronym,
    InvalidIrregularPair,
    UnknownKey,
    UnknownRuleScope,
)
from .filters import remove, squish, truncate, truncate_words
from .inflections import InflectionRuleSet
from .inflector import Inflector
from .inquiry import StringInquirer
from .mappings import assert_valid_keys, deep_stringify_keys, stringify_keys, to_query
from .models import NAMESPACE_SEPARATOR, Rule, RuleScope
from .registry import LocaleRegistry, build_default_registry

__all__ = [
    "DEFAULT_LOCALE",
    "NAMESPACE_SEPARATOR",
    "ConfigError",
    "InflectionError",
    "InflectionRuleSet",
    "Inflector",
    "InvalidAcronym",
    "InvalidIrregularPair",
    "LocaleRegistry",
    "Rule",
    "RuleScope",
    "StringInquirer",
    "UnknownKey",
    "UnknownRuleScope",
    "assert_valid_keys",
    "build_default_registry",
    "deep_stringify_keys",
    "load_rules",
    "load_rules_file",
    "remove",
    "squish",
    "stringify_keys",
    "to_query",
    "truncate",
    "truncate_words",
]

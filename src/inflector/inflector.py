"""Facade binding a LocaleRegistry and a default locale to the transforms."""

from __future__ import annotations

from typing import Optional

from . import transforms
from .config import default_locale
from .inflections import InflectionRuleSet
from .registry import LocaleRegistry, build_default_registry


class Inflector:
    """Run transforms against the rule set of a locale.

        inflector = Inflector()
        inflector.rules().acronym("HTML")
        inflector.camelize("html")            # => "HTML"
        inflector.pluralize("ley", locale="es")

    Each instance owns its registry unless one is passed in, so two inflectors
    built without arguments never share registrations.
    """

    def __init__(self, registry: Optional[LocaleRegistry] = None, locale: Optional[str] = None):
        self.registry = registry if registry is not None else build_default_registry()
        self.locale = locale or default_locale()

    def rules(self, locale: Optional[str] = None) -> InflectionRuleSet:
        return self.registry.resolve(locale or self.locale)

    def pluralize(self, word: str, locale: Optional[str] = None) -> str:
        return transforms.pluralize(word, self.rules(locale))

    def singularize(self, word: str, locale: Optional[str] = None) -> str:
        return transforms.singularize(word, self.rules(locale))

    def camelize(self, term: str, uppercase_first_letter: bool = True, locale: Optional[str] = None) -> str:
        return transforms.camelize(term, self.rules(locale), uppercase_first_letter)

    def underscore(self, camel_cased_word: str, locale: Optional[str] = None) -> str:
        return transforms.underscore(camel_cased_word, self.rules(locale))

    def humanize(
        self,
        word: str,
        capitalize: bool = True,
        keep_id_suffix: bool = False,
        locale: Optional[str] = None,
    ) -> str:
        return transforms.humanize(word, self.rules(locale), capitalize=capitalize, keep_id_suffix=keep_id_suffix)

    def titleize(self, word: str, keep_id_suffix: bool = False, locale: Optional[str] = None) -> str:
        return transforms.titleize(word, self.rules(locale), keep_id_suffix=keep_id_suffix)

    def tableize(self, class_name: str, locale: Optional[str] = None) -> str:
        return transforms.tableize(class_name, self.rules(locale))

    def classify(self, table_name: str, locale: Optional[str] = None) -> str:
        return transforms.classify(table_name, self.rules(locale))

    def foreign_key(
        self,
        class_name: str,
        separate_class_name_and_id_with_underscore: bool = True,
        locale: Optional[str] = None,
    ) -> str:
        return transforms.foreign_key(
            class_name, self.rules(locale), separate_class_name_and_id_with_underscore
        )

    # These need no rules
    upcase_first = staticmethod(transforms.upcase_first)
    dasherize = staticmethod(transforms.dasherize)
    demodulize = staticmethod(transforms.demodulize)
    deconstantize = staticmethod(transforms.deconstantize)
    ordinal = staticmethod(transforms.ordinal)
    ordinalize = staticmethod(transforms.ordinalize)

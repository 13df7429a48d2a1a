"""Settings and loading of extra inflection rules from JSON documents.

A rule document maps locales to sections:

    {
      "en": {
        "acronyms": ["HTML", "API"],
        "plurals": [["(?i)(octop)us$", "\\\\1i"]],
        "singulars": [{"literal": "data", "replacement": "datum"}],
        "irregulars": [["cow", "kine"]],
        "uncountables": ["metadata"],
        "humans": [["(?i)_cnt$", "_count"]]
      }
    }

Sections are applied in the order of SECTION_ORDER regardless of their order in
the file; entries within a section are applied in file order.

In plurals, singulars and humans a two-item list is a regular expression source
and its replacement, and an object is a literal rule matching the exact word.
"""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Mapping, Union

from .errors import ConfigError, InflectionError
from .inflections import InflectionRuleSet
from .models import RuleScope
from .registry import LocaleRegistry

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALE_ENV_VAR = "INFLECTOR_LOCALE"
RULE_SCOPES = tuple(scope.value for scope in RuleScope)

SECTION_ORDER = ("acronyms", "plurals", "singulars", "humans", "irregulars", "uncountables")


def default_locale() -> str:
    """Locale used when none is given: $INFLECTOR_LOCALE, else DEFAULT_LOCALE."""
    return os.environ.get(LOCALE_ENV_VAR) or DEFAULT_LOCALE


def load_rules(document: Mapping[str, Any], registry: LocaleRegistry) -> None:
    """Apply a rule document (already parsed) to registry."""
    if not isinstance(document, Mapping):
        raise ConfigError(f"rule document must be an object, got {type(document).__name__}")

    for locale, sections in document.items():
        if not isinstance(sections, Mapping):
            raise ConfigError(f"[{locale}] sections must be an object")
        unknown = set(sections) - set(SECTION_ORDER)
        if unknown:
            raise ConfigError(f"[{locale}] unknown sections: {', '.join(sorted(unknown))}")

        rule_set = registry.resolve(locale)
        for section in SECTION_ORDER:
            entries = sections.get(section)
            if entries is None:
                continue
            if not isinstance(entries, list):
                raise ConfigError(f"[{locale}] {section} must be a list")
            for entry in entries:
                try:
                    _apply_entry(rule_set, section, entry)
                except ConfigError:
                    raise
                except (re.error, InflectionError, TypeError, ValueError) as e:
                    raise ConfigError(f"[{locale}] bad {section} entry {entry!r}: {e}") from e
            logger.debug("[%s] loaded %d %s", locale, len(entries), section)


def load_rules_file(path: Union[str, Path], registry: LocaleRegistry) -> None:
    """Read a JSON rule document from path and apply it to registry."""
    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in {path}: {e}") from e
    logger.debug("Loading inflection rules from %s", path)
    load_rules(document, registry)


def _apply_entry(rule_set: InflectionRuleSet, section: str, entry: Any) -> None:
    if section == "acronyms":
        rule_set.acronym(_require_str(entry))
    elif section == "uncountables":
        rule_set.uncountable(_require_str(entry))
    elif section == "irregulars":
        singular, plural = _pair(entry)
        rule_set.irregular(singular, plural)
    else:
        register = {
            "plurals": rule_set.plural,
            "singulars": rule_set.singular,
            "humans": rule_set.human,
        }[section]
        if isinstance(entry, Mapping):
            if set(entry) != {"literal", "replacement"}:
                raise ConfigError(f"literal rule needs exactly 'literal' and 'replacement': {entry!r}")
            register(_require_str(entry["literal"]), _require_str(entry["replacement"]))
        else:
            pattern, replacement = _pair(entry)
            register(re.compile(pattern), replacement)


def _pair(entry: Any):
    if not isinstance(entry, list) or len(entry) != 2:
        raise ConfigError(f"expected a [two-item] list, got {entry!r}")
    return _require_str(entry[0]), _require_str(entry[1])


def _require_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"expected a string, got {value!r}")
    return value


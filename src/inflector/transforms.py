"""String transforms driven by an InflectionRuleSet.

Every function here is pure: it reads the rule set it is given and never
registers anything. Use ``Inflector`` for locale resolution.

    pluralize("post", rules)                   # => "posts"
    camelize("active_model/errors", rules)     # => "ActiveModel::Errors"
    underscore("ActiveModel::Errors", rules)   # => "active_model/errors"

camelize and underscore are not exact inverses:

    camelize(underscore("SSLError", rules), rules)  # => "SslError"
"""

from __future__ import annotations

import re
from typing import Iterable

from .inflections import InflectionRuleSet
from .models import NAMESPACE_SEPARATOR, Rule

_NEEDS_UNDERSCORE_RE = re.compile(r"[A-Z-]|" + re.escape(NAMESPACE_SEPARATOR))
_CAMEL_FIRST_RE = re.compile(r"^[a-z\d]*")
_CAMEL_HUMP_RE = re.compile(r"(?:_|(/))([a-z\d]*)", re.IGNORECASE)
_ACRONYM_RUN_RE = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_LOWER_UPPER_RE = re.compile(r"([a-z\d])([A-Z])")
_WORD_RUN_RE = re.compile(r"([a-z\d]*)", re.IGNORECASE)
_TITLE_LETTER_RE = re.compile(r"\b(?<!\w['’`])[a-z]")


def apply_inflections(
    word: str,
    rules: Iterable[Rule],
    rule_set: InflectionRuleSet,
    check_uncountable: bool = True,
) -> str:
    """Rewrite word with the first rule whose substitution changes it.

    A rule that matches but leaves the word as it was does not count, and the
    next rule is tried. Empty and uncountable words come back unchanged, as do
    words no rule changes.
    """
    if not word or (check_uncountable and rule_set.is_uncountable(word)):
        return word

    for rule in rules:
        result, changed = rule.apply(word)
        if changed:
            return result
    return word


def pluralize(word: str, rule_set: InflectionRuleSet) -> str:
    """pluralize("post") => "posts", pluralize("sheep") => "sheep", pluralize("CamelOctopus") => "CamelOctopi"."""
    return apply_inflections(word, rule_set.plurals, rule_set)


def singularize(word: str, rule_set: InflectionRuleSet) -> str:
    return apply_inflections(word, rule_set.singulars, rule_set)


def camelize(term: str, rule_set: InflectionRuleSet, uppercase_first_letter: bool = True) -> str:
    """Convert to UpperCamelCase (or lowerCamelCase), turning "/" into "::".

        camelize("active_model")               # => "ActiveModel"
        camelize("active_model", False)        # => "activeModel"
        camelize("active_model/errors", False) # => "activeModel::Errors"
    """
    acronyms = rule_set.acronyms
    string = str(term)

    if uppercase_first_letter:
        string = _CAMEL_FIRST_RE.sub(
            lambda m: acronyms.get(m.group(0)) or m.group(0).capitalize(), string, count=1
        )
    else:
        first_re = r"^(?:(?:%s)(?=\b|[A-Z_])|\w)" % acronyms.pattern
        string = re.sub(first_re, lambda m: m.group(0).lower(), string, count=1)

    def _hump(m: re.Match) -> str:
        chunk = m.group(2)
        return (m.group(1) or "") + (acronyms.get(chunk) or chunk.capitalize())

    string = _CAMEL_HUMP_RE.sub(_hump, string)
    return string.replace("/", NAMESPACE_SEPARATOR)


def underscore(camel_cased_word: str, rule_set: InflectionRuleSet) -> str:
    """Make an underscored, lowercase form, turning "::" into "/".

        underscore("ActiveModel::Errors")  # => "active_model/errors"
    """
    if not _NEEDS_UNDERSCORE_RE.search(camel_cased_word):
        return camel_cased_word

    word = camel_cased_word.replace(NAMESPACE_SEPARATOR, "/")
    acronym_re = r"(?:(?<=([A-Za-z\d]))|\b)(%s)(?=\b|[^a-z])" % rule_set.acronyms.pattern
    word = re.sub(acronym_re, lambda m: ("_" if m.group(1) else "") + m.group(2).lower(), word)
    word = _ACRONYM_RUN_RE.sub(r"\1_\2", word)
    word = _LOWER_UPPER_RE.sub(r"\1_\2", word)
    word = word.replace("-", "_")
    return word.lower()


def humanize(
    lower_case_and_underscored_word: str,
    rule_set: InflectionRuleSet,
    capitalize: bool = True,
    keep_id_suffix: bool = False,
) -> str:
    """Tweak an attribute name for display to end users.

    Applies the human rules, drops leading underscores and a trailing "_id",
    turns underscores into spaces, lowercases every word except registered
    acronyms and capitalizes the first word.

        humanize("employee_salary")                    # => "Employee salary"
        humanize("author_id")                          # => "Author"
        humanize("author_id", capitalize=False)        # => "author"
        humanize("_id")                                # => "Id"
        humanize("author_id", keep_id_suffix=True)     # => "Author Id"
    """
    result = apply_inflections(
        str(lower_case_and_underscored_word), rule_set.humans, rule_set, check_uncountable=False
    )

    result = re.sub(r"\A_+", "", result, count=1)
    has_id_suffix = result.endswith("_id")
    if not keep_id_suffix:
        result = re.sub(r"_id\Z", "", result)
    result = result.replace("_", " ")

    acronyms = rule_set.acronyms
    result = _WORD_RUN_RE.sub(lambda m: acronyms.lookup(m.group(0)) or m.group(0).lower(), result)

    if keep_id_suffix and has_id_suffix and result.endswith(" id"):
        result = result[:-2] + "Id"

    if capitalize:
        result = upcase_first(result)
    return result


def upcase_first(string: str) -> str:
    """upcase_first("what a Lovely Day") => "What a Lovely Day"."""
    return string[:1].upper() + string[1:]


def titleize(word: str, rule_set: InflectionRuleSet, keep_id_suffix: bool = False) -> str:
    """Capitalize all words for a nicer looking title.

        titleize("man from the boondocks")   # => "Man From The Boondocks"
        titleize("x-men: the last stand")    # => "X Men: The Last Stand"
        titleize("TheManWithoutAPast")       # => "The Man Without A Past"
    """
    humanized = humanize(underscore(word, rule_set), rule_set, keep_id_suffix=keep_id_suffix)
    return _TITLE_LETTER_RE.sub(lambda m: m.group(0).upper(), humanized)


def tableize(class_name: str, rule_set: InflectionRuleSet) -> str:
    """tableize("RawScaledScorer") => "raw_scaled_scorers"."""
    return pluralize(underscore(class_name, rule_set), rule_set)


def classify(table_name: str, rule_set: InflectionRuleSet) -> str:
    """Class name for a table name; a leading "schema." prefix is dropped.

        classify("ham_and_eggs")   # => "HamAndEgg"
        classify("myschema.posts") # => "Post"
    """
    name = re.sub(r".*\.", "", str(table_name), count=1)
    return camelize(singularize(name, rule_set), rule_set)


def dasherize(underscored_word: str) -> str:
    return underscored_word.replace("_", "-")


def demodulize(path: str) -> str:
    """demodulize("ActiveSupport::Inflector::Inflections") => "Inflections"."""
    path = str(path)
    i = path.rfind(NAMESPACE_SEPARATOR)
    if i == -1:
        return path
    return path[i + len(NAMESPACE_SEPARATOR):]


def deconstantize(path: str) -> str:
    """Remove the rightmost segment: "Net::HTTP" => "Net", "String" => ""."""
    path = str(path)
    i = path.rfind(NAMESPACE_SEPARATOR)
    return path[:i] if i != -1 else ""


def foreign_key(
    class_name: str,
    rule_set: InflectionRuleSet,
    separate_class_name_and_id_with_underscore: bool = True,
) -> str:
    """foreign_key("Admin::Post") => "post_id", foreign_key("Message", rules, False) => "messageid"."""
    suffix = "_id" if separate_class_name_and_id_with_underscore else "id"
    return underscore(demodulize(class_name), rule_set) + suffix


def ordinal(number) -> str:
    """Suffix for the position of number in a sequence: 1 => "st", 1002 => "nd", -11 => "th"."""
    abs_number = abs(int(number))
    if abs_number % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(abs_number % 10, "th")


def ordinalize(number) -> str:
    return f"{number}{ordinal(number)}"


def const_regexp(camel_cased_word: str) -> str:
    """Regex source matching a constant path part by part.

        const_regexp("Foo::Bar::Baz")  # => "Foo(::Bar(::Baz)?)?"
        const_regexp("::")             # => "::"
    """
    parts = camel_cased_word.split(NAMESPACE_SEPARATOR)
    if not any(parts):
        return re.escape(camel_cased_word)

    acc = parts.pop()
    for part in reversed(parts):
        if part:
            acc = f"{part}({NAMESPACE_SEPARATOR}{acc})?"
    return acc

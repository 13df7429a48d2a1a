"""Tests for inflector.rules containers and irregular rule generation."""

import re

import pytest

from inflector.errors import InvalidAcronym, InvalidIrregularPair
from inflector.models import Rule
from inflector.rules import (
    EMPTY_ACRONYM_PATTERN,
    AcronymTable,
    RuleList,
    UncountableSet,
    irregular_rules,
)


class TestRule:
    def test_compiled_pattern_expands_backreferences(self):
        rule = Rule.build(re.compile(r"(?i)(octop)us$"), r"\1i")
        assert rule.literal is None
        assert rule.apply("Octopus") == ("Octopi", True)

    def test_no_match(self):
        rule = Rule.build(re.compile(r"us$"), "i")
        assert rule.apply("post") == ("post", False)

    def test_match_that_keeps_the_word_is_not_a_change(self):
        rule = Rule.build(re.compile(r"(?i)s$"), "s")
        assert rule.apply("posts") == ("posts", False)

    def test_string_pattern_is_a_literal(self):
        rule = Rule.build("ox", "oxen")
        assert rule.literal == "ox"
        assert rule.apply("ox") == ("oxen", True)
        assert rule.apply("box") == ("box", False)
        assert rule.apply("Ox") == ("Ox", False)

    def test_literal_is_not_a_regex(self):
        rule = Rule.build("a.c", "x")
        assert rule.apply("abc") == ("abc", False)
        assert rule.apply("a.c") == ("x", True)

    def test_literal_replacement_is_verbatim(self):
        rule = Rule.build("x", r"\1y")
        assert rule.apply("x") == (r"\1y", True)

    def test_mentions(self):
        rule = Rule.build("data", "datum")
        assert rule.mentions("data")
        assert rule.mentions("datum")
        assert not rule.mentions("dat")
        assert not Rule.build(re.compile("data"), "x").mentions("data")


class TestRuleList:
    def test_prepend_puts_newest_first(self):
        rules = RuleList()
        first = Rule.build("a", "b")
        second = Rule.build("c", "d")
        rules.prepend(first)
        rules.prepend(second)
        assert list(rules) == [second, first]
        assert rules[0] is second
        assert len(rules) == 2

    def test_iteration_uses_snapshot(self):
        rules = RuleList([Rule.build("a", "b")])
        seen = []
        for rule in rules:
            rules.prepend(Rule.build("z", "z"))
            seen.append(rule)
        assert len(seen) == 1
        assert len(rules) == 2

    def test_remove_word(self):
        rules = RuleList([
            Rule.build("data", "datum"),
            Rule.build(re.compile("x"), "data"),
            Rule.build(re.compile("y"), "z"),
        ])
        assert rules.remove_word("data") == 2
        assert [r.replacement for r in rules] == ["z"]

    def test_clear(self):
        rules = RuleList([Rule.build("a", "b")])
        rules.clear()
        assert len(rules) == 0


class TestUncountableSet:
    def test_add_lowercases_and_flattens(self):
        words = UncountableSet()
        added = words.add("Fish", ["Rice", ["money"]])
        assert added == ["fish", "rice", "money"]
        assert "fish" in words
        assert "FISH" in words
        assert len(words) == 3

    def test_duplicates_are_ignored(self):
        words = UncountableSet()
        words.add("fish")
        assert words.add("FISH") == []
        assert len(words) == 1

    def test_suffix_match_is_case_insensitive(self):
        words = UncountableSet()
        words.add("fish")
        assert words.is_uncountable("fish")
        assert words.is_uncountable("Fish")
        assert words.is_uncountable("blue fish")
        assert words.is_uncountable("blue_fish") is False
        assert words.is_uncountable("swordfish") is False
        assert words.is_uncountable("fishes") is False

    def test_discard(self):
        words = UncountableSet()
        words.add("fish", "rice")
        words.discard("Fish")
        words.discard("never-added")
        assert list(words) == ["rice"]
        assert not words.is_uncountable("fish")


class TestAcronymTable:
    def test_empty_pattern_matches_nothing(self):
        table = AcronymTable()
        assert table.pattern == EMPTY_ACRONYM_PATTERN
        assert re.search(table.pattern, "a b ab ba") is None

    def test_add_and_lookup(self):
        table = AcronymTable()
        table.add("HTML")
        assert "html" in table
        assert table.get("html") == "HTML"
        assert table.get("HTML") is None
        assert table.lookup("Html") == "HTML"
        assert table.lookup("xml") is None

    def test_pattern_prefers_longest(self):
        table = AcronymTable()
        table.add("HTTP")
        table.add("HTTPS")
        assert table.pattern == "HTTPS|HTTP"

    def test_readding_replaces_display_form(self):
        table = AcronymTable()
        table.add("Api")
        table.add("API")
        assert len(table) == 1
        assert table.get("api") == "API"
        assert table.pattern == "API"

    @pytest.mark.parametrize("word", ["", None])
    def test_empty_acronym_rejected(self, word):
        table = AcronymTable()
        table.add("HTML")
        with pytest.raises(InvalidAcronym):
            table.add(word)
        assert len(table) == 1
        assert table.pattern == "HTML"

    def test_clear(self):
        table = AcronymTable()
        table.add("HTML")
        table.clear()
        assert len(table) == 0
        assert table.pattern == EMPTY_ACRONYM_PATTERN


class TestIrregularRules:
    def test_shared_first_letter_generates_two_each(self):
        plurals, singulars = irregular_rules("person", "people")
        assert len(plurals) == 2
        assert len(singulars) == 2

    def test_shared_first_letter_keeps_case(self):
        plurals, singulars = irregular_rules("person", "people")
        assert plurals[0].apply("Person") == ("People", True)
        assert plurals[0].apply("salesperson") == ("salespeople", True)
        assert plurals[1].apply("people") == ("people", False)
        assert singulars[1].apply("People") == ("Person", True)
        assert singulars[0].apply("person") == ("person", False)

    def test_different_first_letter_generates_four_each(self):
        plurals, singulars = irregular_rules("cow", "kine")
        assert len(plurals) == 4
        assert len(singulars) == 4

    def test_different_first_letter_case_variants(self):
        plurals, singulars = irregular_rules("cow", "kine")
        # Order: singular upper, singular lower, plural upper, plural lower
        assert plurals[0].apply("Cow") == ("Kine", True)
        assert plurals[0].apply("cow") == ("cow", False)
        assert plurals[1].apply("cow") == ("kine", True)
        assert plurals[1].apply("cOW") == ("kine", True)
        assert plurals[2].apply("Kine") == ("Kine", False)
        assert singulars[2].apply("Kine") == ("Cow", True)
        assert singulars[3].apply("kine") == ("cow", True)

    @pytest.mark.parametrize("singular, plural", [("", "people"), ("person", ""), ("", "")])
    def test_empty_word_rejected(self, singular, plural):
        with pytest.raises(InvalidIrregularPair):
            irregular_rules(singular, plural)

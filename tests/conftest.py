"""Shared fixtures: every test gets its own registry, so registrations never leak."""

import pytest

from inflector.inflections import InflectionRuleSet
from inflector.registry import build_default_registry


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def en(registry):
    """The seeded English rule set of a fresh registry."""
    return registry.resolve("en")


@pytest.fixture
def bare():
    """A rule set with no rules at all."""
    return InflectionRuleSet("xx")

"""Exceptions raised while registering or loading inflection rules."""


class InflectionError(Exception):
    """Base class for all inflector errors."""


class InvalidIrregularPair(InflectionError, ValueError):
    """An irregular pair was given an empty singular or plural word."""

    def __init__(self, singular: str, plural: str):
        super().__init__(
            f"irregular pair needs two non-empty words, got {singular!r} / {plural!r}"
        )
        self.singular = singular
        self.plural = plural


class UnknownRuleScope(InflectionError, ValueError):
    def __init__(self, scope):
        super().__init__(f"unknown rule scope: {scope!r}")
        self.scope = scope


class ConfigError(InflectionError, ValueError):
    """A rule document could not be read or applied."""


class InvalidAcronym(InflectionError, ValueError):
    """An acronym was registered as an empty string."""

    def __init__(self, word: str):
        super().__init__(f"acronym must be a non-empty string, got {word!r}")
        self.word = word


class UnknownKey(InflectionError, ValueError):
    """A mapping carried a key outside the accepted set."""

    def __init__(self, key, valid_keys):
        valid = ", ".join(repr(k) for k in valid_keys)
        super().__init__(f"Unknown key: {key!r}. Valid keys are: {valid}")
        self.key = key
        self.valid_keys = tuple(valid_keys)

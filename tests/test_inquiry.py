"""Tests for inflector.inquiry."""

from inflector import StringInquirer


class TestStringInquirer:
    def test_matches(self):
        env = StringInquirer("production")
        assert env.matches("production")
        assert not env.matches("development")
        assert not env.matches("Production")

    def test_is_any(self):
        vehicle = StringInquirer("car")
        assert vehicle.is_any("bike", "car")
        assert not vehicle.is_any("bike", "boat")
        assert not vehicle.is_any()

    def test_equality_and_str(self):
        env = StringInquirer("test")
        assert env == "test"
        assert env == StringInquirer("test")
        assert env != "prod"
        assert str(env) == "test"
        assert env.value == "test"
        assert {env: 1}[StringInquirer("test")] == 1

    def test_no_dynamic_predicates(self):
        env = StringInquirer("production")
        assert not hasattr(env, "production")

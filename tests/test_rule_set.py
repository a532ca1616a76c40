"""Unit tests for RuleSet evaluation modes."""

import pytest

from developer_api.validators import (
    FieldFailure,
    RuleMode,
    RuleSet,
    ValidatorConfigError,
    characters_only,
    length_between,
    not_empty,
)


def first_name_rules(mode: RuleMode) -> RuleSet:
    return RuleSet(
        "FirstName",
        [not_empty(), length_between(2, 10), characters_only()],
        mode=mode,
    )


class TestShortCircuit:
    """Short-circuit stops at the first failing rule"""

    def test_is_default_mode(self):
        assert RuleSet("FirstName", [not_empty()]).mode is RuleMode.SHORT_CIRCUIT

    def test_empty_string_reports_only_required(self):
        failures = first_name_rules(RuleMode.SHORT_CIRCUIT).evaluate("")
        assert failures == [FieldFailure(field="FirstName", code="required_first_name")]

    def test_none_reports_only_required(self):
        failures = first_name_rules(RuleMode.SHORT_CIRCUIT).evaluate(None)
        assert [f.code for f in failures] == ["required_first_name"]

    def test_length_failure_hides_character_failure(self):
        failures = first_name_rules(RuleMode.SHORT_CIRCUIT).evaluate("1")
        assert [f.code for f in failures] == ["first_name_length_should_be_between_2_and_10"]

    def test_valid_value_has_no_failures(self):
        assert first_name_rules(RuleMode.SHORT_CIRCUIT).evaluate("Ada") == []


class TestAccumulate:
    """Accumulate runs every rule"""

    def test_empty_string_reports_required_and_length(self):
        failures = first_name_rules(RuleMode.ACCUMULATE).evaluate("")
        assert [f.code for f in failures] == [
            "required_first_name",
            "first_name_length_should_be_between_2_and_10",
        ]

    def test_failures_keep_declaration_order(self):
        failures = first_name_rules(RuleMode.ACCUMULATE).evaluate("1")
        assert [f.code for f in failures] == [
            "first_name_length_should_be_between_2_and_10",
            "first_name_should_be_characters_only",
        ]

    def test_mode_accepts_string_value(self):
        rule_set = RuleSet("FirstName", [not_empty()], mode="accumulate")
        assert rule_set.mode is RuleMode.ACCUMULATE


class TestConfiguration:
    """Malformed rule sets fail at construction"""

    def test_no_rules(self):
        with pytest.raises(ValidatorConfigError):
            RuleSet("FirstName", [])

    def test_blank_field(self):
        with pytest.raises(ValidatorConfigError):
            RuleSet(" ", [not_empty()])

    def test_non_rule_entry(self):
        with pytest.raises(ValidatorConfigError):
            RuleSet("FirstName", [not_empty(), "length"])

    def test_unknown_mode(self):
        with pytest.raises(ValidatorConfigError):
            RuleSet("FirstName", [not_empty()], mode="sometimes")

    def test_non_callable_accessor(self):
        with pytest.raises(ValidatorConfigError):
            RuleSet("FirstName", [not_empty()], accessor="first_name")

    def test_unbound_extract_raises(self):
        with pytest.raises(ValidatorConfigError):
            RuleSet("FirstName", [not_empty()]).extract({"FirstName": "Ada"})

    def test_rules_are_stored_as_tuple(self):
        rules = [not_empty()]
        rule_set = RuleSet("FirstName", rules)
        rules.append(length_between(2, 10))
        assert len(rule_set.rules) == 1


def test_describe_lists_resolved_codes():
    assert first_name_rules(RuleMode.SHORT_CIRCUIT).describe() == {
        "field": "FirstName",
        "mode": "short_circuit",
        "rules": [
            {"name": "not_empty", "code": "required_first_name"},
            {"name": "length_between", "code": "first_name_length_should_be_between_2_and_10"},
            {"name": "characters_only", "code": "first_name_should_be_characters_only"},
        ],
    }

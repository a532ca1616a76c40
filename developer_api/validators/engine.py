"""Validator — composes per-field rule sets and produces a ValidationResult.

This is the main entry point of the validation engine. It runs every rule set
against a record and aggregates the failures.

Usage:
    validator = Validator(
        [
            RuleSet("FirstName", [not_empty(), length_between(2, 10), characters_only()]),
            RuleSet("Email", [email_address()]),
        ],
        record_type=Developer,
    )
    result = validator.validate(developer)
    if not result.is_valid:
        # Reject with result.failures
"""

from collections.abc import Mapping
from dataclasses import fields as dataclass_fields, is_dataclass, replace
from operator import attrgetter
from typing import Any, Iterable, Optional

from pydantic import BaseModel

from developer_api.validators.base import ValidatorConfigError
from developer_api.validators.models import FieldFailure, ValidationResult
from developer_api.validators.rule_set import RuleSet


def _read_field(record: Any, field: str) -> Any:
    """Default accessor for untyped records: mapping key, then attribute."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def _resolve_attribute(record_type: type, field: str) -> str:
    """Find the attribute of record_type that a rule set's field refers to.

    Pydantic models match on field name or alias, so wire names such as
    "FirstName" resolve to the "first_name" attribute.
    """
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        for name, info in record_type.model_fields.items():
            aliases = (info.alias, info.validation_alias, info.serialization_alias)
            if field == name or field in aliases:
                return name
    elif is_dataclass(record_type):
        names = {f.name for f in dataclass_fields(record_type)}
        if field in names:
            return field
    elif field in getattr(record_type, "__annotations__", {}) or hasattr(record_type, field):
        return field

    raise ValidatorConfigError(
        f"{getattr(record_type, '__name__', record_type)!s} has no field '{field}'"
    )


class Validator:
    """Runs a fixed, ordered collection of rule sets against records.

    Design principles:
        - Deterministic: same record → same result
        - Immutable: rule sets are bound at construction and never change
        - Thread-safe: validate() only reads shared state
        - Silent: failures are returned as data, nothing is logged or raised
    """

    def __init__(self, rule_sets: Iterable[RuleSet], record_type: Optional[type] = None):
        """Bind every rule set to an accessor.

        Args:
            rule_sets: Rule sets in the order their failures should be reported
            record_type: Optional record class. When given, every field named
                by a rule set must exist on it.

        Raises:
            ValidatorConfigError: If a rule set is malformed or names a field
                the record type does not have
        """
        rule_sets = tuple(rule_sets)
        if not rule_sets:
            raise ValidatorConfigError("Validator needs at least one rule set")
        for rule_set in rule_sets:
            if not isinstance(rule_set, RuleSet):
                raise ValidatorConfigError(f"Expected a RuleSet, got {rule_set!r}")

        self._record_type = record_type
        self._rule_sets = tuple(self._bind(rs, record_type) for rs in rule_sets)

    @staticmethod
    def _bind(rule_set: RuleSet, record_type: Optional[type]) -> RuleSet:
        if rule_set.accessor is not None:
            return rule_set

        if record_type is None:
            field = rule_set.field
            return replace(rule_set, accessor=lambda record: _read_field(record, field))

        field = rule_set.field
        attribute = _resolve_attribute(record_type, field)
        get_attribute = attrgetter(attribute)

        def _accessor(record: Any) -> Any:
            # Raw payloads may be keyed by wire name or attribute name
            if isinstance(record, Mapping):
                return record[field] if field in record else record.get(attribute)
            return get_attribute(record)

        return replace(rule_set, accessor=_accessor)

    @property
    def rule_sets(self) -> tuple[RuleSet, ...]:
        return self._rule_sets

    @property
    def record_type(self) -> Optional[type]:
        return self._record_type

    @property
    def fields(self) -> list[str]:
        return [rs.field for rs in self._rule_sets]

    def validate(self, record: Any) -> ValidationResult:
        """Run all rule sets against the record and produce a result.

        Every field is checked; a failure on one field never hides failures
        on another.

        Args:
            record: The record to check (instance of record_type, a mapping,
                or any object exposing the fields as attributes)

        Returns:
            ValidationResult with the verdict and failures in declaration order
        """
        failures: list[FieldFailure] = []

        for rule_set in self._rule_sets:
            value = rule_set.extract(record)
            failures.extend(rule_set.evaluate(value))

        return ValidationResult.build(failures)

    def describe(self) -> list[dict]:
        """Return the rule catalogue without evaluating anything."""
        return [rs.describe() for rs in self._rule_sets]

    def __repr__(self) -> str:
        record = getattr(self._record_type, "__name__", None)
        return f"Validator(record_type={record}, fields={self.fields})"

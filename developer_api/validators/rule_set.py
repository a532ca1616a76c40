"""RuleSet — the ordered rules bound to one field of a record."""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from developer_api.validators.base import Rule, ValidatorConfigError
from developer_api.validators.models import FieldFailure, RuleMode

Accessor = Callable[[Any], Any]


@dataclass(frozen=True)
class RuleSet:
    """Rules for a single field, evaluated in declaration order.

    In SHORT_CIRCUIT mode evaluation stops at the first failing rule, so
    later rules may assume the earlier ones held (e.g. a length check only
    ever sees a non-empty value). In ACCUMULATE mode every rule runs.

    accessor extracts the field value from a record. When omitted, the
    Validator binds one from the field name at construction time.
    """

    field: str
    rules: Sequence[Rule]
    mode: RuleMode = RuleMode.SHORT_CIRCUIT
    accessor: Optional[Accessor] = None

    def __post_init__(self):
        if not isinstance(self.field, str) or not self.field.strip():
            raise ValidatorConfigError("RuleSet field name must be a non-empty string")

        rules = tuple(self.rules)
        if not rules:
            raise ValidatorConfigError(f"RuleSet for '{self.field}' has no rules")
        for rule in rules:
            if not isinstance(rule, Rule):
                raise ValidatorConfigError(
                    f"RuleSet for '{self.field}' contains a non-rule: {rule!r}"
                )

        try:
            mode = RuleMode(self.mode)
        except ValueError:
            raise ValidatorConfigError(
                f"Unknown rule mode '{self.mode}' for field '{self.field}'"
            ) from None

        if self.accessor is not None and not callable(self.accessor):
            raise ValidatorConfigError(f"Accessor for '{self.field}' is not callable")

        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "rules", rules)
        object.__setattr__(self, "mode", mode)

    def evaluate(self, value: Any) -> list[FieldFailure]:
        """Run the rules against an already extracted value."""
        failures: list[FieldFailure] = []

        for rule in self.rules:
            outcome = rule.evaluate(value, self.field)
            if outcome.passed:
                continue
            failures.append(FieldFailure(field=self.field, code=outcome.code))
            if self.mode is RuleMode.SHORT_CIRCUIT:
                break

        return failures

    def extract(self, record: Any) -> Any:
        if self.accessor is None:
            raise ValidatorConfigError(
                f"RuleSet for '{self.field}' is not bound to a record accessor"
            )
        return self.accessor(record)

    def describe(self) -> dict:
        """Rule catalogue entry for this field."""
        return {
            "field": self.field,
            "mode": self.mode.value,
            "rules": [
                {"name": rule.name, "code": rule.resolve_code(self.field)}
                for rule in self.rules
            ],
        }

"""Rule — the atomic check of the validation engine.

A rule is a named predicate over one field value plus the failure code it
reports. Rules are immutable and hold no per-record state, so one instance
can be shared by any number of rule sets and validators.

Codes may contain a ``{field}`` placeholder which is filled with the snake
case form of the field the rule is bound to (``FirstName`` -> ``first_name``).
"""

from dataclasses import dataclass, replace
import re
from typing import Any, Callable

from developer_api.validators.models import RuleOutcome

FIELD_PLACEHOLDER = "{field}"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


class ValidatorConfigError(ValueError):
    """Raised when rules or validators are declared incorrectly.

    Always raised while building a rule, rule set or validator, never from
    validate(). Treat it as fatal at startup.
    """


def to_snake_case(name: str) -> str:
    """Convert a field name to the snake_case form used in failure codes."""
    name = re.sub(r"[\s\-.]+", "_", name.strip())
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(frozen=True)
class Rule:
    """A single named check against one field value.

    Contract:
        - evaluate() is pure: no I/O, no side effects
        - evaluate() never raises for unexpected input; a predicate that
          chokes on a value of the wrong type counts as a failure
        - None is skipped (passes) unless skip_none is False
    """

    name: str
    predicate: Callable[[Any], bool]
    code: str
    skip_none: bool = True

    def __post_init__(self):
        if not self.name:
            raise ValidatorConfigError("Rule name must be a non-empty string")
        if not callable(self.predicate):
            raise ValidatorConfigError(f"Rule '{self.name}' predicate is not callable")
        if not isinstance(self.code, str) or not self.code.strip():
            raise ValidatorConfigError(f"Rule '{self.name}' needs a non-empty failure code")

    def evaluate(self, value: Any, field: str) -> RuleOutcome:
        """Run the predicate against a value bound to the given field."""
        if value is None and self.skip_none:
            return RuleOutcome.ok()

        try:
            passed = bool(self.predicate(value))
        except (TypeError, ValueError, AttributeError):
            passed = False

        if passed:
            return RuleOutcome.ok()
        return RuleOutcome.fail(self.resolve_code(field))

    def resolve_code(self, field: str) -> str:
        return self.code.replace(FIELD_PLACEHOLDER, to_snake_case(field))

    def with_code(self, code: str) -> "Rule":
        """Return a copy of this rule reporting a different failure code."""
        return replace(self, code=code)

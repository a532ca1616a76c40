"""Validation models — rule modes, rule outcomes, field failures, and the result object.

Failures are plain data: the engine never raises for invalid input and never
renders human-readable text, only stable snake_case codes.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class RuleMode(str, Enum):
    """How a RuleSet reacts to a failing rule."""

    SHORT_CIRCUIT = "short_circuit"  # Stop at the first failure for the field
    ACCUMULATE = "accumulate"        # Run every rule, report every failure


class RuleOutcome(BaseModel):
    """Result of evaluating a single rule against a single value."""

    passed: bool
    code: Optional[str] = None

    model_config = {"frozen": True}

    @classmethod
    def ok(cls) -> "RuleOutcome":
        return _PASS

    @classmethod
    def fail(cls, code: str) -> "RuleOutcome":
        return cls(passed=False, code=code)


_PASS = RuleOutcome(passed=True)


class FieldFailure(BaseModel):
    """A single (field, code) validation failure."""

    field: str
    code: str

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    """Outcome of Validator.validate() — verdict plus failures in declaration order."""

    is_valid: bool
    failures: tuple[FieldFailure, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _verdict_matches_failures(self) -> "ValidationResult":
        if self.is_valid == bool(self.failures):
            raise ValueError("is_valid must be True exactly when there are no failures")
        return self

    @classmethod
    def build(cls, failures: list[FieldFailure]) -> "ValidationResult":
        """Build a result whose verdict is derived from the failures."""
        return cls(is_valid=not failures, failures=tuple(failures))

    def __bool__(self) -> bool:
        return self.is_valid

    def codes(self) -> list[str]:
        return [f.code for f in self.failures]

    def by_field(self) -> dict[str, list[str]]:
        """Group failure codes per field, preserving order."""
        grouped: dict[str, list[str]] = {}
        for failure in self.failures:
            grouped.setdefault(failure.field, []).append(failure.code)
        return grouped

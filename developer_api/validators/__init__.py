"""Field validation engine — declarative per-field rules for incoming records.

Usage:
    from developer_api.validators import developer_validator

    result = developer_validator.validate(developer)
    if not result.is_valid:
        # Reject with result.failures
"""

from developer_api.validators.base import Rule, ValidatorConfigError, to_snake_case
from developer_api.validators.developer import build_developer_validator, developer_validator
from developer_api.validators.engine import Validator
from developer_api.validators.models import FieldFailure, RuleMode, RuleOutcome, ValidationResult
from developer_api.validators.rule_set import RuleSet
from developer_api.validators.rules import (
    characters_only,
    email_address,
    length_between,
    must,
    not_empty,
)

__all__ = [
    "Rule",
    "RuleSet",
    "RuleMode",
    "RuleOutcome",
    "Validator",
    "ValidationResult",
    "FieldFailure",
    "ValidatorConfigError",
    "build_developer_validator",
    "developer_validator",
    "characters_only",
    "email_address",
    "length_between",
    "must",
    "not_empty",
    "to_snake_case",
]

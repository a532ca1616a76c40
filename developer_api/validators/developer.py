"""Developer validator — the rule declarations for the Developer record."""

from developer_api.models.requests import Developer
from developer_api.validators.engine import Validator
from developer_api.validators.models import RuleMode
from developer_api.validators.rule_set import RuleSet
from developer_api.validators.rules import (
    characters_only,
    email_address,
    length_between,
    not_empty,
)

FIRST_NAME_MIN_LENGTH = 2
FIRST_NAME_MAX_LENGTH = 10


def build_developer_validator(first_name_mode: RuleMode = RuleMode.SHORT_CIRCUIT) -> Validator:
    """Build the Developer validator.

    FirstName: required, 2-10 characters, letters only.
    Email: valid address format. No presence rule, so a missing email passes
    while an empty string does not.
    """
    return Validator(
        [
            RuleSet(
                "FirstName",
                [
                    not_empty(),
                    length_between(FIRST_NAME_MIN_LENGTH, FIRST_NAME_MAX_LENGTH),
                    characters_only(),
                ],
                mode=first_name_mode,
            ),
            RuleSet("Email", [email_address()]),
        ],
        record_type=Developer,
    )


# Module-level singleton
developer_validator = build_developer_validator()

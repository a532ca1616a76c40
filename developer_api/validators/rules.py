"""Standard rule factories — the building blocks rule sets are declared with.

Every factory returns a plain Rule, so custom checks built with must() are
indistinguishable from the standard ones.

Null policy: not_empty() fails on None; every other rule passes on None and
leaves presence checks to not_empty().
"""

from collections.abc import Sized
from typing import Any, Callable

from email_validator import EmailNotValidError, validate_email

from developer_api.validators.base import Rule, ValidatorConfigError


def _has_content(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, Sized):
        return len(value) > 0
    return True


def not_empty() -> Rule:
    """Fails on None, empty or whitespace-only strings, and empty collections."""
    return Rule(
        name="not_empty",
        predicate=_has_content,
        code="required_{field}",
        skip_none=False,
    )


def length_between(min_length: int, max_length: int) -> Rule:
    """Fails when the string length falls outside [min_length, max_length]."""
    for bound in (min_length, max_length):
        if not isinstance(bound, int) or isinstance(bound, bool):
            raise ValidatorConfigError(f"Length bounds must be integers, got {bound!r}")
    if min_length < 0 or max_length < min_length:
        raise ValidatorConfigError(
            f"Invalid length bounds: min={min_length}, max={max_length}"
        )

    def _within_bounds(value: Any) -> bool:
        return isinstance(value, str) and min_length <= len(value) <= max_length

    return Rule(
        name="length_between",
        predicate=_within_bounds,
        code=f"{{field}}_length_should_be_between_{min_length}_and_{max_length}",
    )


def characters_only(char_predicate: Callable[[str], bool] = str.isalpha) -> Rule:
    """Fails when any character fails char_predicate. The empty string passes."""
    if not callable(char_predicate):
        raise ValidatorConfigError("characters_only() needs a callable character predicate")

    def _all_characters(value: Any) -> bool:
        return isinstance(value, str) and all(char_predicate(c) for c in value)

    return Rule(
        name="characters_only",
        predicate=_all_characters,
        code="{field}_should_be_characters_only",
    )


def _is_email(value: Any) -> bool:
    if not isinstance(value, str) or any(c.isspace() for c in value):
        return False
    try:
        validated = validate_email(
            value, check_deliverability=False, globally_deliverable=False
        )
    except EmailNotValidError:
        return False
    return "." in validated.domain


def email_address() -> Rule:
    """Fails unless the value is a syntactically valid address (local@domain.tld).

    Reserved domains such as .local or .test are accepted; the domain only
    needs a dot. The empty string has no '@' and therefore fails.
    """
    return Rule(
        name="email_address",
        predicate=_is_email,
        code="{field}_invalid_email",
    )


def must(predicate: Callable[[Any], bool], code: str, name: str = "must") -> Rule:
    """Wrap an arbitrary predicate as a rule."""
    return Rule(name=name, predicate=predicate, code=code)

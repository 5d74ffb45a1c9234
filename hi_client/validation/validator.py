"""Generic evaluator for the search field-presence rules.

Checks run in a fixed order so the first error is reproducible:

1. correlation identifier length
2. search record present
3. mandatory fields, in rule order
4. children required inside present groups, then at-least-one-of sets
5. forbidden fields, in canonical order

Nothing is mutated; calling ``validate_search`` twice on the same input
gives the same verdict.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from hi_client.exceptions import (
    AtLeastOneOfRequiredMissingError,
    ForbiddenFieldPresentError,
    InvalidDateTimeError,
    InvalidIdentifierLengthError,
    MissingRequiredFieldError,
)
from hi_client.models.search import SearchIHI
from hi_client.serialization import wire_path
from hi_client.validation.rules import DATE_TIME_FIELDS, SearchKind, get_rule

IDENTIFIER_LENGTH = 36


def resolve(search: SearchIHI, path: str) -> Any:
    """Follow a dotted attribute path; ``None`` if any step is absent."""
    value: Any = search
    for part in path.split("."):
        if value is None:
            return None
        value = getattr(value, part)
    return value


def is_populated(value: Any) -> bool:
    """True if a mandatory value counts as supplied."""
    if value is None:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def validate_identifier(
    identifier: str | None, field: str = "identifier", length: int = IDENTIFIER_LENGTH
) -> None:
    """Check an optional identifier is exactly ``length`` characters."""
    if identifier is None:
        return
    if len(identifier) != length:
        raise InvalidIdentifierLengthError(field, length, len(identifier))


def validate_required(field: str, value: Any) -> None:
    if not is_populated(value):
        raise MissingRequiredFieldError(field)


def validate_not_allowed(field: str, value: Any) -> None:
    # Any non-None value counts, including "" and False
    if value is not None:
        raise ForbiddenFieldPresentError(field)


def validate_at_least_one_required(candidates: dict[str, Any]) -> None:
    """Check that at least one of the named values is populated."""
    if not any(is_populated(value) for value in candidates.values()):
        raise AtLeastOneOfRequiredMissingError(tuple(candidates))


def parse_date_time(field: str, value: Any) -> date:
    """Interpret a required date-time value.

    Accepts ``date``/``datetime`` instances and ISO-8601 strings.

    Raises
    ------
    MissingRequiredFieldError
        If the value is absent.
    InvalidDateTimeError
        If the value cannot be read as a date-time.
    """
    validate_required(field, value)
    if isinstance(value, (date, datetime)):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise InvalidDateTimeError(field, value) from e
    raise InvalidDateTimeError(field, value)


def validate_search(
    kind: SearchKind | str, identifier: str | None, search: SearchIHI | None
) -> None:
    """Validate one search against the rule for ``kind``.

    Parameters
    ----------
    kind : SearchKind | str
        Search kind.
    identifier : str | None
        Correlation identifier; 36 characters when given.
    search : SearchIHI | None
        Criteria to check.

    Raises
    ------
    SearchValidationError
        The first rule violated, naming the field path.
    """
    rule = get_rule(kind)

    validate_identifier(identifier)
    validate_required("search", search)

    for path in rule.mandatory:
        value = resolve(search, path)
        if path in DATE_TIME_FIELDS:
            parse_date_time(wire_path(path), value)
        else:
            validate_required(wire_path(path), value)

    for group, child in rule.required_when_present:
        if resolve(search, group) is not None:
            validate_required(wire_path(child), resolve(search, child))

    for candidates in rule.at_least_one_of:
        validate_at_least_one_required(
            {wire_path(path): resolve(search, path) for path in candidates}
        )

    for name in rule.forbidden:
        validate_not_allowed(wire_path(name), getattr(search, name))

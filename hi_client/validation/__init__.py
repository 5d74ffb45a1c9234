"""Field-presence validation for consumer IHI searches."""

from hi_client.validation.rules import SEARCH_RULES, SearchKind, SearchRule, get_rule
from hi_client.validation.validator import (
    IDENTIFIER_LENGTH,
    parse_date_time,
    validate_identifier,
    validate_required,
    validate_search,
)

__all__ = [
    "IDENTIFIER_LENGTH",
    "SEARCH_RULES",
    "SearchKind",
    "SearchRule",
    "get_rule",
    "parse_date_time",
    "validate_identifier",
    "validate_required",
    "validate_search",
]

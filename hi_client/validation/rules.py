"""Field-presence rules for each consumer IHI search kind.

Each ``SearchRule`` lists attribute paths relative to ``SearchIHI``. Every
top-level field not reachable from ``mandatory`` or ``optional`` is
forbidden for that kind.
"""

from dataclasses import dataclass, fields

from hi_client.models.enums import SearchKind
from hi_client.models.search import SearchIHI

# Canonical order in which forbidden fields are reported
SEARCH_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(SearchIHI))

# Fields that must also parse as a date-time
DATE_TIME_FIELDS: frozenset[str] = frozenset({"date_of_birth"})

DEMOGRAPHICS = ("family_name", "date_of_birth", "sex")


@dataclass(frozen=True)
class SearchRule:
    """Declarative field partition for one search kind.

    Parameters
    ----------
    kind : SearchKind
        Search kind this rule applies to.
    mandatory : tuple[str, ...]
        Paths that must be present, checked in order. A nested path is
        listed after its parent group.
    optional : tuple[str, ...]
        Top-level fields that may be present.
    required_when_present : tuple[tuple[str, str], ...]
        ``(group, child)`` pairs: ``child`` is required if ``group`` is set.
    at_least_one_of : tuple[tuple[str, ...], ...]
        Sets of paths of which at least one must be present.
    """

    kind: SearchKind
    mandatory: tuple[str, ...]
    optional: tuple[str, ...] = ("given_name",)
    required_when_present: tuple[tuple[str, str], ...] = ()
    at_least_one_of: tuple[tuple[str, ...], ...] = ()

    @property
    def allowed(self) -> frozenset[str]:
        """Top-level fields that may be populated."""
        return frozenset(path.split(".", 1)[0] for path in self.mandatory + self.optional)

    @property
    def forbidden(self) -> tuple[str, ...]:
        """Top-level fields that must be absent, in canonical order."""
        allowed = self.allowed
        return tuple(name for name in SEARCH_FIELDS if name not in allowed)


SEARCH_RULES: dict[SearchKind, SearchRule] = {
    rule.kind: rule
    for rule in (
        SearchRule(
            kind=SearchKind.BASIC,
            mandatory=("ihi_number", *DEMOGRAPHICS),
        ),
        SearchRule(
            kind=SearchKind.BASIC_MEDICARE,
            mandatory=("medicare_card_number", *DEMOGRAPHICS),
            optional=("medicare_irn", "given_name"),
        ),
        SearchRule(
            kind=SearchKind.BASIC_DVA,
            mandatory=("dva_file_number", *DEMOGRAPHICS),
        ),
        SearchRule(
            kind=SearchKind.DETAILED,
            mandatory=DEMOGRAPHICS,
        ),
        SearchRule(
            kind=SearchKind.AUSTRALIAN_POSTAL_ADDRESS,
            mandatory=(
                *DEMOGRAPHICS,
                "australian_postal_address",
                "australian_postal_address.postal_delivery_group",
                "australian_postal_address.suburb",
                "australian_postal_address.postcode",
            ),
            required_when_present=(
                (
                    "australian_postal_address.postal_delivery_group",
                    "australian_postal_address.postal_delivery_group.postal_delivery_type",
                ),
            ),
        ),
        SearchRule(
            kind=SearchKind.AUSTRALIAN_STREET_ADDRESS,
            mandatory=(
                *DEMOGRAPHICS,
                "australian_street_address",
                "australian_street_address.postcode",
                "australian_street_address.suburb",
                "australian_street_address.street_name",
            ),
            required_when_present=(
                (
                    "australian_street_address.unit_group",
                    "australian_street_address.unit_group.unit_type",
                ),
                (
                    "australian_street_address.level_group",
                    "australian_street_address.level_group.level_type",
                ),
            ),
            at_least_one_of=(
                (
                    "australian_street_address.street_number",
                    "australian_street_address.lot_number",
                ),
            ),
        ),
        SearchRule(
            kind=SearchKind.INTERNATIONAL_ADDRESS,
            mandatory=(
                *DEMOGRAPHICS,
                "international_address",
                "international_address.international_address_line",
                "international_address.international_state_province",
                "international_address.international_postcode",
                "international_address.country",
            ),
        ),
    )
}


def get_rule(kind: SearchKind | str) -> SearchRule:
    """Look up the rule for a search kind (enum member or its value)."""
    return SEARCH_RULES[SearchKind(kind)]

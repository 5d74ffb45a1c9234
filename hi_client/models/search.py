"""Consumer IHI search criteria and batch entries."""

from dataclasses import dataclass
from datetime import date, datetime

from hi_client.models.enums import (
    LevelType,
    PostalDeliveryType,
    SearchKind,
    SexType,
    StateType,
    StreetSuffixType,
    StreetType,
    UnitType,
)


@dataclass
class PostalDeliveryGroup:
    """Postal delivery point (e.g. PO BOX 123)."""

    postal_delivery_type: PostalDeliveryType | None = None
    postal_delivery_number: str | None = None


@dataclass
class AustralianPostalAddress:
    """Australian postal address."""

    suburb: str | None = None
    state: StateType | None = None
    postcode: str | None = None
    postal_delivery_group: PostalDeliveryGroup | None = None


@dataclass
class UnitGroup:
    unit_type: UnitType | None = None
    unit_number: str | None = None


@dataclass
class LevelGroup:
    level_type: LevelType | None = None
    level_number: str | None = None


@dataclass
class AustralianStreetAddress:
    """Australian street address.

    ``street_type`` and ``street_suffix`` are only sent when set; at least
    one of ``street_number`` and ``lot_number`` must be given.
    """

    street_name: str | None = None
    suburb: str | None = None
    state: StateType | None = None
    postcode: str | None = None
    street_number: str | None = None
    lot_number: str | None = None
    street_type: StreetType | None = None
    street_suffix: StreetSuffixType | None = None
    address_site_name: str | None = None
    unit_group: UnitGroup | None = None
    level_group: LevelGroup | None = None

    @property
    def street_type_specified(self) -> bool:
        return self.street_type is not None

    @property
    def street_suffix_specified(self) -> bool:
        return self.street_suffix is not None


@dataclass
class InternationalAddress:
    """Address outside Australia. All fields are mandatory when present."""

    international_address_line: str | None = None
    international_state_province: str | None = None
    international_postcode: str | None = None
    country: str | None = None  # SACC country code


@dataclass
class SearchIHI:
    """Flat search criteria shared by every search kind.

    Which fields may be populated depends on the search kind; see
    ``hi_client.validation.rules``. ``None`` means absent.
    """

    ihi_number: str | None = None
    medicare_card_number: str | None = None
    medicare_irn: str | None = None
    dva_file_number: str | None = None
    family_name: str | None = None
    given_name: str | None = None
    date_of_birth: date | datetime | str | None = None
    sex: SexType | None = None
    history: bool | None = None
    australian_postal_address: AustralianPostalAddress | None = None
    australian_street_address: AustralianStreetAddress | None = None
    international_address: InternationalAddress | None = None


@dataclass(frozen=True)
class SearchIHIRequest:
    """One validated entry of a batch search.

    ``kind`` is the search kind the criteria were accepted as, so the entry
    can be checked again before it is sent.
    """

    request_identifier: str | None
    search: SearchIHI
    kind: SearchKind

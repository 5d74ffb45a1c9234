"""Domain models for the HI service client."""

from hi_client.models.base import (
    TIMESTAMP_VALIDITY,
    ProductType,
    QualifiedId,
    ServiceMessage,
    Timestamp,
)
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
from hi_client.models.search import (
    AustralianPostalAddress,
    AustralianStreetAddress,
    InternationalAddress,
    LevelGroup,
    PostalDeliveryGroup,
    SearchIHI,
    SearchIHIRequest,
    UnitGroup,
)

__all__ = [
    "TIMESTAMP_VALIDITY",
    "AustralianPostalAddress",
    "AustralianStreetAddress",
    "InternationalAddress",
    "LevelGroup",
    "LevelType",
    "PostalDeliveryGroup",
    "PostalDeliveryType",
    "ProductType",
    "QualifiedId",
    "SearchIHI",
    "SearchIHIRequest",
    "SearchKind",
    "ServiceMessage",
    "SexType",
    "StateType",
    "StreetSuffixType",
    "StreetType",
    "Timestamp",
    "UnitGroup",
    "UnitType",
]

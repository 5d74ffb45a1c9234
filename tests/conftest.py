"""Pytest configuration and fixtures."""

from datetime import date
from typing import Callable

import pytest

from hi_client.models import (
    AustralianPostalAddress,
    AustralianStreetAddress,
    InternationalAddress,
    PostalDeliveryGroup,
    PostalDeliveryType,
    ProductType,
    QualifiedId,
    SearchIHI,
    SexType,
    StateType,
    StreetType,
)
from hi_client.validation import SearchKind

IDENTIFIER = "3f2504e0-4f89-41d3-9a0c-0305e82c3301"


def build_search(kind: SearchKind) -> SearchIHI:
    """Search populated with exactly the mandatory and optional fields of ``kind``."""
    search = SearchIHI(
        family_name="Smith",
        given_name="John",
        date_of_birth=date(1980, 1, 1),
        sex=SexType.MALE,
    )
    if kind == SearchKind.BASIC:
        search.ihi_number = "8003608833357361"
    elif kind == SearchKind.BASIC_MEDICARE:
        search.medicare_card_number = "2950974202"
        search.medicare_irn = "1"
    elif kind == SearchKind.BASIC_DVA:
        search.dva_file_number = "NX901667"
    elif kind == SearchKind.AUSTRALIAN_POSTAL_ADDRESS:
        search.australian_postal_address = AustralianPostalAddress(
            suburb="Brisbane",
            state=StateType.QLD,
            postcode="4001",
            postal_delivery_group=PostalDeliveryGroup(
                postal_delivery_type=PostalDeliveryType.GPO_BOX,
                postal_delivery_number="1234",
            ),
        )
    elif kind == SearchKind.AUSTRALIAN_STREET_ADDRESS:
        search.australian_street_address = AustralianStreetAddress(
            street_name="George",
            street_number="21",
            street_type=StreetType.STREET,
            suburb="Sydney",
            state=StateType.NSW,
            postcode="2000",
        )
    elif kind == SearchKind.INTERNATIONAL_ADDRESS:
        search.international_address = InternationalAddress(
            international_address_line="12 Queen Street",
            international_state_province="Auckland",
            international_postcode="1010",
            country="1201",
        )
    return search


@pytest.fixture
def identifier() -> str:
    """36-character correlation identifier."""
    return IDENTIFIER


@pytest.fixture
def make_search() -> Callable[[SearchKind], SearchIHI]:
    """Builder for a valid search of a given kind."""
    return build_search


@pytest.fixture
def product() -> ProductType:
    return ProductType(
        platform="Linux",
        product_name="Test Product",
        product_version="1.0",
        vendor=QualifiedId("http://ns.electronichealth.net.au/id/hi/vendorid/1.0", "00000000"),
    )


@pytest.fixture
def user() -> QualifiedId:
    return QualifiedId("http://ns.example.com.au/id/test/userid/1.0", "user-001")


@pytest.fixture
def hpio() -> QualifiedId:
    return QualifiedId("http://ns.electronichealth.net.au/id/hi/hpio/1.0", "8003621566684455")

"""Address generation for sample address searches."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from faker import Faker

from hi_client.models.enums import (
    LevelType,
    PostalDeliveryType,
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
    UnitGroup,
)


@dataclass(frozen=True)
class CountryDistribution:
    """Weighted distribution of countries for international addresses.

    Parameters
    ----------
    weights : dict[str, float]
        Mapping of ISO 3166-1 alpha-2 country code to weight.
        Weights are relative (do not need to sum to 1.0).
    """

    weights: dict[str, float] = field(default_factory=lambda: {"NZ": 1.0})

    @classmethod
    def common_origins(cls) -> "CountryDistribution":
        """Countries most often seen on overseas addresses."""
        return cls(
            weights={
                "NZ": 0.40,
                "GB": 0.20,
                "US": 0.15,
                "IN": 0.10,
                "CA": 0.08,
                "IE": 0.07,
            }
        )


# ISO country code -> Faker locale
LOCALE_MAP: dict[str, str] = {
    "NZ": "en_NZ",
    "GB": "en_GB",
    "US": "en_US",
    "IN": "en_IN",
    "CA": "en_CA",
    "IE": "en_IE",
}

# ISO country code -> Standard Australian Classification of Countries code
SACC_CODES: dict[str, str] = {
    "NZ": "1201",
    "GB": "2100",
    "IE": "2201",
    "IN": "7103",
    "CA": "8102",
    "US": "8104",
}


class AddressFactory:
    """Generate addresses for postal, street and international searches.

    Australian addresses use an ``en_AU`` Faker; international ones use a
    Faker per configured country.

    Parameters
    ----------
    distribution : CountryDistribution | None
        Country weights for international addresses. Defaults to
        ``common_origins()``.
    seed : int | None
        Random seed for reproducibility.
    """

    def __init__(
        self,
        distribution: CountryDistribution | None = None,
        seed: int | None = None,
    ) -> None:
        self._distribution = distribution or CountryDistribution.common_origins()
        self._countries = list(self._distribution.weights.keys())
        self._weights = list(self._distribution.weights.values())

        self._au = Faker("en_AU")
        if seed is not None:
            self._au.seed_instance(seed)

        self._fakers: dict[str, Faker] = {}
        for country_code in self._countries:
            faker_instance = Faker(LOCALE_MAP.get(country_code, "en_US"))
            if seed is not None:
                faker_instance.seed_instance(seed)
            self._fakers[country_code] = faker_instance

    def postal(self) -> AustralianPostalAddress:
        """Australian postal address with a delivery group."""
        return AustralianPostalAddress(
            suburb=self._au.city(),
            state=StateType(self._au.state_abbr()),
            postcode=self._au.postcode(),
            postal_delivery_group=PostalDeliveryGroup(
                postal_delivery_type=random.choice(list(PostalDeliveryType)),
                postal_delivery_number=random.choice([None, str(random.randint(1, 9999))]),
            ),
        )

    def street(self) -> AustralianStreetAddress:
        """Australian street address with a street number or a lot number."""
        address = AustralianStreetAddress(
            street_name=self._au.last_name(),
            suburb=self._au.city(),
            state=StateType(self._au.state_abbr()),
            postcode=self._au.postcode(),
            street_type=random.choice(list(StreetType)),
        )

        # Rural properties are often identified by lot only
        if random.random() < 0.1:
            address.lot_number = str(random.randint(1, 999))
        else:
            address.street_number = str(random.randint(1, 999))

        if random.random() < 0.1:
            address.street_suffix = random.choice(list(StreetSuffixType))
        if random.random() < 0.2:
            address.unit_group = UnitGroup(
                unit_type=random.choice(list(UnitType)),
                unit_number=str(random.randint(1, 60)),
            )
        if random.random() < 0.05:
            address.level_group = LevelGroup(
                level_type=random.choice(list(LevelType)),
                level_number=str(random.randint(1, 20)),
            )
        return address

    def international(self, country: str | None = None) -> InternationalAddress:
        """Overseas address, optionally for a specific country.

        Parameters
        ----------
        country : str | None
            ISO 3166-1 alpha-2 code. If ``None``, picks based on the
            configured distribution.
        """
        if country is None:
            country = random.choices(self._countries, weights=self._weights, k=1)[0]

        fake = self._fakers.get(country)
        if fake is None:
            fake = Faker(LOCALE_MAP.get(country, "en_US"))

        return InternationalAddress(
            international_address_line=f"{fake.building_number()} {fake.street_name()}",
            international_state_province=_state_province(fake),
            international_postcode=fake.postcode(),
            country=SACC_CODES.get(country, country),
        )


def _state_province(fake: Faker) -> str:
    """First region-like value the locale provides, else a city."""
    for method in ("state", "province", "county", "region"):
        if hasattr(fake, method):
            return getattr(fake, method)()
    return fake.city()

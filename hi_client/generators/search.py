"""Sample search criteria that satisfy each search kind's rules."""

from __future__ import annotations

import random
from typing import Iterator

from hi_client.generators.address import AddressFactory, CountryDistribution
from hi_client.generators.base import BaseGenerator
from hi_client.models.enums import SexType
from hi_client.models.search import SearchIHI
from hi_client.validation.rules import SearchKind

IHI_PREFIX = "800360"
MEDICARE_WEIGHTS = (1, 3, 7, 9, 1, 3, 7, 9)
DVA_STATE_CODES = ("N", "V", "Q", "W", "S", "T")


def luhn_check_digit(digits: str) -> str:
    """Check digit that makes ``digits + result`` pass the Luhn test."""
    total = 0
    for i, ch in enumerate(reversed(digits)):
        d = int(ch)
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return str((10 - total % 10) % 10)


def is_luhn_valid(number: str) -> bool:
    return number.isdigit() and luhn_check_digit(number[:-1]) == number[-1]


def medicare_check_digit(digits: str) -> str:
    """Check digit for the first eight digits of a Medicare card number."""
    return str(sum(int(d) * w for d, w in zip(digits, MEDICARE_WEIGHTS)) % 10)


class SearchCriteriaGenerator(BaseGenerator):
    """Generate ``(identifier, SearchIHI)`` pairs valid for a search kind.

    Identifiers are UUID4 strings (36 characters).

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    country_distribution : CountryDistribution | None
        Countries used for international address searches.
    """

    def __init__(
        self,
        seed: int | None = None,
        country_distribution: CountryDistribution | None = None,
    ) -> None:
        super().__init__(seed)
        self._address_factory = AddressFactory(
            distribution=country_distribution,
            seed=seed,
        )

    def generate(self, kind: SearchKind | str) -> tuple[str, SearchIHI]:
        """Generate one identifier and search for ``kind``."""
        kind = SearchKind(kind)
        search = self._demographics()

        if kind == SearchKind.BASIC:
            search.ihi_number = self.ihi_number()
        elif kind == SearchKind.BASIC_MEDICARE:
            search.medicare_card_number = self.medicare_card_number()
            search.medicare_irn = random.choice([None, str(random.randint(1, 9))])
        elif kind == SearchKind.BASIC_DVA:
            search.dva_file_number = self.dva_file_number()
        elif kind == SearchKind.AUSTRALIAN_POSTAL_ADDRESS:
            search.australian_postal_address = self._address_factory.postal()
        elif kind == SearchKind.AUSTRALIAN_STREET_ADDRESS:
            search.australian_street_address = self._address_factory.street()
        elif kind == SearchKind.INTERNATIONAL_ADDRESS:
            search.international_address = self._address_factory.international()

        return self.fake.uuid4(), search

    def generate_batch(self, kind: SearchKind | str, count: int) -> Iterator[tuple[str, SearchIHI]]:
        """Generate ``count`` searches of one kind.

        Yields
        ------
        tuple[str, SearchIHI]
            Identifier and criteria.
        """
        for _ in range(count):
            yield self.generate(kind)

    def ihi_number(self) -> str:
        """16-digit IHI with a valid Luhn check digit."""
        body = IHI_PREFIX + "".join(str(random.randint(0, 9)) for _ in range(9))
        return body + luhn_check_digit(body)

    def medicare_card_number(self) -> str:
        """10-digit Medicare card number: 8 digits, check digit, issue number."""
        body = str(random.randint(2, 6)) + "".join(str(random.randint(0, 9)) for _ in range(7))
        return body + medicare_check_digit(body) + str(random.randint(1, 9))

    def dva_file_number(self) -> str:
        return f"{random.choice(DVA_STATE_CODES)}X{random.randint(0, 999999):06d}"

    def _demographics(self) -> SearchIHI:
        sex = random.choice([SexType.MALE, SexType.FEMALE])
        first_name = self.fake.first_name_male() if sex == SexType.MALE else self.fake.first_name_female()
        return SearchIHI(
            family_name=self.fake.last_name(),
            given_name=random.choice([None, first_name]),
            date_of_birth=self.fake.date_of_birth(minimum_age=0, maximum_age=100),
            sex=sex,
        )

"""Batch of consumer IHI searches for ConsumerSearchIHIBatchSync."""

import copy
import logging
from dataclasses import dataclass, field
from typing import Iterator

from hi_client.models.search import SearchIHI, SearchIHIRequest
from hi_client.validation.rules import SearchKind
from hi_client.validation.validator import validate_search

logger = logging.getLogger(__name__)


@dataclass
class SearchBatch:
    """Caller-owned list of validated searches.

    Each ``add_*`` method validates the criteria for its search kind and
    appends a ``SearchIHIRequest`` only if every check passes. Not safe
    for concurrent mutation of the same batch.
    """

    requests: list[SearchIHIRequest] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.requests)

    def __iter__(self) -> Iterator[SearchIHIRequest]:
        return iter(self.requests)

    def add_search(
        self, kind: SearchKind | str, identifier: str | None, search: SearchIHI
    ) -> SearchIHIRequest:
        """Validate ``search`` as ``kind`` and append it.

        The entry keeps its own copy of the criteria.

        Raises
        ------
        SearchValidationError
            If the criteria break the rule for ``kind``. The batch is
            left unchanged.
        """
        kind = SearchKind(kind)
        validate_search(kind, identifier, search)

        entry = SearchIHIRequest(
            request_identifier=identifier,
            search=copy.deepcopy(search),
            kind=kind,
        )
        self.requests.append(entry)
        logger.debug(
            "Added %s search (%d in batch)",
            kind.value,
            len(self.requests),
            extra={"extra": {"request_identifier": identifier, "search_kind": kind.value}},
        )
        return entry

    def add_basic_search(self, identifier: str | None, search: SearchIHI) -> SearchIHIRequest:
        """Search by IHI number, family name, date of birth and sex."""
        return self.add_search(SearchKind.BASIC, identifier, search)

    def add_basic_medicare_search(
        self, identifier: str | None, search: SearchIHI
    ) -> SearchIHIRequest:
        """Search by Medicare card number (and optional IRN) plus demographics."""
        return self.add_search(SearchKind.BASIC_MEDICARE, identifier, search)

    def add_basic_dva_search(self, identifier: str | None, search: SearchIHI) -> SearchIHIRequest:
        """Search by DVA file number plus demographics."""
        return self.add_search(SearchKind.BASIC_DVA, identifier, search)

    def add_detailed_search(self, identifier: str | None, search: SearchIHI) -> SearchIHIRequest:
        """Search by demographics only."""
        return self.add_search(SearchKind.DETAILED, identifier, search)

    def add_australian_postal_address_search(
        self, identifier: str | None, search: SearchIHI
    ) -> SearchIHIRequest:
        """Search by demographics and an Australian postal address."""
        return self.add_search(SearchKind.AUSTRALIAN_POSTAL_ADDRESS, identifier, search)

    def add_australian_street_address_search(
        self, identifier: str | None, search: SearchIHI
    ) -> SearchIHIRequest:
        """Search by demographics and an Australian street address."""
        return self.add_search(SearchKind.AUSTRALIAN_STREET_ADDRESS, identifier, search)

    def add_international_address_search(
        self, identifier: str | None, search: SearchIHI
    ) -> SearchIHIRequest:
        """Search by demographics and an international address."""
        return self.add_search(SearchKind.INTERNATIONAL_ADDRESS, identifier, search)

    def clear(self) -> None:
        self.requests.clear()

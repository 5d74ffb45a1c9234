"""Client for the ConsumerSearchIHIBatchSync operation."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from hi_client.clients.base import HIServiceClient
from hi_client.models.search import SearchIHIRequest
from hi_client.serialization import search_request_to_wire
from hi_client.validation.validator import validate_required, validate_search

logger = logging.getLogger(__name__)


class ConsumerSearchIHIBatchSyncClient(HIServiceClient):
    """Submit a batch of consumer IHI searches in one synchronous call.

    Build the batch with ``hi_client.batch.SearchBatch`` so every entry has
    passed the rules for its search kind.

    Example
    -------
    >>> batch = SearchBatch()
    >>> batch.add_basic_search(str(uuid.uuid4()), criteria)
    >>> with ConsumerSearchIHIBatchSyncClient.from_config(config, wsse=signer) as client:
    ...     response = client.search_ihi_batch_sync(batch)
    """

    HI_SERVICE_OPERATION = "ConsumerSearchIHIBatchSync"
    HI_SERVICE_VERSION = "3.0"
    ENDPOINT = "consumer_search"
    RESPONSE_ELEMENT = "searchIHIBatchResponse"

    def search_ihi_batch_sync(self, searches: Iterable[SearchIHIRequest]) -> Any:
        """Send the batch and return the ``searchIHIBatchResponse`` body.

        Parameters
        ----------
        searches : Iterable[SearchIHIRequest]
            A ``SearchBatch`` or any sequence of validated entries.

        Returns
        -------
        Any
            Response body as nested dicts, one result per request
            identifier.

        Raises
        ------
        MissingRequiredFieldError
            If ``searches`` is ``None``.
        SearchValidationError
            If an entry no longer satisfies the rule for its kind. Nothing
            is sent.
        ServiceFaultError
            If the service answers with a fault.
        UnexpectedServiceResponseError
            If the response carries no ``searchIHIBatchResponse``.
        """
        validate_required("searches", searches)

        searches = list(searches)
        for entry in searches:
            validate_search(entry.kind, entry.request_identifier, entry.search)

        entries = [search_request_to_wire(entry) for entry in searches]
        logger.debug("Submitting %d searches", len(entries))
        return self._invoke("searchIHIBatchSync", searchIHIBatchSync=entries)

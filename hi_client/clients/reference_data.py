"""Client for the ProviderReadReferenceData operation."""

from __future__ import annotations

from typing import Any, Sequence

from hi_client.clients.base import HIServiceClient
from hi_client.exceptions import MissingRequiredFieldError
from hi_client.validation.validator import validate_required


class ProviderReadReferenceDataClient(HIServiceClient):
    """Read provider reference data lists (e.g. ``providerTypeCode``)."""

    HI_SERVICE_OPERATION = "ProviderReadReferenceData"
    HI_SERVICE_VERSION = "3.2.0"
    ENDPOINT = "reference_data"
    RESPONSE_ELEMENT = "readReferenceDataResponse"

    def read_reference_data(self, reference_list: Sequence[str]) -> Any:
        """Return the ``readReferenceDataResponse`` body for the named lists."""
        validate_required("reference_list", reference_list)
        if len(reference_list) == 0:
            raise MissingRequiredFieldError("reference_list")

        return self._invoke("readReferenceData", readReferenceData=list(reference_list))

"""Client library for the Healthcare Identifiers (HI) web service."""

from hi_client.batch import SearchBatch
from hi_client.clients import ConsumerSearchIHIBatchSyncClient, ProviderReadReferenceDataClient
from hi_client.config import HIClientConfig
from hi_client.validation import SearchKind, validate_search

__version__ = "0.1.0"

__all__ = [
    "ConsumerSearchIHIBatchSyncClient",
    "HIClientConfig",
    "ProviderReadReferenceDataClient",
    "SearchBatch",
    "SearchKind",
    "validate_search",
]

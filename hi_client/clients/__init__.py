"""HI web service clients."""

from hi_client.clients.base import HIServiceClient, SoapMessages, parse_service_messages
from hi_client.clients.consumer_search import ConsumerSearchIHIBatchSyncClient
from hi_client.clients.reference_data import ProviderReadReferenceDataClient

__all__ = [
    "ConsumerSearchIHIBatchSyncClient",
    "HIServiceClient",
    "ProviderReadReferenceDataClient",
    "SoapMessages",
    "parse_service_messages",
]

"""Sample data generators for exercising search validation."""

from hi_client.generators.address import SACC_CODES, AddressFactory, CountryDistribution
from hi_client.generators.search import SearchCriteriaGenerator

__all__ = ["SACC_CODES", "AddressFactory", "CountryDistribution", "SearchCriteriaGenerator"]

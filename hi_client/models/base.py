"""Envelope header models shared by every HI service operation."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

# Lifetime of a request timestamp before the service treats it as stale
TIMESTAMP_VALIDITY = timedelta(days=30)


@dataclass(frozen=True)
class QualifiedId:
    """Identifier scoped by a qualifier URI.

    Used for the calling user, the HPIO and the product vendor, e.g.
    ``QualifiedId("http://ns.electronichealth.net.au/id/hi/hpio/1.0",
    "8003621566684455")``.
    """

    qualifier: str
    id: str


@dataclass(frozen=True)
class ProductType:
    """Software product making the call, as registered with the HI service."""

    platform: str
    product_name: str
    product_version: str
    vendor: QualifiedId


@dataclass(frozen=True)
class Timestamp:
    """Freshness window attached to every request."""

    created: datetime
    expires: datetime

    @classmethod
    def now(cls, validity: timedelta = TIMESTAMP_VALIDITY) -> "Timestamp":
        """Create a UTC timestamp starting now."""
        created = datetime.now(timezone.utc)
        return cls(created=created, expires=created + validity)


@dataclass
class ServiceMessage:
    """A single message from a service fault or response."""

    code: str | None = None
    severity: str | None = None
    reason: str | None = None
    details: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"[{self.severity}] {self.code}: {self.reason}"

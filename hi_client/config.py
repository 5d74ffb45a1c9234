"""Configuration management for hi-client."""

from dataclasses import dataclass, field
from pathlib import Path

from hi_client.exceptions import ConfigurationError
from hi_client.models.base import ProductType, QualifiedId

HPIO_QUALIFIER = "http://ns.electronichealth.net.au/id/hi/hpio/1.0"


@dataclass
class EndpointConfig:
    """Location and timeouts of one HI service endpoint.

    Timeouts are in seconds. ``open_timeout`` bounds WSDL loading and
    connecting; ``receive_timeout`` bounds waiting for a response.
    """

    url: str | None = None
    wsdl: str | None = None
    binding: str | None = None
    open_timeout: float = 180.0
    receive_timeout: float = 600.0


@dataclass
class TLSConfig:
    """Client certificate used for mutually authenticated TLS."""

    client_cert: Path | None = None
    client_key: Path | None = None
    ca_bundle: Path | None = None
    verify: bool = True

    @property
    def cert(self) -> tuple[str, str] | str | None:
        """Value for ``requests.Session.cert``."""
        if self.client_cert is None:
            return None
        if self.client_key is None:
            return str(self.client_cert)
        return (str(self.client_cert), str(self.client_key))


@dataclass
class ProductConfig:
    """Registered product details sent in every request header."""

    platform: str = "Python"
    product_name: str = "hi-client"
    product_version: str = "0.1.0"
    vendor_qualifier: str = ""
    vendor_id: str = ""

    def to_product(self) -> ProductType:
        return ProductType(
            platform=self.platform,
            product_name=self.product_name,
            product_version=self.product_version,
            vendor=QualifiedId(self.vendor_qualifier, self.vendor_id),
        )


@dataclass
class HIClientConfig:
    """Main configuration for hi-client."""

    product: ProductConfig = field(default_factory=ProductConfig)
    user: QualifiedId | None = None
    hpio: QualifiedId | None = None
    tls: TLSConfig = field(default_factory=TLSConfig)
    consumer_search: EndpointConfig = field(default_factory=EndpointConfig)
    reference_data: EndpointConfig = field(default_factory=EndpointConfig)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "HIClientConfig":
        """Create config from environment variables."""
        import os

        product = ProductConfig(
            platform=os.getenv("HI_PRODUCT_PLATFORM", "Python"),
            product_name=os.getenv("HI_PRODUCT_NAME", "hi-client"),
            product_version=os.getenv("HI_PRODUCT_VERSION", "0.1.0"),
            vendor_qualifier=os.getenv("HI_VENDOR_QUALIFIER", ""),
            vendor_id=os.getenv("HI_VENDOR_ID", ""),
        )

        user = None
        if os.getenv("HI_USER_ID"):
            user = QualifiedId(os.getenv("HI_USER_QUALIFIER", ""), os.environ["HI_USER_ID"])

        hpio = None
        if os.getenv("HI_HPIO"):
            hpio = QualifiedId(os.getenv("HI_HPIO_QUALIFIER", HPIO_QUALIFIER), os.environ["HI_HPIO"])

        tls = TLSConfig(
            client_cert=_path_or_none(os.getenv("HI_TLS_CERT")),
            client_key=_path_or_none(os.getenv("HI_TLS_KEY")),
            ca_bundle=_path_or_none(os.getenv("HI_CA_BUNDLE")),
            verify=os.getenv("HI_TLS_VERIFY", "true").lower() == "true",
        )

        return cls(
            product=product,
            user=user,
            hpio=hpio,
            tls=tls,
            consumer_search=_endpoint_from_env("HI_CONSUMER_SEARCH"),
            reference_data=_endpoint_from_env("HI_REFERENCE_DATA"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def _path_or_none(value: str | None) -> Path | None:
    return Path(value) if value else None


def _endpoint_from_env(prefix: str) -> EndpointConfig:
    """Read ``<prefix>_URL``, ``_WSDL``, ``_BINDING`` and ``_*_TIMEOUT``."""
    import os

    defaults = EndpointConfig()
    timeouts = {}
    for name in ("open", "receive"):
        key = f"{prefix}_{name.upper()}_TIMEOUT"
        raw = os.getenv(key)
        if raw is None:
            timeouts[f"{name}_timeout"] = getattr(defaults, f"{name}_timeout")
            continue
        try:
            timeouts[f"{name}_timeout"] = float(raw)
        except ValueError as e:
            raise ConfigurationError(f"{key} must be a number, got {raw!r}") from e

    return EndpointConfig(
        url=os.getenv(f"{prefix}_URL"),
        wsdl=os.getenv(f"{prefix}_WSDL"),
        binding=os.getenv(f"{prefix}_BINDING"),
        **timeouts,
    )

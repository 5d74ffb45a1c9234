"""zeep/requests plumbing for reaching an HI service endpoint.

Message signing is not done here: pass a zeep ``wsse`` plugin configured
with the organisation's signing certificate.
"""

from __future__ import annotations

import logging
from typing import Any

from requests import Session
from zeep import Client, Settings
from zeep.transports import Transport

from hi_client.config import EndpointConfig, TLSConfig
from hi_client.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_session(tls: TLSConfig) -> Session:
    """HTTP session presenting the TLS client certificate."""
    session = Session()
    session.cert = tls.cert
    if tls.verify:
        session.verify = str(tls.ca_bundle) if tls.ca_bundle else True
    else:
        session.verify = False
    return session


def create_transport(endpoint: EndpointConfig, tls: TLSConfig) -> Transport:
    """zeep transport with the endpoint's timeouts.

    Operations use a ``(connect, read)`` timeout of
    ``(open_timeout, receive_timeout)``.
    """
    return Transport(
        session=create_session(tls),
        timeout=endpoint.open_timeout,
        operation_timeout=(endpoint.open_timeout, endpoint.receive_timeout),
    )


def create_soap_client(
    endpoint: EndpointConfig,
    tls: TLSConfig,
    *,
    wsse: Any = None,
    plugins: list | None = None,
) -> Client:
    """Load the service WSDL and build a zeep client."""
    if not endpoint.wsdl:
        raise ConfigurationError("endpoint WSDL location is not configured")

    logger.info("Loading WSDL %s", endpoint.wsdl)
    return Client(
        wsdl=str(endpoint.wsdl),
        wsse=wsse,
        transport=create_transport(endpoint, tls),
        settings=Settings(strict=False, xml_huge_tree=True),
        plugins=plugins or [],
    )


def bind_service(client: Client, endpoint: EndpointConfig) -> Any:
    """Service proxy for ``client``, pointed at ``endpoint.url`` if set."""
    if endpoint.binding:
        if not endpoint.url:
            raise ConfigurationError(f"binding {endpoint.binding} needs an endpoint URL")
        return client.create_service(endpoint.binding, endpoint.url)

    service = client.service
    if endpoint.url:
        service._binding_options["address"] = endpoint.url
    return service

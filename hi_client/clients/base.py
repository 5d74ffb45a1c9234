"""Shared request/response handling for HI service clients."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from lxml import etree
from zeep.exceptions import Fault, TransportError
from zeep.helpers import serialize_object
from zeep.plugins import HistoryPlugin

from hi_client.config import EndpointConfig, HIClientConfig
from hi_client.exceptions import (
    ServiceFaultError,
    ServiceTransportError,
    UnexpectedServiceResponseError,
)
from hi_client.models.base import ProductType, QualifiedId, ServiceMessage, Timestamp
from hi_client.serialization import to_wire
from hi_client.transport import bind_service, create_soap_client
from hi_client.validation.validator import validate_required

logger = logging.getLogger(__name__)


@dataclass
class SoapMessages:
    """Last SOAP envelopes exchanged, as XML text."""

    request: str | None = None
    response: str | None = None


def parse_service_messages(detail: Any) -> list[ServiceMessage]:
    """Extract ``serviceMessage`` entries from a fault detail element."""
    if detail is None:
        return []

    messages = []
    for node in detail.iter():
        if not isinstance(node.tag, str) or etree.QName(node).localname != "serviceMessage":
            continue
        message = ServiceMessage()
        for child in node:
            if not isinstance(child.tag, str):
                continue
            name = etree.QName(child).localname
            text = "".join(child.itertext()).strip() or None
            if name == "code":
                message.code = text
            elif name == "severity":
                message.severity = text
            elif name == "reason":
                message.reason = text
            elif name == "details" and text:
                message.details.append(text)
        messages.append(message)
    return messages


def _envelope_to_text(entry: dict | None) -> str | None:
    if not entry or entry.get("envelope") is None:
        return None
    return etree.tostring(entry["envelope"], pretty_print=True, encoding="unicode")


class HIServiceClient:
    """Base class for clients of one HI service operation.

    Parameters
    ----------
    port : Any
        Service proxy exposing the operation as a method (a zeep
        ``ServiceProxy`` in production).
    product : ProductType
        Registered product sent in the request header.
    user : QualifiedId
        Identifier of the calling user.
    hpio : QualifiedId | None
        HPIO of the calling organisation, if acting for one.
    history : HistoryPlugin | None
        zeep history plugin used to expose ``soap_messages``.
    transport : Any
        zeep transport whose session is closed by ``close()``.
    """

    HI_SERVICE_OPERATION: str = ""
    HI_SERVICE_VERSION: str = ""
    ENDPOINT: str = ""
    RESPONSE_ELEMENT: str = ""

    def __init__(
        self,
        port: Any,
        product: ProductType,
        user: QualifiedId,
        hpio: QualifiedId | None = None,
        *,
        history: HistoryPlugin | None = None,
        transport: Any = None,
    ) -> None:
        validate_required("port", port)
        validate_required("product", product)
        validate_required("user", user)

        self._port = port
        self.product = product
        self.user = user
        self.hpio = hpio
        self._history = history
        self._transport = transport
        self.last_soap_request_timestamp: Timestamp | None = None

    @classmethod
    def from_config(cls, config: HIClientConfig, *, wsse: Any = None) -> "HIServiceClient":
        """Build a client from configuration.

        Parameters
        ----------
        config : HIClientConfig
            Product, user, HPIO, TLS and endpoint settings.
        wsse : Any
            zeep WS-Security plugin that signs outgoing messages.
        """
        endpoint: EndpointConfig = getattr(config, cls.ENDPOINT)
        history = HistoryPlugin()
        client = create_soap_client(endpoint, config.tls, wsse=wsse, plugins=[history])
        return cls(
            bind_service(client, endpoint),
            config.product.to_product(),
            config.user,
            config.hpio,
            history=history,
            transport=client.transport,
        )

    @property
    def soap_messages(self) -> SoapMessages:
        if self._history is None:
            return SoapMessages()
        return SoapMessages(
            request=_envelope_to_text(self._history.last_sent),
            response=_envelope_to_text(self._history.last_received),
        )

    def build_header(self) -> dict[str, Any]:
        """SOAP header for a new request, stamped with a fresh timestamp."""
        timestamp = Timestamp.now()
        self.last_soap_request_timestamp = timestamp

        header: dict[str, Any] = {
            "product": to_wire(self.product),
            "user": to_wire(self.user),
            "signature": {},
            "timestamp": to_wire(timestamp),
        }
        if self.hpio is not None:
            header["hpio"] = to_wire(self.hpio)
        return header

    def _invoke(self, operation: str, **body: Any) -> Any:
        """Call ``operation`` on the port and return the response element."""
        header = self.build_header()
        method = getattr(self._port, operation)

        logger.info("Calling %s v%s", self.HI_SERVICE_OPERATION, self.HI_SERVICE_VERSION)
        try:
            result = method(_soapheaders=header, **body)
        except Fault as e:
            messages = parse_service_messages(e.detail)
            logger.warning("%s fault %s: %s", self.HI_SERVICE_OPERATION, e.code, e.message)
            raise ServiceFaultError(e.message, code=e.code, service_messages=messages) from e
        except TransportError as e:
            logger.warning("%s transport error (%s)", self.HI_SERVICE_OPERATION, e.status_code)
            raise ServiceTransportError(e.message, status_code=e.status_code) from e

        return self._unwrap(result)

    def _unwrap(self, result: Any) -> Any:
        data = serialize_object(result, dict)
        if isinstance(data, dict) and "body" in data:
            data = data["body"]

        payload = data.get(self.RESPONSE_ELEMENT) if isinstance(data, dict) else None
        if payload is None:
            raise UnexpectedServiceResponseError(
                f"Unexpected response from {self.HI_SERVICE_OPERATION}: "
                f"missing {self.RESPONSE_ELEMENT}"
            )
        return payload

    def close(self) -> None:
        """Release the HTTP session."""
        if self._transport is not None:
            self._transport.session.close()

    def __enter__(self) -> "HIServiceClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

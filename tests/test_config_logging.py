"""Tests for config and logging."""

import io
import json
import logging
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from hi_client.batch import SearchBatch
from hi_client.config import (
    HPIO_QUALIFIER,
    EndpointConfig,
    HIClientConfig,
    ProductConfig,
    TLSConfig,
)
from hi_client.exceptions import ConfigurationError
from hi_client.logging import SOAP_MESSAGE_LOGGER, JsonFormatter, setup_logging
from hi_client.models import QualifiedId
from hi_client.validation import SearchKind


class TestEndpointConfig:
    """Tests for EndpointConfig."""

    def test_default_timeouts(self) -> None:
        """Defaults allow slow batch responses."""
        config = EndpointConfig()

        assert config.url is None
        assert config.open_timeout == 180.0
        assert config.receive_timeout == 600.0


class TestTLSConfig:
    """Tests for TLSConfig."""

    def test_no_certificate(self) -> None:
        assert TLSConfig().cert is None

    def test_combined_pem(self) -> None:
        assert TLSConfig(client_cert=Path("client.pem")).cert == "client.pem"

    def test_cert_and_key(self) -> None:
        config = TLSConfig(client_cert=Path("client.crt"), client_key=Path("client.key"))
        assert config.cert == ("client.crt", "client.key")


class TestProductConfig:
    """Tests for ProductConfig."""

    def test_to_product(self) -> None:
        product = ProductConfig(
            platform="Linux",
            product_name="Clinic",
            product_version="2.1",
            vendor_qualifier="urn:vendor",
            vendor_id="V42",
        ).to_product()

        assert product.product_name == "Clinic"
        assert product.vendor == QualifiedId("urn:vendor", "V42")


class TestHIClientConfig:
    """Tests for HIClientConfig."""

    def test_default_values(self) -> None:
        config = HIClientConfig()

        assert config.user is None
        assert config.hpio is None
        assert isinstance(config.tls, TLSConfig)
        assert config.consumer_search is not config.reference_data
        assert config.log_level == "INFO"

    def test_from_env_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = HIClientConfig.from_env()

        assert config.user is None
        assert config.hpio is None
        assert config.tls.verify is True
        assert config.consumer_search.receive_timeout == 600.0
        assert config.product.product_name == "hi-client"

    def test_from_env_custom(self) -> None:
        env = {
            "HI_PRODUCT_NAME": "Clinic",
            "HI_VENDOR_ID": "V42",
            "HI_USER_QUALIFIER": "urn:users",
            "HI_USER_ID": "dr-who",
            "HI_HPIO": "8003621566684455",
            "HI_TLS_CERT": "/certs/tls.pem",
            "HI_TLS_KEY": "/certs/tls.key",
            "HI_TLS_VERIFY": "false",
            "HI_CONSUMER_SEARCH_URL": "https://hi.example/batch",
            "HI_CONSUMER_SEARCH_WSDL": "/wsdl/batch.wsdl",
            "HI_CONSUMER_SEARCH_RECEIVE_TIMEOUT": "900",
            "HI_REFERENCE_DATA_URL": "https://hi.example/ref",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            config = HIClientConfig.from_env()

        assert config.product.product_name == "Clinic"
        assert config.product.vendor_id == "V42"
        assert config.user == QualifiedId("urn:users", "dr-who")
        assert config.hpio == QualifiedId(HPIO_QUALIFIER, "8003621566684455")
        assert config.tls.cert == ("/certs/tls.pem", "/certs/tls.key")
        assert config.tls.verify is False
        assert config.consumer_search.url == "https://hi.example/batch"
        assert config.consumer_search.wsdl == "/wsdl/batch.wsdl"
        assert config.consumer_search.receive_timeout == 900.0
        assert config.consumer_search.open_timeout == 180.0
        assert config.reference_data.url == "https://hi.example/ref"
        assert config.log_level == "DEBUG"

    def test_from_env_ignores_unknown_timeouts(self) -> None:
        with patch.dict(os.environ, {"HI_CONSUMER_SEARCH_SEND_TIMEOUT": "5"}, clear=True):
            config = HIClientConfig.from_env()

        assert not hasattr(config.consumer_search, "send_timeout")

    def test_from_env_bad_timeout(self) -> None:
        with patch.dict(os.environ, {"HI_REFERENCE_DATA_RECEIVE_TIMEOUT": "soon"}, clear=True):
            with pytest.raises(ConfigurationError, match="HI_REFERENCE_DATA_RECEIVE_TIMEOUT"):
                HIClientConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_invalid_level(self) -> None:
        """Invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_package_logger_level(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("hi_client").level == logging.DEBUG

    def test_external_loggers_quieted(self) -> None:
        """SOAP and HTTP loggers stay at WARNING."""
        setup_logging(level="DEBUG")

        assert logging.getLogger("zeep").level == logging.WARNING
        assert logging.getLogger("urllib3").level == logging.WARNING
        assert logging.getLogger(SOAP_MESSAGE_LOGGER).level == logging.WARNING

    def test_log_soap_enables_envelope_logger(self) -> None:
        setup_logging(level="INFO", log_soap=True)

        assert logging.getLogger(SOAP_MESSAGE_LOGGER).level == logging.DEBUG
        assert logging.getLogger(SOAP_MESSAGE_LOGGER).isEnabledFor(logging.DEBUG)
        assert logging.getLogger("zeep").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        defaults = dict(
            name="test.logger",
            level=logging.INFO,
            pathname="/path/to/file.py",
            lineno=42,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"request_identifier": "abc"}

        data = json.loads(JsonFormatter().format(record))

        assert data["request_identifier"] == "abc"

    def test_batch_entry_logged_with_identifier(self, make_search, identifier) -> None:
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(JsonFormatter())
        logger = logging.getLogger("hi_client.batch")
        logger.addHandler(handler)
        previous = logger.level
        logger.setLevel(logging.DEBUG)
        try:
            SearchBatch().add_detailed_search(identifier, make_search(SearchKind.DETAILED))
        finally:
            logger.removeHandler(handler)
            logger.setLevel(previous)

        data = json.loads(stream.getvalue().splitlines()[0])
        assert data["request_identifier"] == identifier
        assert data["search_kind"] == "detailed"
        assert data["message"] == "Added detailed search (1 in batch)"


class TestPackageInit:
    """Tests for hi_client __init__.py."""

    def test_version_exported(self) -> None:
        from hi_client import __version__

        assert isinstance(__version__, str)

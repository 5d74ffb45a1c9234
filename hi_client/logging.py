"""Logging configuration for hi-client.

Batch and client modules log through ``logging.getLogger(__name__)`` under
the ``hi_client`` namespace. Entries carry their request identifier in
``record.extra`` so the JSON formatter can emit it as a field.
"""

import logging
import sys
from typing import Any

# zeep logs each outgoing and incoming envelope here at DEBUG
SOAP_MESSAGE_LOGGER = "zeep.transports"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    log_soap: bool = False,
) -> None:
    """Configure logging for hi-client.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    log_soap : bool
        Also log full SOAP envelopes. They contain patient demographics,
        so leave this off outside test environments.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("hi_client").setLevel(log_level)

    logging.getLogger("zeep").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
    logging.getLogger(SOAP_MESSAGE_LOGGER).setLevel(logging.DEBUG if log_soap else logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with ``record.extra`` merged in."""

    def format(self, record: logging.LogRecord) -> str:
        import json
        from datetime import datetime, timezone

        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data, default=str)

"""Conversion of models into the shape the SOAP proxy expects."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from hi_client.models.search import SearchIHIRequest

# Schema element names that do not follow plain camelCase
WIRE_NAME_OVERRIDES: dict[str, str] = {
    "medicare_irn": "medicareIRN",
}


def wire_name(name: str) -> str:
    """Map a snake_case attribute name to its schema element name."""
    if name in WIRE_NAME_OVERRIDES:
        return WIRE_NAME_OVERRIDES[name]
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def wire_path(path: str, root: str = "search") -> str:
    """Dotted schema path for an attribute path, used in error messages.

    >>> wire_path("australian_street_address.postcode")
    'search.australianStreetAddress.postcode'
    """
    if not path:
        return root
    return ".".join([root, *(wire_name(part) for part in path.split("."))])


def to_wire(obj: Any) -> Any:
    """Convert a model to nested dicts, dropping absent (``None``) fields."""
    if is_dataclass(obj) and not isinstance(obj, type):
        result = {}
        for f in fields(obj):
            value = getattr(obj, f.name)
            if value is None:
                continue
            result[wire_name(f.name)] = to_wire(value)
        return result
    return serialize_value(obj)


def serialize_value(value: Any) -> Any:
    """Serialize a scalar or container value."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: to_wire(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value


def search_request_to_wire(entry: SearchIHIRequest) -> dict[str, Any]:
    """Wire form of one batch entry: ``requestIdentifier`` plus ``searchIHI``."""
    result: dict[str, Any] = {}
    if entry.request_identifier is not None:
        result["requestIdentifier"] = entry.request_identifier
    result["searchIHI"] = to_wire(entry.search)
    return result

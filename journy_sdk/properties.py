"""
Property and metadata formatting.

Values sent as user/account properties or event metadata are converted to
JSON-safe scalars with one fixed policy:

- int, float, str and bool are sent as native JSON scalars
- datetimes are sent as ISO-8601 strings with an offset
  (e.g. "2024-01-02T15:04:05+00:00"); naive datetimes are taken as UTC
- None is sent as null for properties and as "" for metadata
- flat lists/tuples of scalars are allowed for properties only
- anything else is sent as str(value)

Callers can build PropertyValue instances explicitly or pass plain Python
values, which PropertyValue.of() classifies once.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence

from .exceptions import InvalidInputError


class PropertyKind(Enum):
    """Tag of a PropertyValue"""
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    NULL = "null"
    ARRAY = "array"
    OTHER = "other"


SCALAR_KINDS = (
    PropertyKind.INTEGER,
    PropertyKind.FLOAT,
    PropertyKind.STRING,
    PropertyKind.BOOLEAN,
    PropertyKind.TIMESTAMP,
    PropertyKind.NULL,
    PropertyKind.OTHER,
)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601 with seconds precision and offset."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="seconds")


@dataclass(frozen=True)
class PropertyValue:
    """A property or metadata value tagged with its kind."""

    kind: PropertyKind
    value: Any = None

    @classmethod
    def integer(cls, value: int) -> "PropertyValue":
        return cls(PropertyKind.INTEGER, value)

    @classmethod
    def floating(cls, value: float) -> "PropertyValue":
        return cls(PropertyKind.FLOAT, value)

    @classmethod
    def string(cls, value: str) -> "PropertyValue":
        return cls(PropertyKind.STRING, value)

    @classmethod
    def boolean(cls, value: bool) -> "PropertyValue":
        return cls(PropertyKind.BOOLEAN, value)

    @classmethod
    def timestamp(cls, value: datetime) -> "PropertyValue":
        return cls(PropertyKind.TIMESTAMP, value)

    @classmethod
    def null(cls) -> "PropertyValue":
        return cls(PropertyKind.NULL)

    @classmethod
    def array(cls, values: Sequence[Any]) -> "PropertyValue":
        items = tuple(cls.of(item) for item in values)
        for item in items:
            if item.kind not in SCALAR_KINDS:
                raise InvalidInputError(
                    "Array values can only contain scalars",
                    details={"kind": item.kind.value}
                )
        return cls(PropertyKind.ARRAY, items)

    @classmethod
    def of(cls, value: Any) -> "PropertyValue":
        """Classify a plain Python value."""
        if isinstance(value, PropertyValue):
            return value
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            return cls.integer(value)
        if isinstance(value, float):
            return cls.floating(value)
        if isinstance(value, str):
            return cls.string(value)
        if isinstance(value, datetime):
            return cls.timestamp(value)
        if value is None:
            return cls.null()
        if isinstance(value, (list, tuple)):
            return cls.array(value)
        if isinstance(value, Mapping):
            raise InvalidInputError(
                "Nested objects are not supported as property values",
                details={"value": dict(value)}
            )
        return cls(PropertyKind.OTHER, value)

    def to_wire(self, null_as: Optional[str] = None) -> Any:
        """JSON-safe form of the value."""
        if self.kind in (
            PropertyKind.INTEGER,
            PropertyKind.FLOAT,
            PropertyKind.STRING,
            PropertyKind.BOOLEAN,
        ):
            return self.value
        if self.kind is PropertyKind.TIMESTAMP:
            return format_timestamp(self.value)
        if self.kind is PropertyKind.NULL:
            return null_as
        if self.kind is PropertyKind.ARRAY:
            return [item.to_wire(null_as) for item in self.value]
        return str(self.value)


def format_properties(properties: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Format user/account properties for the wire.

    Nulls are kept as JSON null and flat arrays of scalars are allowed.

    Raises:
        InvalidInputError: If a value is a mapping or a nested array
    """
    return {
        name: PropertyValue.of(value).to_wire()
        for name, value in properties.items()
    }


def format_metadata(metadata: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Format event metadata for the wire.

    Metadata is scalar-only: None becomes "" and arrays are rejected.

    Raises:
        InvalidInputError: If a value is an array or a mapping
    """
    formatted = {}
    for name, value in metadata.items():
        tagged = PropertyValue.of(value)
        if tagged.kind is PropertyKind.ARRAY:
            raise InvalidInputError(
                f"Metadata '{name}' cannot be an array",
                details={"key": name, "suggestion": "Send arrays as user or account properties"}
            )
        formatted[name] = tagged.to_wire(null_as="")
    return formatted

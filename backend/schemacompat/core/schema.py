"""Core schema data structures for property compatibility checks.

This module defines the snapshot types used to represent a single field
definition of a JSON-Schema-like document at one point in its version
history. Snapshots are immutable, hashable and compared by structural
equality.
"""

from collections.abc import Mapping
from dataclasses import dataclass
import json
from operator import itemgetter
from typing import Any


@dataclass(frozen=True)
class JSONValue:
    """A literal schema value kept in its serialized form.

    Two values are equal only when their raw bytes are identical, so
    ``1`` and ``1.0`` are different values.
    """

    raw: bytes

    @classmethod
    def from_python(cls, value: Any) -> "JSONValue":
        """Serialize a decoded JSON value into its compact byte form."""
        return cls(
            raw=json.dumps(value, separators=(",", ":"), sort_keys=True).encode()
        )

    def __str__(self) -> str:
        return self.raw.decode("utf-8", errors="backslashreplace")


@dataclass(frozen=True)
class Property:
    """Schema definition of one field as of one version.

    Mirrors the facets of a JSON Schema property. Collection facets hold
    tuples so that snapshots can be shared freely between diffs; keyed
    facets (``properties``, ``extensions``) are stored as ``(key, value)``
    pairs sorted by key, so their equality ignores insertion order.
    """

    id: str = ""
    schema: str = ""
    ref: str | None = None
    title: str = ""
    description: str = ""
    type: str = ""
    format: str = ""

    default: JSONValue | None = None
    example: JSONValue | None = None
    enum: tuple[JSONValue, ...] = ()

    # Numeric constraints
    maximum: float | None = None
    exclusive_maximum: bool = False
    minimum: float | None = None
    exclusive_minimum: bool = False
    multiple_of: float | None = None

    # String, array and object constraints
    max_length: int | None = None
    min_length: int | None = None
    pattern: str = ""
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool = False
    max_properties: int | None = None
    min_properties: int | None = None
    required: tuple[str, ...] = ()
    nullable: bool = False

    # Nested sub-schemas
    items: "Property | None" = None
    properties: tuple[tuple[str, "Property"], ...] = ()
    additional_properties: "Property | bool | None" = None
    all_of: tuple["Property", ...] = ()
    one_of: tuple["Property", ...] = ()
    any_of: tuple["Property", ...] = ()
    not_: "Property | None" = None

    # Vendor extensions (x-* keys)
    extensions: tuple[tuple[str, JSONValue], ...] = ()

    def __post_init__(self) -> None:
        for name in ("enum", "required", "all_of", "one_of", "any_of"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        for name in ("properties", "extensions"):
            object.__setattr__(self, name, _sorted_pairs(getattr(self, name)))

    def get_property(self, name: str) -> "Property | None":
        """Return the nested property called ``name``, if any."""
        return dict(self.properties).get(name)

    def get_extension(self, name: str) -> JSONValue | None:
        """Return the value of the ``x-*`` extension ``name``, if any."""
        return dict(self.extensions).get(name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Property":
        """Build a property snapshot from a JSON Schema mapping.

        Args:
            data: Mapping using JSON Schema keys (``maxLength``, ``$ref`` ...)

        Returns:
            The equivalent Property snapshot

        Raises:
            PropertyLoadError: If the mapping is malformed or has unknown keys
        """
        if not isinstance(data, Mapping):
            raise PropertyLoadError(
                f"Property definition must be a mapping, got {type(data).__name__}"
            )

        kwargs: dict[str, Any] = {}
        extensions: list[tuple[str, JSONValue]] = []

        for key, value in data.items():
            if key.startswith("x-"):
                extensions.append((key, JSONValue.from_python(value)))
                continue

            attr = _SCALAR_KEYS.get(key)
            if attr is not None:
                kwargs[attr] = value
            elif key in ("default", "example"):
                kwargs[key] = JSONValue.from_python(value)
            elif key == "enum":
                kwargs["enum"] = tuple(
                    JSONValue.from_python(v) for v in _as_list(key, value)
                )
            elif key == "required":
                names = _as_list(key, value)
                if not all(isinstance(name, str) for name in names):
                    raise PropertyLoadError("'required' must list field names")
                kwargs["required"] = tuple(names)
            elif key in ("items", "not"):
                kwargs["not_" if key == "not" else key] = cls.from_dict(value)
            elif key == "properties":
                if not isinstance(value, Mapping):
                    raise PropertyLoadError(
                        f"'properties' must be a mapping, got {type(value).__name__}"
                    )
                kwargs["properties"] = tuple(
                    (name, cls.from_dict(sub)) for name, sub in value.items()
                )
            elif key == "additionalProperties":
                kwargs["additional_properties"] = (
                    value if isinstance(value, bool) else cls.from_dict(value)
                )
            elif key in _COMPOSITION_KEYS:
                kwargs[_COMPOSITION_KEYS[key]] = tuple(
                    cls.from_dict(sub) for sub in _as_list(key, value)
                )
            else:
                raise PropertyLoadError(f"Unknown property key '{key}'")

        if extensions:
            kwargs["extensions"] = tuple(extensions)

        return cls(**kwargs)


def _sorted_pairs(pairs: Any) -> tuple[tuple[str, Any], ...]:
    if isinstance(pairs, Mapping):
        pairs = pairs.items()
    return tuple(sorted((tuple(pair) for pair in pairs), key=itemgetter(0)))


def _as_list(key: str, value: Any) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise PropertyLoadError(f"'{key}' must be a list, got {type(value).__name__}")
    return list(value)


_SCALAR_KEYS = {
    "id": "id",
    "$schema": "schema",
    "$ref": "ref",
    "title": "title",
    "description": "description",
    "type": "type",
    "format": "format",
    "maximum": "maximum",
    "exclusiveMaximum": "exclusive_maximum",
    "minimum": "minimum",
    "exclusiveMinimum": "exclusive_minimum",
    "multipleOf": "multiple_of",
    "maxLength": "max_length",
    "minLength": "min_length",
    "pattern": "pattern",
    "maxItems": "max_items",
    "minItems": "min_items",
    "uniqueItems": "unique_items",
    "maxProperties": "max_properties",
    "minProperties": "min_properties",
    "nullable": "nullable",
}

_COMPOSITION_KEYS = {
    "allOf": "all_of",
    "oneOf": "one_of",
    "anyOf": "any_of",
}


class PropertyLoadError(Exception):
    """Raised when a property definition cannot be converted."""

    pass

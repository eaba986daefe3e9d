"""Read-only model of an API description, its JSON loader and the ordering over it."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

from api_helper_generator.errors import SchemaError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Field:
    """A single field of a method or a type.

    Attributes:
        name: The snake_case field name, e.g. `chat_id`.
        types: The API type names this field accepts, e.g. `("Integer", "String")`.
        required: Whether callers must always supply the field.
    """

    name: str
    types: tuple[str, ...]
    required: bool = False


@dataclass(frozen=True)
class MethodDescription:
    """A remote API method, e.g. `sendMessage`."""

    name: str
    fields: tuple[Field, ...] = ()
    returns: tuple[str, ...] = ()

    def has_field(self, name: str) -> bool:
        """Whether the method declares a field with the given name."""
        return any(f.name == name for f in self.fields)


@dataclass(frozen=True)
class TypeDescription:
    """A declared API type, e.g. `Chat`.

    Types that list subtypes are interfaces: they are rendered without a pointer and carry no fields of their own.
    """

    name: str
    fields: tuple[Field, ...] = ()
    subtypes: tuple[str, ...] = ()

    @property
    def is_interface(self) -> bool:
        return bool(self.subtypes)

    def get_field(self, name: str) -> Field | None:
        for f in self.fields:
            if f.name == name:
                return f

        return None


@dataclass(frozen=True)
class APIDescription:
    """The complete API description: method and type descriptors by name."""

    methods: Mapping[str, MethodDescription]
    types: Mapping[str, TypeDescription]

    @classmethod
    def from_descriptions(
        cls,
        methods: Iterable[MethodDescription],
        types: Iterable[TypeDescription],
    ) -> APIDescription:
        """Build a description from descriptor sequences, keyed by their names.

        Args:
            methods: The method descriptors.
            types: The type descriptors.

        Raises:
            SchemaError: If a method or type name occurs more than once.

        Returns:
            The read-only API description.
        """
        return cls(
            methods=MappingProxyType(_index_by_name(methods, "method")),
            types=MappingProxyType(_index_by_name(types, "type")),
        )


def _index_by_name(descriptions: Iterable[Any], kind: str) -> dict[str, Any]:
    indexed: dict[str, Any] = {}
    for description in descriptions:
        if description.name in indexed:
            raise SchemaError(f"duplicate {kind} name '{description.name}'")
        indexed[description.name] = description

    return indexed


def ordered_methods(api: APIDescription) -> list[str]:
    """Method names in lexicographic order."""
    return sorted(api.methods)


def ordered_types(api: APIDescription) -> list[str]:
    """Type names in lexicographic order."""
    return sorted(api.types)


def _parse_field(raw: Any, owner: str, index: int) -> Field:
    if not isinstance(raw, Mapping):
        raise SchemaError(f"field #{index} of '{owner}' is not an object")

    name = raw.get("name")
    if not name:
        raise SchemaError(f"field #{index} of '{owner}' has no name")

    types = raw.get("types")
    if not types:
        raise SchemaError(f"field '{name}' of '{owner}' declares no types")

    return Field(
        name=name,
        types=tuple(types),
        required=bool(raw.get("required", False)),
    )


def _parse_fields(raw: Mapping[str, Any], owner: str) -> tuple[Field, ...]:
    return tuple(_parse_field(f, owner, i) for i, f in enumerate(raw.get("fields") or []))


def _entry_name(key: str, raw: Any, kind: str) -> str:
    if not isinstance(raw, Mapping):
        raise SchemaError(f"{kind} '{key}' is not an object")

    name = raw.get("name", key)
    if name != key:
        raise SchemaError(f"{kind} registered as '{key}' is named '{name}'")

    return name


def parse_api_description(data: Mapping[str, Any]) -> APIDescription:
    """Convert a decoded JSON API description into an `APIDescription`.

    The expected layout is the one of the published Bot API description files:

        {"methods": {"sendMessage": {"name": ..., "fields": [...], "returns": [...]}},
         "types": {"Chat": {"name": ..., "fields": [...], "subtypes": [...]}}}

    Args:
        data: The decoded JSON document.

    Raises:
        SchemaError: If the document does not follow the expected layout.

    Returns:
        The parsed, read-only API description.
    """
    raw_methods = data.get("methods")
    raw_types = data.get("types")
    if not isinstance(raw_methods, Mapping) or not isinstance(raw_types, Mapping):
        raise SchemaError("API description must contain 'methods' and 'types' objects")

    methods = []
    for key, raw in raw_methods.items():
        name = _entry_name(key, raw, "method")
        methods.append(
            MethodDescription(
                name=name,
                fields=_parse_fields(raw, name),
                returns=tuple(raw.get("returns") or ()),
            )
        )

    types = []
    for key, raw in raw_types.items():
        name = _entry_name(key, raw, "type")
        types.append(
            TypeDescription(
                name=name,
                fields=_parse_fields(raw, name),
                subtypes=tuple(raw.get("subtypes") or ()),
            )
        )

    logger.debug("Parsed %d methods and %d types.", len(methods), len(types))
    return APIDescription.from_descriptions(methods, types)


def load_api_description(path: str | Path) -> APIDescription:
    """Load an API description from a JSON file.

    Args:
        path: Location of the JSON file.

    Raises:
        SchemaError: If the file cannot be read or decoded, or has an unexpected layout.

    Returns:
        The parsed API description.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf8") as f:
            data = json.load(f)
    except OSError as e:
        raise SchemaError(f"could not read API description '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaError(f"API description '{path}' is not valid JSON: {e}") from e

    if not isinstance(data, Mapping):
        raise SchemaError(f"API description '{path}' must be a JSON object")

    logger.info("Loaded API description from '%s'.", path)
    return parse_api_description(data)

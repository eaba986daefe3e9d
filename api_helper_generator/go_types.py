"""Go representations of the types used in API descriptions."""

from __future__ import annotations

from dataclasses import dataclass

from api_helper_generator.errors import SchemaResolutionError
from api_helper_generator.schema import APIDescription, Field, MethodDescription, ordered_types

TG_TYPE_INTEGER = "Integer"
TG_TYPE_FLOAT = "Float"
TG_TYPE_BOOLEAN = "Boolean"
TG_TYPE_TRUE = "True"
TG_TYPE_STRING = "String"
TG_TYPE_FILE = "InputFile"
TG_TYPE_MESSAGE = "Message"

ARRAY_PREFIX = "Array of "

TG_TYPE_TO_GO = {
    TG_TYPE_INTEGER: "int64",
    TG_TYPE_FLOAT: "float64",
    TG_TYPE_BOOLEAN: "bool",
    TG_TYPE_TRUE: "bool",
    TG_TYPE_STRING: "string",
}

GO_ZERO_VALUES = {
    "int64": "0",
    "float64": "0.0",
    "bool": "false",
    "string": '""',
}

# Fields accepting several types are narrowed to the one the Go client exposes.
MULTI_TYPE_PREFERENCES = {
    frozenset({TG_TYPE_INTEGER, TG_TYPE_STRING}): TG_TYPE_INTEGER,
    frozenset({TG_TYPE_FILE, TG_TYPE_STRING}): TG_TYPE_FILE,
}


@dataclass(frozen=True)
class PreferredType:
    """The Go representation chosen for a field or return value.

    Attributes:
        go_type: The Go type as written in source, e.g. `*Message` or `[]int64`.
        type_name: The declared API type this refers to, if it is not a primitive.
        array_depth: How many slice levels wrap the element type.
        pointer: Whether the type is a pointer to a struct.
        interface: Whether the referenced declared type is rendered as a Go interface.
    """

    go_type: str
    type_name: str | None = None
    array_depth: int = 0
    pointer: bool = False
    interface: bool = False

    def __str__(self) -> str:
        return self.go_type

    @property
    def is_primitive(self) -> bool:
        return self.type_name is None

    @property
    def references_declared_type(self) -> bool:
        """Whether this is a plain, always present value of a declared type.

        Slices and optional (pointer) references do not count: a receiver cannot be relied on to hold them.
        """
        return self.type_name is not None and self.array_depth == 0 and not self.pointer

    @property
    def zero_value(self) -> str:
        """The Go literal of the zero value of this type."""
        if self.pointer or self.array_depth or self.interface:
            return "nil"
        if self.type_name is None:
            return GO_ZERO_VALUES[self.go_type]
        return f"{self.go_type}{{}}"


def is_tg_type(api: APIDescription, type_name: str) -> bool:
    """Whether the name refers to a declared API type rather than a primitive."""
    return type_name in api.types


def is_tg_struct(api: APIDescription, type_name: str) -> bool:
    """Whether the declared type is rendered as a Go struct (and not as an interface)."""
    if type_name == TG_TYPE_FILE or not is_tg_type(api, type_name):
        return False
    return not api.types[type_name].is_interface


def _split_array(type_name: str) -> tuple[str, int]:
    depth = 0
    while type_name.startswith(ARRAY_PREFIX):
        type_name = type_name[len(ARRAY_PREFIX) :]
        depth += 1

    return type_name, depth


def resolve_type(api: APIDescription, type_name: str, pointer_structs: bool) -> PreferredType:
    """Resolve a single API type name into its Go representation.

    Args:
        api: The API description to resolve declared types against.
        type_name: The API type name, e.g. `Integer`, `Chat` or `Array of PhotoSize`.
        pointer_structs: Whether a (non-slice) struct type should be referenced through a pointer.

    Raises:
        SchemaResolutionError: If the name is neither a primitive nor a declared type.

    Returns:
        The resolved type.
    """
    base, depth = _split_array(type_name)
    prefix = "[]" * depth

    if base in TG_TYPE_TO_GO:
        return PreferredType(go_type=prefix + TG_TYPE_TO_GO[base], array_depth=depth)

    if base != TG_TYPE_FILE and not is_tg_type(api, base):
        raise SchemaResolutionError(f"unknown type '{base}'")

    is_struct = is_tg_struct(api, base)
    pointer = pointer_structs and is_struct and depth == 0
    return PreferredType(
        go_type=prefix + ("*" if pointer else "") + base,
        type_name=base,
        array_depth=depth,
        pointer=pointer,
        interface=not is_struct,
    )


def _common_interface(api: APIDescription, type_names: list[str]) -> str | None:
    for name in ordered_types(api):
        tg_type = api.types[name]
        if tg_type.is_interface and set(type_names) <= set(tg_type.subtypes):
            return name

    return None


def choose_type_name(api: APIDescription, types: tuple[str, ...]) -> str:
    """Pick the single API type a field is represented by.

    Args:
        api: The API description, used to find interfaces shared by several alternatives.
        types: The alternatives the field accepts.

    Raises:
        SchemaResolutionError: If there are no alternatives, or none can be preferred.

    Returns:
        The chosen API type name.
    """
    if not types:
        raise SchemaResolutionError("no types declared")
    if len(types) == 1:
        return types[0]

    preferred = MULTI_TYPE_PREFERENCES.get(frozenset(types))
    if preferred is not None:
        return preferred

    # Alternatives that are all subtypes of one interface, e.g. the InputMedia* variants of a media group.
    split = [_split_array(t) for t in types]
    depths = {depth for _, depth in split}
    if len(depths) == 1:
        interface = _common_interface(api, [base for base, _ in split])
        if interface is not None:
            return ARRAY_PREFIX * depths.pop() + interface

    raise SchemaResolutionError(f"unable to choose one of multiple types {', '.join(types)}")


def get_preferred_type(api: APIDescription, field: Field, owner: str) -> PreferredType:
    """Resolve the Go type of a method or type field.

    Optional struct fields are represented through a pointer, required ones by value.

    Args:
        api: The API description.
        field: The field to resolve.
        owner: The name of the method or type declaring the field, for error messages.

    Raises:
        SchemaResolutionError: If the field type cannot be resolved.

    Returns:
        The preferred Go type of the field.
    """
    try:
        return resolve_type(api, choose_type_name(api, field.types), pointer_structs=not field.required)
    except SchemaResolutionError as e:
        raise SchemaResolutionError(f"failed to get preferred type for field {field.name} of {owner}: {e}") from e


def get_return_types(api: APIDescription, method: MethodDescription) -> list[str]:
    """Resolve the Go return types of a method, excluding the trailing error.

    Struct results are returned through pointers. Methods documented to return one of several results
    (e.g. `Message` or `True`) return each of them.

    Args:
        api: The API description.
        method: The method to resolve the results of.

    Raises:
        SchemaResolutionError: If the method declares no results or a result cannot be resolved.

    Returns:
        The Go return types, in declared order.
    """
    if not method.returns:
        raise SchemaResolutionError(f"failed to get return type for {method.name}: no return types declared")

    try:
        return [resolve_type(api, r, pointer_structs=True).go_type for r in method.returns]
    except SchemaResolutionError as e:
        raise SchemaResolutionError(f"failed to get return type for {method.name}: {e}") from e

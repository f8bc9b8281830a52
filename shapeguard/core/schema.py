"""Schema model: the closed set of shapes a schema value can take."""

from __future__ import annotations

import types
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Sequence, Union

from typing_extensions import get_origin

from shapeguard.core.models import Undefined

Schema = Union[
    type,
    Sequence["Schema"],
    Mapping[str, "Schema"],
    Callable[[Any], object],
    str,
    int,
    float,
    bool,
    None,
    Undefined,
    Enum,
]
"""Any value the matcher knows how to interpret."""


class SchemaKind(str, Enum):
    """Schema variants, in the precedence order the matcher checks them."""

    PRIMITIVE = "primitive"  # str, int, float, bool used as markers
    ARRAY = "array"  # list or tuple of nested schemas
    OBJECT = "object"  # mapping of property name to nested schema
    CLASS = "class"  # any other class, checked with isinstance
    PREDICATE = "predicate"  # any other callable, including guards
    LITERAL = "literal"  # exact primitive value, None, UNDEFINED or enum member
    INVALID = "invalid"  # matches nothing


PRIMITIVE_MARKERS: tuple[type, ...] = (str, int, float, bool)

LITERAL_TYPES: tuple[type, ...] = (str, int, float, bool, type(None), Undefined, Enum)

TYPING_MODULES = frozenset({"typing", "typing_extensions"})


def is_primitive_marker(schema: Any) -> bool:
    """Check if a schema is one of the builtin primitive markers."""
    return isinstance(schema, type) and schema in PRIMITIVE_MARKERS


def is_typing_construct(schema: Any) -> bool:
    """
    Check if a schema is a typing annotation rather than a runtime schema.

    Covers subscripted generics (``List[int]``, ``list[int]``, ``Optional[int]``,
    ``int | str``) and special forms or classes built by the typing modules
    (``Any``, ``TypedDict`` and ``Protocol`` classes). None of these can be
    called or used with ``isinstance`` reliably.
    """
    if isinstance(schema, types.GenericAlias) or get_origin(schema) is not None:
        return True
    return type(schema).__module__ in TYPING_MODULES


def is_object_schema(schema: Any) -> bool:
    """Check if a schema is a mapping keyed only by property names."""
    return isinstance(schema, Mapping) and all(isinstance(key, str) for key in schema)


def classify(schema: Any) -> SchemaKind:
    """
    Determine which schema variant a value is.

    Classification never raises: anything that is not a recognizable shape,
    including typing annotations such as ``List[int]``, is reported as
    ``SchemaKind.INVALID``.

    Args:
        schema: The schema value to inspect

    Returns:
        The schema's kind
    """
    if is_typing_construct(schema):
        return SchemaKind.INVALID
    if is_primitive_marker(schema):
        return SchemaKind.PRIMITIVE
    if isinstance(schema, (list, tuple)):
        return SchemaKind.ARRAY
    if isinstance(schema, Mapping):
        return SchemaKind.OBJECT if is_object_schema(schema) else SchemaKind.INVALID
    if isinstance(schema, type):
        return SchemaKind.CLASS
    if callable(schema):
        return SchemaKind.PREDICATE
    if isinstance(schema, LITERAL_TYPES):
        return SchemaKind.LITERAL
    return SchemaKind.INVALID

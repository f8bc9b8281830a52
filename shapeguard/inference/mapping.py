"""Derive a ``typing`` annotation from a schema value.

The mapping is a total function over the same ``SchemaKind`` variants the
matcher dispatches on, so every schema shape the matcher understands has a
corresponding annotation. Object schemas become ``TypedDict`` classes whose
keys are split into required and ``NotRequired`` groups based on the
optionality tag carried by ``optional`` guards.
"""

from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Dict, List, Literal, Tuple, Union

import typing_extensions
from typing_extensions import Never, NotRequired, TypedDict

from shapeguard.core.models import Guard, GuardKind
from shapeguard.core.schema import Schema, SchemaKind, classify

logger = logging.getLogger(__name__)

TypeMapper = Callable[[Any, str], Any]

_NARROWING_ORIGINS = {
    typing.TypeGuard,
    typing_extensions.TypeGuard,
    typing_extensions.TypeIs,
}


def type_from_schema(schema: Schema, name: str = "Shape") -> Any:
    """
    Compute the annotation describing values that conform to a schema.

    Args:
        schema: The schema to describe
        name: Class name for the generated ``TypedDict`` of an object schema;
            nested object schemas are named ``<name>_<key>``

    Returns:
        A type or ``typing`` construct usable in annotations and with
        ``pydantic.TypeAdapter``
    """
    return _MAPPERS[classify(schema)](schema, name)


def required_keys(schema: Mapping[str, Any]) -> list[str]:
    """Keys of an object schema whose property must be present."""
    return [key for key, value in schema.items() if not is_optional(value)]


def optional_keys(schema: Mapping[str, Any]) -> list[str]:
    """Keys of an object schema whose property may be absent."""
    return [key for key, value in schema.items() if is_optional(value)]


def is_optional(schema: Any) -> bool:
    """Check if a schema carries the optionality tag."""
    return isinstance(schema, Guard) and schema.optional


def _map_primitive(schema: type, name: str) -> Any:
    return schema


def _map_array(schema: Sequence[Any], name: str) -> Any:
    if len(schema) <= 1:
        item = type_from_schema(schema[0], name) if schema else Any
        return Union[List[item], Tuple[item, ...]]
    # Fixed arity is only expressible for tuples, so list values are not covered
    return Tuple[tuple(type_from_schema(item, name) for item in schema)]


def _map_object(schema: Mapping[str, Any], name: str) -> Any:
    fields: Dict[str, Any] = {}
    for key, value in schema.items():
        annotation = type_from_schema(value, f"{name}_{key}")
        fields[key] = NotRequired[annotation] if is_optional(value) else annotation
    return TypedDict(name, fields)


def _map_class(schema: type, name: str) -> Any:
    return schema


def _map_predicate(schema: Callable[[Any], object], name: str) -> Any:
    if isinstance(schema, Guard):
        return _map_guard(schema, name)
    return _declared_narrowing(schema)


def _map_guard(guard: Guard[Any], name: str) -> Any:
    if guard.kind is GuardKind.UNKNOWN:
        return Any
    if guard.kind is GuardKind.RECORD:
        key_schema, value_schema = guard.members
        return Dict[type_from_schema(key_schema, name), type_from_schema(value_schema, name)]
    if guard.kind is GuardKind.TYPE_GUARD:
        return type_from_schema(guard.members[0], name)
    # UNION and OPTIONAL: OPTIONAL members already include UNDEFINED
    if not guard.members:
        return Never
    return Union[tuple(type_from_schema(member, name) for member in guard.members)]


def _declared_narrowing(predicate: Callable[[Any], object]) -> Any:
    target = predicate if inspect.isroutine(predicate) else type(predicate).__call__
    try:
        hints = typing_extensions.get_type_hints(target)
    except (NameError, TypeError) as e:
        logger.debug(f"Could not read annotations of {predicate!r}: {e}")
        return Any

    returns = hints.get("return")
    if typing_extensions.get_origin(returns) in _NARROWING_ORIGINS:
        return typing_extensions.get_args(returns)[0]
    logger.debug(f"Predicate {predicate!r} declares no TypeGuard, using Any")
    return Any


def _map_literal(schema: Any, name: str) -> Any:
    if schema is None:
        return None
    return Literal[schema]


def _map_invalid(schema: Any, name: str) -> Any:
    return Never


_MAPPERS: dict[SchemaKind, TypeMapper] = {
    SchemaKind.PRIMITIVE: _map_primitive,
    SchemaKind.ARRAY: _map_array,
    SchemaKind.OBJECT: _map_object,
    SchemaKind.CLASS: _map_class,
    SchemaKind.PREDICATE: _map_predicate,
    SchemaKind.LITERAL: _map_literal,
    SchemaKind.INVALID: _map_invalid,
}

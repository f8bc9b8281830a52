"""Recursive conformance check and mismatch-path collector."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Callable, Optional, TypeVar, overload

from typing_extensions import TypeGuard

from shapeguard.core.config import DEFAULT_CONFIG, MatchConfig, PredicateErrorPolicy
from shapeguard.core.models import UNDEFINED, Guard
from shapeguard.core.schema import Schema, SchemaKind, classify

logger = logging.getLogger(__name__)

T = TypeVar("T")

DiffHandler = Callable[[Any, Any, str, MatchConfig], list[str]]


@overload
def is_(value: Any, schema: type[T], *, config: Optional[MatchConfig] = None) -> TypeGuard[T]: ...


@overload
def is_(value: Any, schema: Guard[T], *, config: Optional[MatchConfig] = None) -> TypeGuard[T]: ...


@overload
def is_(value: Any, schema: Schema, *, config: Optional[MatchConfig] = None) -> bool: ...


def is_(value: Any, schema: Any, *, config: Optional[MatchConfig] = None) -> bool:
    """
    Check whether a value conforms to a schema.

    Args:
        value: Any value, typically decoded JSON
        schema: The expected shape
        config: Matcher options (defaults to ``DEFAULT_CONFIG``)

    Returns:
        True if ``diff(value, schema)`` is empty
    """
    return not diff(value, schema, config=config)


def diff(
    value: Any,
    schema: Schema,
    path: Optional[str] = None,
    *,
    config: Optional[MatchConfig] = None,
) -> list[str]:
    """
    Collect every path at which a value fails to conform to a schema.

    Paths are rooted at ``path`` (or ``config.root``), extended with
    ``.key`` for mapping properties and ``[i]`` for sequence items, and
    listed in traversal order.

    Args:
        value: Any value, typically decoded JSON
        schema: The expected shape
        path: Root token for the returned paths
        config: Matcher options (defaults to ``DEFAULT_CONFIG``)

    Returns:
        List of mismatch paths, empty when the value conforms
    """
    config = config or DEFAULT_CONFIG
    return _diff(value, schema, config.root if path is None else path, config)


def _diff(value: Any, schema: Any, path: str, config: MatchConfig) -> list[str]:
    handler = _HANDLERS[classify(schema)]
    return handler(value, schema, path, config)


def _diff_primitive(value: Any, schema: type, path: str, config: MatchConfig) -> list[str]:
    if schema is str:
        ok = isinstance(value, str)
    elif schema is bool:
        ok = isinstance(value, bool)
    elif schema is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    else:
        # float is the number marker and accepts ints as well
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    return [] if ok else [path]


def _diff_array(value: Any, schema: Sequence[Any], path: str, config: MatchConfig) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return [path]
    if not schema:
        return []

    if len(schema) == 1:
        item_schema = schema[0]
        paths: list[str] = []
        for index, item in enumerate(value):
            paths.extend(_diff(item, item_schema, f"{path}[{index}]", config))
        return paths

    # Tuple mode: positional content first, length only once content matches
    paths = []
    for index, (item, item_schema) in enumerate(zip(value, schema)):
        paths.extend(_diff(item, item_schema, f"{path}[{index}]", config))
    if paths:
        return paths
    if len(value) != len(schema):
        return [path]
    return []


def _diff_object(value: Any, schema: Mapping[str, Any], path: str, config: MatchConfig) -> list[str]:
    if not isinstance(value, Mapping):
        return [path]

    paths: list[str] = []
    for key, property_schema in schema.items():
        paths.extend(_diff(value.get(key, UNDEFINED), property_schema, f"{path}.{key}", config))
    return paths


def _diff_class(value: Any, schema: type, path: str, config: MatchConfig) -> list[str]:
    return [] if isinstance(value, schema) else [path]


def _diff_predicate(value: Any, schema: Callable[[Any], object], path: str, config: MatchConfig) -> list[str]:
    if config.predicate_errors is PredicateErrorPolicy.RAISE:
        return [] if _call_predicate(value, schema, config) else [path]

    try:
        ok = _call_predicate(value, schema, config)
    except Exception as e:
        logger.warning(f"Predicate {schema!r} raised {e!r} at {path}; treating as a mismatch")
        ok = False
    return [] if ok else [path]


def _call_predicate(value: Any, schema: Callable[[Any], object], config: MatchConfig) -> bool:
    if isinstance(schema, Guard):
        return schema.test(value, config)
    return bool(schema(value))


def _diff_literal(value: Any, schema: Any, path: str, config: MatchConfig) -> list[str]:
    return [] if literal_equals(value, schema) else [path]


def _diff_invalid(value: Any, schema: Any, path: str, config: MatchConfig) -> list[str]:
    logger.debug(f"Unsupported schema {schema!r} at {path}; treating as a mismatch")
    return [path]


def literal_equals(value: Any, literal: Any) -> bool:
    """
    Strict equality between a value and a literal schema.

    ``None``, ``UNDEFINED``, booleans and enum members compare by identity,
    so ``True`` never equals ``1`` and ``None`` never equals ``UNDEFINED``.
    Numbers compare by value across ``int`` and ``float``.
    """
    if literal is None or isinstance(literal, (bool, Enum)) or isinstance(value, bool):
        return value is literal
    if isinstance(literal, (int, float)):
        return isinstance(value, (int, float)) and value == literal
    return isinstance(value, str) and value == literal


_HANDLERS: dict[SchemaKind, DiffHandler] = {
    SchemaKind.PRIMITIVE: _diff_primitive,
    SchemaKind.ARRAY: _diff_array,
    SchemaKind.OBJECT: _diff_object,
    SchemaKind.CLASS: _diff_class,
    SchemaKind.PREDICATE: _diff_predicate,
    SchemaKind.LITERAL: _diff_literal,
    SchemaKind.INVALID: _diff_invalid,
}

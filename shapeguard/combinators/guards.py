"""Combinators that build composite schemas on top of the matcher."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar, overload

from shapeguard.core.config import MatchConfig
from shapeguard.core.models import UNDEFINED, Guard, GuardKind
from shapeguard.core.schema import Schema
from shapeguard.matching.matcher import is_

T = TypeVar("T")


def union(*schemas: Schema) -> Guard[Any]:
    """
    Create a guard matching values that match any of the given schemas.

    With no schemas the guard matches nothing.
    """

    def check(value: Any, config: MatchConfig) -> bool:
        return any(is_(value, schema, config=config) for schema in schemas)

    return Guard(check=check, kind=GuardKind.UNION, members=schemas)


def optional(schema: Schema) -> Guard[Any]:
    """
    Create a guard matching the schema or an absent value.

    The guard is tagged optional, so type inference marks the enclosing
    mapping key as not required.
    """
    members = (schema, UNDEFINED)

    def check(value: Any, config: MatchConfig) -> bool:
        return any(is_(value, member, config=config) for member in members)

    return Guard(check=check, kind=GuardKind.OPTIONAL, members=members, optional=True)


def record(key_schema: Schema, value_schema: Schema) -> Guard[Any]:
    """Create a guard matching mappings whose keys and values all conform."""

    def check(value: Any, config: MatchConfig) -> bool:
        if not isinstance(value, Mapping):
            return False
        return all(
            is_(key, key_schema, config=config) and is_(item, value_schema, config=config)
            for key, item in value.items()
        )

    return Guard(check=check, kind=GuardKind.RECORD, members=(key_schema, value_schema))


@overload
def type_guard(schema: type[T]) -> Guard[T]: ...


@overload
def type_guard(schema: Schema) -> Guard[Any]: ...


def type_guard(schema: Any) -> Guard[Any]:
    """Create a reusable guard equivalent to ``is_(value, schema)``."""

    def check(value: Any, config: MatchConfig) -> bool:
        return is_(value, schema, config=config)

    return Guard(check=check, kind=GuardKind.TYPE_GUARD, members=(schema,))


def _accept(value: Any, config: MatchConfig) -> bool:
    return True


unknown: Guard[Any] = Guard(check=_accept, kind=GuardKind.UNKNOWN)
"""Guard accepting every value, used to opt a subtree out of checking."""

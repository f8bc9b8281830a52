"""
shapeguard: runtime shape checks built from plain Python values.

A schema is an ordinary value: the builtin classes ``str``, ``int``,
``float`` and ``bool`` as markers, lists for arrays and tuples, dicts for
objects, classes for ``isinstance`` checks, callables as predicates and
literal values for exact matches.

Example usage:

    import json

    from shapeguard import assert_, diff, is_, optional, union

    schema = {
        "post": {
            "id": int,
            "title": str,
            "tags": [str],
            "status": union("draft", "published"),
            "summary": optional(str),
        }
    }

    payload = json.loads(body)

    if is_(payload, schema):
        ...

    # Every mismatch path, e.g. ["value.post.id"]
    problems = diff(payload, schema)

    # Raises TypeMismatchError("value.post.id does not match the schema.")
    assert_(payload, schema)
"""

__version__ = "0.1.0"

from shapeguard.combinators.guards import optional, record, type_guard, union, unknown
from shapeguard.core.config import (
    DEFAULT_CONFIG,
    MatchConfig,
    PredicateErrorPolicy,
    load_config,
)
from shapeguard.core.exceptions import ShapeGuardError, TypeMismatchError
from shapeguard.core.models import UNDEFINED, Guard, GuardKind, Undefined
from shapeguard.core.schema import Schema, SchemaKind, classify
from shapeguard.inference.mapping import type_from_schema
from shapeguard.matching.assertion import assert_
from shapeguard.matching.matcher import diff, is_

__all__ = [
    # Version
    "__version__",
    # Matching
    "is_",
    "diff",
    "assert_",
    # Combinators
    "union",
    "optional",
    "record",
    "type_guard",
    "unknown",
    # Type inference
    "type_from_schema",
    # Schema model
    "Schema",
    "SchemaKind",
    "classify",
    "Guard",
    "GuardKind",
    "UNDEFINED",
    "Undefined",
    # Config
    "DEFAULT_CONFIG",
    "MatchConfig",
    "PredicateErrorPolicy",
    "load_config",
    # Exceptions
    "ShapeGuardError",
    "TypeMismatchError",
]

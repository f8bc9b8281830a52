"""Schema combinators."""

from shapeguard.combinators.guards import optional, record, type_guard, union, unknown

__all__ = [
    "optional",
    "record",
    "type_guard",
    "union",
    "unknown",
]

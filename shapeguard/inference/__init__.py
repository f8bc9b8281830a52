"""Type inference from schema values."""

from shapeguard.inference.mapping import (
    is_optional,
    optional_keys,
    required_keys,
    type_from_schema,
)

__all__ = [
    "is_optional",
    "optional_keys",
    "required_keys",
    "type_from_schema",
]

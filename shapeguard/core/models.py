"""Core value types shared by the matcher, combinators and type inference."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from shapeguard.core.config import DEFAULT_CONFIG, MatchConfig

T = TypeVar("T")


class Undefined(Enum):
    """Sentinel for an absent value, distinct from ``None``."""

    UNDEFINED = "UNDEFINED"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = Undefined.UNDEFINED


class GuardKind(str, Enum):
    """How a guard was built."""

    UNION = "union"
    OPTIONAL = "optional"
    RECORD = "record"
    TYPE_GUARD = "type_guard"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Guard(Generic[T]):
    """
    A tagged predicate produced by a combinator.

    Guards are ordinary one-argument callables, so the matcher treats them
    as predicate schemas. The extra fields are only read by type inference,
    and ``optional`` marks the enclosing mapping key as not required.
    """

    check: Callable[[Any, MatchConfig], bool] = field(repr=False)
    kind: GuardKind
    members: tuple[Any, ...] = ()
    optional: bool = False

    def test(self, value: Any, config: Optional[MatchConfig] = None) -> bool:
        """Run the check with an explicit matcher configuration."""
        return self.check(value, config or DEFAULT_CONFIG)

    def __call__(self, value: Any) -> bool:
        return self.test(value)

    def __repr__(self) -> str:
        if self.kind is GuardKind.UNKNOWN:
            return "unknown"
        args = ", ".join(_describe(member) for member in self.members)
        return f"{self.kind.value}({args})"


def _describe(schema: Any) -> str:
    if isinstance(schema, type):
        return schema.__name__
    return repr(schema)

"""Custom exceptions for the shapeguard library."""

from __future__ import annotations

from typing import Any, Optional

from shapeguard.core.models import UNDEFINED


class ShapeGuardError(Exception):
    """Base exception for all shapeguard errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class TypeMismatchError(ShapeGuardError, TypeError):
    """
    Raised by ``assert_`` when a value does not match its schema.

    Only the first mismatch path appears in the message; ``paths`` keeps
    every mismatch in traversal order, and ``value``/``schema`` keep the
    checked pair for callers that want to report more.
    """

    def __init__(
        self,
        path: str,
        paths: Optional[list[str]] = None,
        value: Any = UNDEFINED,
        schema: Any = UNDEFINED,
    ) -> None:
        self.path = path
        self.paths = list(paths) if paths else [path]
        self.value = value
        self.schema = schema
        super().__init__(f"{path} does not match the schema.")

    @property
    def mismatch_count(self) -> int:
        """Number of mismatches found when the error was raised."""
        return len(self.paths)

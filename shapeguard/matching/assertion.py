"""Assertion helper that turns a mismatch into an exception."""

from __future__ import annotations

import logging
from typing import Any, Optional

from shapeguard.core.config import MatchConfig
from shapeguard.core.exceptions import TypeMismatchError
from shapeguard.core.schema import Schema
from shapeguard.matching.matcher import diff

logger = logging.getLogger(__name__)


def assert_(value: Any, schema: Schema, *, config: Optional[MatchConfig] = None) -> None:
    """
    Assert that a value conforms to a schema.

    Args:
        value: Any value, typically decoded JSON
        schema: The expected shape
        config: Matcher options (defaults to ``DEFAULT_CONFIG``)

    Raises:
        TypeMismatchError: If the value does not conform. The error carries
            the first mismatch path in traversal order, and all of them in
            ``paths``.
    """
    paths = diff(value, schema, config=config)
    if paths:
        logger.debug(f"Assertion failed with {len(paths)} mismatch(es): {paths}")
        raise TypeMismatchError(paths[0], paths=paths, value=value, schema=schema)

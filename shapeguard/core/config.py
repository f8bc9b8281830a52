"""Configuration for the shapeguard matcher."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class PredicateErrorPolicy(str, Enum):
    """What to do when a caller-supplied predicate raises."""

    RAISE = "raise"  # Propagate the exception to the caller
    MISMATCH = "mismatch"  # Log a warning and record a mismatch


class MatchConfig(BaseModel):
    """Options threaded through every matcher call."""

    root: str = Field(default="value", min_length=1)
    predicate_errors: PredicateErrorPolicy = PredicateErrorPolicy.RAISE

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }


DEFAULT_CONFIG = MatchConfig()


def load_config(data: Optional[dict[str, Any]] = None) -> MatchConfig:
    """
    Build a configuration from a plain dictionary or return the default.

    Args:
        data: Optional mapping of config field names to values

    Returns:
        MatchConfig instance
    """
    if data:
        return MatchConfig.model_validate(data)
    return DEFAULT_CONFIG

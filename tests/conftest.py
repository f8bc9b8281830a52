"""Shared test fixtures for shapeguard."""

import json

import pytest

from shapeguard import MatchConfig, PredicateErrorPolicy, optional, union


@pytest.fixture
def default_config() -> MatchConfig:
    """Create a configuration with default settings."""
    return MatchConfig()


@pytest.fixture
def lenient_config() -> MatchConfig:
    """Create a configuration that turns raising predicates into mismatches."""
    return MatchConfig(predicate_errors=PredicateErrorPolicy.MISMATCH)


@pytest.fixture
def post_schema() -> dict:
    """Create a schema describing a blog post payload."""
    return {
        "post": {
            "id": int,
            "title": str,
            "tags": [str],
            "status": union("draft", "published"),
            "summary": optional(str),
        }
    }


@pytest.fixture
def post_payload() -> dict:
    """Create a decoded JSON payload matching the post schema."""
    return json.loads(
        """
        {
            "post": {
                "id": 23,
                "title": "Hello",
                "tags": ["intro", "news"],
                "status": "published",
                "views": 1024
            }
        }
        """
    )

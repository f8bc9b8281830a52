"""Tests for the schema model and classification."""

from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

import pytest

from shapeguard import UNDEFINED, SchemaKind, classify, optional, union, unknown
from shapeguard.core.config import DEFAULT_CONFIG, MatchConfig, PredicateErrorPolicy, load_config
from shapeguard.core.exceptions import ShapeGuardError, TypeMismatchError
from shapeguard.core.models import Guard, GuardKind, Undefined


class Color(Enum):
    RED = "red"


class TestClassify:
    """Test schema classification."""

    @pytest.mark.parametrize("schema", [str, int, float, bool])
    def test_primitive_markers(self, schema: type) -> None:
        """Builtin primitive classes are markers."""
        assert classify(schema) == SchemaKind.PRIMITIVE

    @pytest.mark.parametrize("schema", [[], [int], [str, int], (str, int), ()])
    def test_arrays(self, schema) -> None:
        """Lists and tuples are array schemas."""
        assert classify(schema) == SchemaKind.ARRAY

    def test_object(self) -> None:
        """Mappings with string keys are object schemas."""
        assert classify({"a": int}) == SchemaKind.OBJECT
        assert classify({}) == SchemaKind.OBJECT

    def test_object_with_non_string_key_is_invalid(self) -> None:
        """Mappings with other keys match nothing."""
        assert classify({1: int}) == SchemaKind.INVALID

    @pytest.mark.parametrize("schema", [date, list, dict, Exception, Color])
    def test_classes(self, schema: type) -> None:
        """Non-marker classes are instance checks."""
        assert classify(schema) == SchemaKind.CLASS

    def test_predicates(self) -> None:
        """Functions, lambdas and guards are predicates."""

        def is_even(v: object) -> bool:
            return isinstance(v, int) and v % 2 == 0

        assert classify(is_even) == SchemaKind.PREDICATE
        assert classify(lambda v: True) == SchemaKind.PREDICATE
        assert classify(callable) == SchemaKind.PREDICATE
        assert classify(union(str, int)) == SchemaKind.PREDICATE
        assert classify(unknown) == SchemaKind.PREDICATE

    @pytest.mark.parametrize("schema", ["foo", 0, 1.5, True, None, UNDEFINED, Color.RED])
    def test_literals(self, schema) -> None:
        """Concrete values are literals."""
        assert classify(schema) == SchemaKind.LITERAL

    @pytest.mark.parametrize("schema", [{1, 2}, b"bytes", object(), 1j])
    def test_invalid(self, schema) -> None:
        """Unrecognized values classify as invalid rather than raising."""
        assert classify(schema) == SchemaKind.INVALID

    @pytest.mark.parametrize("schema", [List[int], list[int], Optional[int], Any, int | str, Dict[str, int]])
    def test_typing_annotations_are_invalid(self, schema) -> None:
        """Typing annotations are not schemas, even though some are callable."""
        assert classify(schema) == SchemaKind.INVALID


class TestUndefined:
    """Test the absent-value sentinel."""

    def test_distinct_from_none(self) -> None:
        """UNDEFINED is not None."""
        assert UNDEFINED is not None
        assert UNDEFINED is Undefined.UNDEFINED

    def test_falsy(self) -> None:
        """UNDEFINED is falsy like None."""
        assert not UNDEFINED

    def test_repr(self) -> None:
        """UNDEFINED has a short repr."""
        assert repr(UNDEFINED) == "UNDEFINED"


class TestGuard:
    """Test the tagged predicate wrapper."""

    def test_optional_tag(self) -> None:
        """Only optional() sets the optionality tag."""
        assert optional(str).optional is True
        assert union(str, UNDEFINED).optional is False

    def test_kind_and_members(self) -> None:
        """Guards remember how they were built."""
        guard = union(str, int)
        assert guard.kind == GuardKind.UNION
        assert guard.members == (str, int)

    def test_callable(self) -> None:
        """Guards are one-argument callables."""
        guard = Guard(check=lambda value, config: value == 1, kind=GuardKind.TYPE_GUARD)
        assert guard(1) is True
        assert guard(2) is False

    def test_repr(self) -> None:
        """Guards describe themselves."""
        assert repr(union(str, int)) == "union(str, int)"
        assert repr(unknown) == "unknown"


class TestMatchConfig:
    """Test matcher configuration."""

    def test_defaults(self) -> None:
        """Default config roots paths at 'value' and propagates errors."""
        config = MatchConfig()
        assert config.root == "value"
        assert config.predicate_errors == PredicateErrorPolicy.RAISE

    def test_frozen(self) -> None:
        """Configs are immutable."""
        with pytest.raises(Exception):
            DEFAULT_CONFIG.root = "other"

    def test_empty_root_rejected(self) -> None:
        """Root token must be non-empty."""
        with pytest.raises(ValueError):
            MatchConfig(root="")

    def test_unknown_field_rejected(self) -> None:
        """Extra fields are rejected."""
        with pytest.raises(ValueError):
            MatchConfig(verbose=True)

    def test_load_config(self) -> None:
        """Configs load from plain dictionaries."""
        config = load_config({"root": "payload", "predicate_errors": "mismatch"})
        assert config.root == "payload"
        assert config.predicate_errors == PredicateErrorPolicy.MISMATCH
        assert load_config() is DEFAULT_CONFIG


class TestExceptions:
    """Test the exception taxonomy."""

    def test_type_mismatch_message(self) -> None:
        """The message embeds the mismatch path."""
        error = TypeMismatchError("value.post.id")
        assert str(error) == "value.post.id does not match the schema."
        assert error.path == "value.post.id"
        assert error.paths == ["value.post.id"]

    def test_type_mismatch_is_type_error(self) -> None:
        """TypeMismatchError is both a TypeError and a ShapeGuardError."""
        error = TypeMismatchError("value")
        assert isinstance(error, TypeError)
        assert isinstance(error, ShapeGuardError)

    def test_base_message(self) -> None:
        """The base error keeps its message."""
        error = ShapeGuardError("boom")
        assert error.message == "boom"
        assert str(error) == "boom"

    def test_carries_checked_pair(self) -> None:
        """The error keeps every path and the checked value and schema."""
        schema = {"a": str, "b": str}
        error = TypeMismatchError("value.a", paths=["value.a", "value.b"], value={}, schema=schema)
        assert str(error) == "value.a does not match the schema."
        assert error.mismatch_count == 2
        assert error.value == {}
        assert error.schema is schema

"""Schema matching: conformance checks, diffs and assertions."""

from shapeguard.matching.assertion import assert_
from shapeguard.matching.matcher import diff, is_, literal_equals

__all__ = [
    "assert_",
    "diff",
    "is_",
    "literal_equals",
]

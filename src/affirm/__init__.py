"""Fluent assertions with deterministic failure messages."""

from affirm.api import (
    ComparableAssert,
    DateAssert,
    ObjectAssert,
    PathAssert,
    SoftAssertions,
    assert_that,
    assert_that_comparable,
    assert_that_date,
    assert_that_path,
)
from affirm.exceptions import (
    AssertionFailedError,
    IllegalStateError,
    SoftAssertionError,
    UncheckedIOError,
)
from affirm.info import AssertionInfo

__all__ = [
    "AssertionFailedError",
    "AssertionInfo",
    "ComparableAssert",
    "DateAssert",
    "IllegalStateError",
    "ObjectAssert",
    "PathAssert",
    "SoftAssertionError",
    "SoftAssertions",
    "UncheckedIOError",
    "assert_that",
    "assert_that_comparable",
    "assert_that_date",
    "assert_that_path",
]

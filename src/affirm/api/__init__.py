"""Fluent assertion classes and their entry points."""

from affirm.api.abstract import AbstractAssert, ObjectAssert
from affirm.api.comparable import ComparableAssert
from affirm.api.date import DateAssert
from affirm.api.entry import (
    assert_that,
    assert_that_comparable,
    assert_that_date,
    assert_that_path,
)
from affirm.api.path import PathAssert
from affirm.api.soft import SoftAssertions

__all__ = [
    "AbstractAssert",
    "ComparableAssert",
    "DateAssert",
    "ObjectAssert",
    "PathAssert",
    "SoftAssertions",
    "assert_that",
    "assert_that_comparable",
    "assert_that_date",
    "assert_that_path",
]

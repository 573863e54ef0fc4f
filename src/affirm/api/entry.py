"""Entry points that wrap an actual value in the matching assertion class."""

from __future__ import annotations

import os
from datetime import date
from decimal import Decimal
from numbers import Real
from typing import Any

from affirm.api.abstract import AbstractAssert, ObjectAssert
from affirm.api.comparable import ComparableAssert
from affirm.api.date import DateAssert
from affirm.api.path import PathAssert, PathInput
from affirm.conditions.dates import DateInput
from affirm.conditions.files import FileConditions
from affirm.info import AssertionInfo
from affirm.reporter import FailureReporter


def assert_that(
    actual: Any,
    info: AssertionInfo | None = None,
    *,
    reporter: FailureReporter | None = None,
) -> AbstractAssert:
    """Return the assertion wrapper for the type of *actual*.

    ``None``, booleans and arbitrary objects get an ``ObjectAssert``; use
    ``assert_that_path`` or ``assert_that_date`` for strings that are paths
    or dates, or to start a typed chain from ``None``.
    """
    if isinstance(actual, bool) or actual is None:
        return ObjectAssert(actual, info, reporter=reporter)
    if isinstance(actual, date):
        return DateAssert(actual, info, reporter=reporter)
    if isinstance(actual, os.PathLike):
        return PathAssert(actual, info, reporter=reporter)
    if isinstance(actual, (Real, Decimal, str, bytes)):
        return ComparableAssert(actual, info, reporter=reporter)
    return ObjectAssert(actual, info, reporter=reporter)


def assert_that_path(
    actual: PathInput | None,
    info: AssertionInfo | None = None,
    *,
    reporter: FailureReporter | None = None,
    files: FileConditions | None = None,
) -> PathAssert:
    return PathAssert(actual, info, reporter=reporter, files=files)


def assert_that_date(
    actual: DateInput | None,
    info: AssertionInfo | None = None,
    *,
    reporter: FailureReporter | None = None,
) -> DateAssert:
    return DateAssert(actual, info, reporter=reporter)


def assert_that_comparable(
    actual: Any,
    info: AssertionInfo | None = None,
    *,
    reporter: FailureReporter | None = None,
) -> ComparableAssert:
    return ComparableAssert(actual, info, reporter=reporter)

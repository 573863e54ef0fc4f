"""Soft assertions: collect every failure, report them together."""

from __future__ import annotations

from typing import Any

from affirm.api.abstract import AbstractAssert
from affirm.api.comparable import ComparableAssert
from affirm.api.date import DateAssert
from affirm.api.entry import (
    assert_that,
    assert_that_comparable,
    assert_that_date,
    assert_that_path,
)
from affirm.api.path import PathAssert
from affirm.conditions.files import FileConditions
from affirm.evaluation import Fail
from affirm.exceptions import SoftAssertionError
from affirm.info import AssertionInfo
from affirm.reporter import Failures, FailureReporter


class CollectingReporter(FailureReporter):
    """Records failures instead of raising them, so the chain goes on."""

    def __init__(self, failures: Failures | None = None) -> None:
        super().__init__(failures)
        self.errors: list[AssertionError] = []

    def report(self, info: AssertionInfo, fail: Fail) -> None:  # type: ignore[override]
        try:
            super().report(info, fail)
        except AssertionError as error:
            self.errors.append(error)


class SoftAssertions:
    """Collects assertion failures across many checks.

    Usage::

        with SoftAssertions() as softly:
            softly.assert_that_path("a.txt").exists()
            softly.assert_that(3).is_between(1, 2)

    Leaving the block without an exception raises ``SoftAssertionError`` when
    anything failed. Argument and I/O errors are not collected.
    """

    def __init__(self, failures: Failures | None = None) -> None:
        self._reporter = CollectingReporter(failures)

    def assert_that(self, actual: Any, info: AssertionInfo | None = None) -> AbstractAssert:
        return assert_that(actual, info, reporter=self._reporter)

    def assert_that_path(
        self,
        actual: Any,
        info: AssertionInfo | None = None,
        *,
        files: FileConditions | None = None,
    ) -> PathAssert:
        return assert_that_path(actual, info, reporter=self._reporter, files=files)

    def assert_that_date(self, actual: Any, info: AssertionInfo | None = None) -> DateAssert:
        return assert_that_date(actual, info, reporter=self._reporter)

    def assert_that_comparable(
        self, actual: Any, info: AssertionInfo | None = None
    ) -> ComparableAssert:
        return assert_that_comparable(actual, info, reporter=self._reporter)

    def errors_collected(self) -> list[AssertionError]:
        return list(self._reporter.errors)

    def was_success(self) -> bool:
        return not self._reporter.errors

    def assert_all(self) -> None:
        if self._reporter.errors:
            raise SoftAssertionError(self._reporter.errors)

    def __enter__(self) -> SoftAssertions:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.assert_all()
        return False

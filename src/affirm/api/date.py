"""Date assertions.

Bounds may be given as ``datetime``, ``date``, strings or epoch seconds; they
are converted to ``datetime`` before any comparison.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Sequence

from affirm.api.abstract import AbstractAssert
from affirm.conditions import dates, objects
from affirm.conditions.dates import DateInput
from affirm.config import get_settings
from affirm.info import AssertionInfo
from affirm.preconditions import DATE_NULL, END_PERIOD_NULL, START_PERIOD_NULL, check_not_none
from affirm.reporter import FailureReporter


class DateAssert(AbstractAssert):
    def __init__(
        self,
        actual: DateInput | None,
        info: AssertionInfo | None = None,
        *,
        reporter: FailureReporter | None = None,
        date_formats: Sequence[str] | None = None,
    ) -> None:
        self.date_formats = tuple(date_formats or get_settings().date_formats)
        if actual is not None and not isinstance(actual, datetime):
            actual = dates.to_datetime(actual, self.date_formats)
        super().__init__(actual, info, reporter=reporter)

    def _to_datetime(self, value: DateInput) -> datetime:
        return dates.to_datetime(value, self.date_formats, reference=self.actual)

    def with_date_format(self, date_format: str) -> DateAssert:
        """Try *date_format* first when parsing string dates in later checks."""
        clone = self._with_info(self.info)
        clone.date_formats = (date_format, *self.date_formats)
        return clone

    def with_default_date_formats(self) -> DateAssert:
        clone = self._with_info(self.info)
        clone.date_formats = tuple(get_settings().date_formats)
        return clone

    def is_between(
        self,
        start: DateInput,
        end: DateInput,
        inclusive_start: bool = True,
        inclusive_end: bool = False,
    ) -> DateAssert:
        """Verify actual is in the period ``[start, end[`` by default."""
        check_not_none(start, START_PERIOD_NULL)
        check_not_none(end, END_PERIOD_NULL)
        return self._check(
            dates.evaluate_is_in_period(
                self.actual,
                self._to_datetime(start),
                self._to_datetime(end),
                inclusive_start,
                inclusive_end,
            )
        )

    def is_strictly_between(self, start: DateInput, end: DateInput) -> DateAssert:
        return self.is_between(start, end, inclusive_start=False, inclusive_end=False)

    def is_before(self, other: DateInput) -> DateAssert:
        check_not_none(other, DATE_NULL)
        return self._check(dates.evaluate_is_before(self.actual, self._to_datetime(other)))

    def is_after(self, other: DateInput) -> DateAssert:
        check_not_none(other, DATE_NULL)
        return self._check(dates.evaluate_is_after(self.actual, self._to_datetime(other)))

    def is_equal_to(self, expected: Any) -> DateAssert:
        if isinstance(expected, (datetime, date, str, int, float)) and not isinstance(
            expected, bool
        ):
            expected = self._to_datetime(expected)
        return self._check(objects.evaluate_is_equal_to(self.actual, expected))

"""Assertions for values with a total order (numbers, strings, ...)."""

from __future__ import annotations

from typing import Any

from affirm.api.abstract import AbstractAssert, SelfAssert
from affirm.conditions import comparables
from affirm.evaluation import Between
from affirm.preconditions import END_RANGE_NULL, START_RANGE_NULL, VALUE_NULL, check_not_none


class ComparableAssert(AbstractAssert):
    def is_between(
        self: SelfAssert,
        start: Any,
        end: Any,
        inclusive_start: bool = True,
        inclusive_end: bool = True,
    ) -> SelfAssert:
        """Verify ``start <= actual <= end``, each side optionally exclusive."""
        check_not_none(start, START_RANGE_NULL)
        check_not_none(end, END_RANGE_NULL)
        if end < start:
            raise ValueError(
                f"The end value <{end}> must not be less than the start value <{start}>!"
            )
        between = Between(start, end, inclusive_start, inclusive_end)
        return self._check(comparables.evaluate_is_between(self.actual, between))

    def is_strictly_between(self: SelfAssert, start: Any, end: Any) -> SelfAssert:
        return self.is_between(start, end, inclusive_start=False, inclusive_end=False)

    def is_less_than(self: SelfAssert, other: Any) -> SelfAssert:
        check_not_none(other, VALUE_NULL)
        return self._check(comparables.evaluate_is_less_than(self.actual, other))

    def is_less_than_or_equal_to(self: SelfAssert, other: Any) -> SelfAssert:
        check_not_none(other, VALUE_NULL)
        return self._check(
            comparables.evaluate_is_less_than(self.actual, other, or_equal=True)
        )

    def is_greater_than(self: SelfAssert, other: Any) -> SelfAssert:
        check_not_none(other, VALUE_NULL)
        return self._check(comparables.evaluate_is_greater_than(self.actual, other))

    def is_greater_than_or_equal_to(self: SelfAssert, other: Any) -> SelfAssert:
        check_not_none(other, VALUE_NULL)
        return self._check(
            comparables.evaluate_is_greater_than(self.actual, other, or_equal=True)
        )

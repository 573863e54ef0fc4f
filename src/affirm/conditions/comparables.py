"""Ordering and interval checks over mutually comparable values."""

from __future__ import annotations

from typing import Any

from affirm.evaluation import PASS, Between, Fail, Reason, Result


def _in_interval(actual: Any, between: Between) -> bool:
    after_start = between.start < actual or (
        between.inclusive_start and actual == between.start
    )
    before_end = actual < between.end or (between.inclusive_end and actual == between.end)
    return after_start and before_end


def evaluate_is_between(actual: Any, between: Between) -> Result:
    """Check that *actual* lies in the interval described by *between*.

    With equal bounds and both sides inclusive the interval is the single
    point ``start`` and equality is required.
    """
    if actual is None:
        return Fail(Reason.ACTUAL_IS_NULL)
    if _in_interval(actual, between):
        return PASS
    reason = Reason.SHOULD_BE_IN_PERIOD if between.period else Reason.SHOULD_BE_BETWEEN
    return Fail(reason, actual, between)


def evaluate_is_less_than(actual: Any, other: Any, *, or_equal: bool = False) -> Result:
    if actual is None:
        return Fail(Reason.ACTUAL_IS_NULL)
    if or_equal:
        if actual <= other:
            return PASS
        return Fail(Reason.SHOULD_BE_LESS_OR_EQUAL, actual, other)
    if actual < other:
        return PASS
    return Fail(Reason.SHOULD_BE_LESS, actual, other)


def evaluate_is_greater_than(
    actual: Any, other: Any, *, or_equal: bool = False
) -> Result:
    if actual is None:
        return Fail(Reason.ACTUAL_IS_NULL)
    if or_equal:
        if actual >= other:
            return PASS
        return Fail(Reason.SHOULD_BE_GREATER_OR_EQUAL, actual, other)
    if actual > other:
        return PASS
    return Fail(Reason.SHOULD_BE_GREATER, actual, other)

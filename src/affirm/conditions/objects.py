"""Null, equality and type checks shared by every subject."""

from __future__ import annotations

from typing import Any

from affirm.evaluation import PASS, Fail, Reason, Result


def evaluate_not_none(actual: Any) -> Result:
    if actual is None:
        return Fail(Reason.ACTUAL_IS_NULL)
    return PASS


def evaluate_is_none(actual: Any) -> Result:
    if actual is not None:
        return Fail(Reason.SHOULD_BE_NULL, actual)
    return PASS


def evaluate_is_equal_to(actual: Any, expected: Any) -> Result:
    if actual != expected:
        return Fail(Reason.SHOULD_BE_EQUAL, actual, expected)
    return PASS


def evaluate_is_not_equal_to(actual: Any, other: Any) -> Result:
    if actual == other:
        return Fail(Reason.SHOULD_NOT_BE_EQUAL, actual, other)
    return PASS


def evaluate_is_instance_of(
    actual: Any, expected_type: type | tuple[type, ...]
) -> Result:
    if actual is None:
        return Fail(Reason.ACTUAL_IS_NULL)
    if not isinstance(actual, expected_type):
        return Fail(Reason.SHOULD_BE_INSTANCE, actual, expected_type)
    return PASS

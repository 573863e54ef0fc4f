"""Turns a failed evaluation into a raised ``AssertionError``."""

from __future__ import annotations

import logging
from typing import Callable, NoReturn

from affirm import errors
from affirm.errors import ErrorMessage
from affirm.evaluation import Fail, Reason
from affirm.exceptions import AssertionFailedError
from affirm.info import AssertionInfo


class Failures:
    """Reporting sink: builds the error for a message, the caller raises it."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def failure(self, info: AssertionInfo, message: ErrorMessage) -> AssertionError:
        text = message.create(info)
        self.logger.debug(f"Assertion failed: {text}")
        if message.has_values:
            return AssertionFailedError(text, message.actual, message.expected)
        return AssertionFailedError(text)


def _between(fail: Fail) -> ErrorMessage:
    b = fail.condition
    factory = (
        errors.should_be_in_period
        if fail.reason is Reason.SHOULD_BE_IN_PERIOD
        else errors.should_be_between
    )
    return factory(fail.actual, b.start, b.end, b.inclusive_start, b.inclusive_end)


_MESSAGES: dict[Reason, Callable[[Fail], ErrorMessage]] = {
    Reason.ACTUAL_IS_NULL: lambda f: errors.actual_is_null(),
    Reason.SHOULD_BE_NULL: lambda f: errors.should_be_null(f.actual),
    Reason.SHOULD_BE_EQUAL: lambda f: errors.should_be_equal(f.actual, f.condition),
    Reason.SHOULD_NOT_BE_EQUAL: lambda f: errors.should_not_be_equal(f.actual, f.condition),
    Reason.SHOULD_BE_INSTANCE: lambda f: errors.should_be_instance(f.actual, f.condition),
    Reason.SHOULD_EXIST: lambda f: errors.should_exist(f.actual),
    Reason.SHOULD_NOT_EXIST: lambda f: errors.should_not_exist(f.actual),
    Reason.SHOULD_BE_FILE: lambda f: errors.should_be_file(f.actual),
    Reason.SHOULD_BE_DIRECTORY: lambda f: errors.should_be_directory(f.actual),
    Reason.SHOULD_BE_READABLE: lambda f: errors.should_be_readable(f.actual),
    Reason.SHOULD_HAVE_DIGEST: lambda f: errors.should_have_digest(f.actual, f.diagnostic),
    Reason.SHOULD_HAVE_BINARY_CONTENT: lambda f: errors.should_have_binary_content(
        f.actual, f.condition, f.diagnostic
    ),
    Reason.SHOULD_HAVE_CONTENT: lambda f: errors.should_have_content(
        f.actual, f.condition, f.diagnostic
    ),
    Reason.SHOULD_BE_RELATIVE_PATH: lambda f: errors.should_be_relative_path(f.actual),
    Reason.SHOULD_BE_ABSOLUTE_PATH: lambda f: errors.should_be_absolute_path(f.actual),
    Reason.SHOULD_BE_BETWEEN: _between,
    Reason.SHOULD_BE_IN_PERIOD: _between,
    Reason.SHOULD_BE_LESS: lambda f: errors.should_be_less(f.actual, f.condition),
    Reason.SHOULD_BE_LESS_OR_EQUAL: lambda f: errors.should_be_less_or_equal(
        f.actual, f.condition
    ),
    Reason.SHOULD_BE_GREATER: lambda f: errors.should_be_greater(f.actual, f.condition),
    Reason.SHOULD_BE_GREATER_OR_EQUAL: lambda f: errors.should_be_greater_or_equal(
        f.actual, f.condition
    ),
    Reason.SHOULD_BE_BEFORE: lambda f: errors.should_be_before(f.actual, f.condition),
    Reason.SHOULD_BE_AFTER: lambda f: errors.should_be_after(f.actual, f.condition),
}


def message_for(fail: Fail) -> ErrorMessage:
    """Return the message describing *fail*."""
    return _MESSAGES[fail.reason](fail)


class FailureReporter:
    """Raises the sink's error for every failure it is given."""

    def __init__(self, failures: Failures | None = None) -> None:
        self.failures = failures or Failures()

    def report(self, info: AssertionInfo, fail: Fail) -> NoReturn:
        raise self.failures.failure(info, message_for(fail))

"""Results produced by condition evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Reason(str, Enum):
    ACTUAL_IS_NULL = "actual_is_null"
    SHOULD_BE_NULL = "should_be_null"
    SHOULD_BE_EQUAL = "should_be_equal"
    SHOULD_NOT_BE_EQUAL = "should_not_be_equal"
    SHOULD_BE_INSTANCE = "should_be_instance"
    SHOULD_EXIST = "should_exist"
    SHOULD_NOT_EXIST = "should_not_exist"
    SHOULD_BE_FILE = "should_be_file"
    SHOULD_BE_DIRECTORY = "should_be_directory"
    SHOULD_BE_READABLE = "should_be_readable"
    SHOULD_HAVE_DIGEST = "should_have_digest"
    SHOULD_HAVE_BINARY_CONTENT = "should_have_binary_content"
    SHOULD_HAVE_CONTENT = "should_have_content"
    SHOULD_BE_RELATIVE_PATH = "should_be_relative_path"
    SHOULD_BE_ABSOLUTE_PATH = "should_be_absolute_path"
    SHOULD_BE_BETWEEN = "should_be_between"
    SHOULD_BE_IN_PERIOD = "should_be_in_period"
    SHOULD_BE_LESS = "should_be_less"
    SHOULD_BE_LESS_OR_EQUAL = "should_be_less_or_equal"
    SHOULD_BE_GREATER = "should_be_greater"
    SHOULD_BE_GREATER_OR_EQUAL = "should_be_greater_or_equal"
    SHOULD_BE_BEFORE = "should_be_before"
    SHOULD_BE_AFTER = "should_be_after"


@dataclass(frozen=True)
class Between:
    """Interval condition; ``period`` marks a date interval."""

    start: Any
    end: Any
    inclusive_start: bool = True
    inclusive_end: bool = True
    period: bool = False


@dataclass(frozen=True)
class Pass:
    pass


@dataclass(frozen=True)
class Fail:
    """Why a condition did not hold.

    Attributes:
        reason: Discrete failure classification, selects the message template.
        actual: The value that was checked.
        condition: What was expected (a value, a ``Between``, a type...).
        diagnostic: Extra computed detail, e.g. a ``DigestDiff``.
    """

    reason: Reason
    actual: Any = None
    condition: Any = None
    diagnostic: Any = None


Result = Union[Pass, Fail]

PASS = Pass()

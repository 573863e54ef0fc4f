"""Failure message factories."""

from affirm.errors.messages import (
    ErrorMessage,
    actual_is_null,
    should_be_absolute_path,
    should_be_after,
    should_be_before,
    should_be_between,
    should_be_directory,
    should_be_equal,
    should_be_file,
    should_be_greater,
    should_be_greater_or_equal,
    should_be_in_period,
    should_be_instance,
    should_be_less,
    should_be_less_or_equal,
    should_be_null,
    should_be_readable,
    should_be_relative_path,
    should_exist,
    should_have_binary_content,
    should_have_content,
    should_have_digest,
    should_not_be_equal,
    should_not_exist,
)

__all__ = [
    "ErrorMessage",
    "actual_is_null",
    "should_be_absolute_path",
    "should_be_after",
    "should_be_before",
    "should_be_between",
    "should_be_directory",
    "should_be_equal",
    "should_be_file",
    "should_be_greater",
    "should_be_greater_or_equal",
    "should_be_in_period",
    "should_be_instance",
    "should_be_less",
    "should_be_less_or_equal",
    "should_be_null",
    "should_be_readable",
    "should_be_relative_path",
    "should_exist",
    "should_have_binary_content",
    "should_have_content",
    "should_have_digest",
    "should_not_be_equal",
    "should_not_exist",
]

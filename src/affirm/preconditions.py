"""Eager argument checks run before any evaluation."""

from __future__ import annotations

from typing import Any

DIGEST_NULL = "The message digest algorithm should not be null"
EXPECTED_DIGEST_NULL = "The binary representation of digest to compare to should not be null"
BINARY_CONTENT_NULL = "The binary content to compare to should not be null"
TEXT_CONTENT_NULL = "The text to compare to should not be null"
START_RANGE_NULL = "The start range to compare actual with should not be null"
END_RANGE_NULL = "The end range to compare actual with should not be null"
START_PERIOD_NULL = "The start date of period to compare actual with should not be null"
END_PERIOD_NULL = "The end date of period to compare actual with should not be null"
DATE_NULL = "The date to compare actual with should not be null"
VALUE_NULL = "The value to compare actual with should not be null"


def check_not_none(value: Any, message: str) -> Any:
    """Return *value*, raising ValueError with *message* when it is None."""
    if value is None:
        raise ValueError(message)
    return value

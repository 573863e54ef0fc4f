"""Date checks; every accepted date representation becomes a ``datetime``."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Sequence, Union

from affirm.conditions.comparables import evaluate_is_between
from affirm.evaluation import PASS, Between, Fail, Reason, Result

DateInput = Union[datetime, date, str, int, float]


def parse_date(value: str, formats: Sequence[str]) -> datetime:
    """Parse *value* with the first matching ``strptime`` format."""
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise ValueError(
        f"Failed to parse {value} with any of these date formats:\n   {list(formats)}"
    )


def _align(moment: datetime, reference: datetime | None) -> datetime:
    # naive values are local time
    if reference is None:
        return moment
    if reference.tzinfo is not None and moment.tzinfo is None:
        return moment.astimezone()
    if reference.tzinfo is None and moment.tzinfo is not None:
        return moment.astimezone().replace(tzinfo=None)
    return moment


def to_datetime(
    value: DateInput,
    formats: Sequence[str],
    reference: datetime | None = None,
) -> datetime:
    """Normalize a date representation to a ``datetime``.

    Accepts ``datetime``, ``date`` (at midnight), strings parsed with
    *formats* and epoch seconds. The result is made naive or aware to match
    *reference* so that both can be compared.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    elif isinstance(value, str):
        moment = parse_date(value, formats)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        moment = datetime.fromtimestamp(value, tz=timezone.utc)
    else:
        raise TypeError(f"Unsupported date representation: {value!r}")
    return _align(moment, reference)


def evaluate_is_in_period(
    actual: datetime | None,
    start: datetime,
    end: datetime,
    inclusive_start: bool,
    inclusive_end: bool,
) -> Result:
    between = Between(start, end, inclusive_start, inclusive_end, period=True)
    return evaluate_is_between(actual, between)


def evaluate_is_before(actual: datetime | None, other: datetime) -> Result:
    if actual is None:
        return Fail(Reason.ACTUAL_IS_NULL)
    if actual < other:
        return PASS
    return Fail(Reason.SHOULD_BE_BEFORE, actual, other)


def evaluate_is_after(actual: datetime | None, other: datetime) -> Result:
    if actual is None:
        return Fail(Reason.ACTUAL_IS_NULL)
    if actual > other:
        return PASS
    return Fail(Reason.SHOULD_BE_AFTER, actual, other)

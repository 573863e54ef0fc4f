"""Message templates, one per failure reason.

Templates use ``str.format`` positional fields; every argument is rendered
with the chain's representation before substitution.
"""

from __future__ import annotations

from typing import Any

from affirm.digests import DigestDiff
from affirm.info import AssertionInfo


_UNSET = object()


def _literal(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


class ErrorMessage:
    """A message template and the values it is rendered with.

    Two messages are equal when their templates and arguments are, which lets
    tests verify the reporting sink was called with an expected message.
    """

    def __init__(
        self, template: str, *args: Any, actual: Any = _UNSET, expected: Any = _UNSET
    ) -> None:
        self.template = template
        self.args = args
        self.actual = actual
        self.expected = expected

    @property
    def has_values(self) -> bool:
        return self.actual is not _UNSET and self.expected is not _UNSET

    def create(self, info: AssertionInfo | None = None) -> str:
        info = info or AssertionInfo()
        if info.overriding_error_message is not None:
            return info.overriding_error_message
        rendered = [info.representation.to_string(arg) for arg in self.args]
        return info.description_prefix() + self.template.format(*rendered)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorMessage):
            return NotImplemented
        return (self.template, self.args) == (other.template, other.args)

    def __hash__(self) -> int:
        return hash(self.template)

    def __repr__(self) -> str:
        return f"ErrorMessage({self.template!r}, args={self.args!r})"

    def __str__(self) -> str:
        return self.create()


def actual_is_null() -> ErrorMessage:
    return ErrorMessage("Expecting actual not to be null")


def should_be_null(actual: Any) -> ErrorMessage:
    return ErrorMessage("\nExpecting actual:\n  {0}\nto be null", actual)


def should_be_equal(actual: Any, expected: Any) -> ErrorMessage:
    return ErrorMessage(
        "\nexpected: {0}\n but was: {1}",
        expected,
        actual,
        actual=actual,
        expected=expected,
    )


def should_not_be_equal(actual: Any, other: Any) -> ErrorMessage:
    return ErrorMessage("\nExpecting actual:\n  {0}\nnot to be equal to:\n  {1}", actual, other)


def _type_names(expected_type: type | tuple[type, ...]) -> str:
    if isinstance(expected_type, tuple):
        return " | ".join(t.__name__ for t in expected_type)
    return expected_type.__name__


def should_be_instance(actual: Any, expected_type: type | tuple[type, ...]) -> ErrorMessage:
    return ErrorMessage(
        "\nExpecting actual:\n  {0}\nto be an instance of:\n  {1}\nbut was instance of:\n  {2}",
        actual,
        _type_names(expected_type),
        type(actual).__name__,
    )


def should_exist(actual: Any) -> ErrorMessage:
    return ErrorMessage("\nExpecting file:\n  {0}\nto exist.", actual)


def should_not_exist(actual: Any) -> ErrorMessage:
    return ErrorMessage("\nExpecting file:\n  {0}\nnot to exist.", actual)


def should_be_file(actual: Any) -> ErrorMessage:
    return ErrorMessage("\nExpecting path:\n  {0}\nto be a regular file.", actual)


def should_be_directory(actual: Any) -> ErrorMessage:
    return ErrorMessage("\nExpecting path:\n  {0}\nto be a directory.", actual)


def should_be_readable(actual: Any) -> ErrorMessage:
    return ErrorMessage("\nExpecting actual:\n  {0}\nto be readable.", actual)


def should_be_relative_path(actual: Any) -> ErrorMessage:
    return ErrorMessage("\nExpecting actual:\n  {0}\nto be a relative path.", actual)


def should_be_absolute_path(actual: Any) -> ErrorMessage:
    return ErrorMessage("\nExpecting actual:\n  {0}\nto be an absolute path.", actual)


def should_have_digest(actual: Any, diff: DigestDiff) -> ErrorMessage:
    template = (
        "\nExpecting file:\n  {0}\n"
        + _literal(diff.algorithm)
        + " digest to be:\n  {1}\nbut was:\n  {2}"
    )
    return ErrorMessage(
        template, actual, diff.expected, diff.actual, actual=diff.actual, expected=diff.expected
    )


def should_have_binary_content(actual: Any, expected: bytes, content: bytes) -> ErrorMessage:
    return ErrorMessage(
        "\nExpecting file:\n  {0}\nto have binary content:\n  {1}\nbut was:\n  {2}",
        actual,
        expected,
        content,
        actual=content,
        expected=expected,
    )


def should_have_content(actual: Any, expected: str, content: str) -> ErrorMessage:
    return ErrorMessage(
        "\nExpecting file:\n  {0}\nto have content:\n  {1}\nbut was:\n  {2}",
        actual,
        expected,
        content,
        actual=content,
        expected=expected,
    )


def _interval(
    noun: str, actual: Any, start: Any, end: Any, inclusive_start: bool, inclusive_end: bool
) -> ErrorMessage:
    opening = "[" if inclusive_start else "]"
    closing = "]" if inclusive_end else "["
    template = f"\nExpecting actual:\n  {{0}}\nto be {noun}:\n  {opening}{{1}}, {{2}}{closing}"
    return ErrorMessage(template, actual, start, end)


def should_be_between(
    actual: Any, start: Any, end: Any, inclusive_start: bool, inclusive_end: bool
) -> ErrorMessage:
    return _interval("between", actual, start, end, inclusive_start, inclusive_end)


def should_be_in_period(
    actual: Any, start: Any, end: Any, inclusive_start: bool, inclusive_end: bool
) -> ErrorMessage:
    return _interval("in period", actual, start, end, inclusive_start, inclusive_end)


def _ordering(relation: str, actual: Any, other: Any) -> ErrorMessage:
    return ErrorMessage(f"\nExpecting actual:\n  {{0}}\nto be {relation}:\n  {{1}}", actual, other)


def should_be_less(actual: Any, other: Any) -> ErrorMessage:
    return _ordering("less than", actual, other)


def should_be_less_or_equal(actual: Any, other: Any) -> ErrorMessage:
    return _ordering("less than or equal to", actual, other)


def should_be_greater(actual: Any, other: Any) -> ErrorMessage:
    return _ordering("greater than", actual, other)


def should_be_greater_or_equal(actual: Any, other: Any) -> ErrorMessage:
    return _ordering("greater than or equal to", actual, other)


def should_be_before(actual: Any, other: Any) -> ErrorMessage:
    return _ordering("strictly before", actual, other)


def should_be_after(actual: Any, other: Any) -> ErrorMessage:
    return _ordering("strictly after", actual, other)

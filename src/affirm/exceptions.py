"""Errors raised by collaborators, as opposed to assertion failures."""

from __future__ import annotations

from typing import Any


class IllegalStateError(RuntimeError):
    """A collaborator could not provide a required capability."""


class UncheckedIOError(RuntimeError):
    """An I/O error raised while reading the actual value's content.

    Also raised when the content cannot be decoded as text. Always raised
    ``from`` the original ``OSError`` or ``UnicodeDecodeError`` so
    ``__cause__`` holds it.
    """


class AssertionFailedError(AssertionError):
    """Assertion failure that remembers the compared values when known."""

    def __init__(
        self, message: str, actual: Any = None, expected: Any = None
    ) -> None:
        super().__init__(message)
        self.actual = actual
        self.expected = expected


class SoftAssertionError(AssertionError):
    """Raised by soft assertions when one or more failures were collected."""

    def __init__(self, errors: list[AssertionError]) -> None:
        self.errors = list(errors)
        count = len(self.errors)
        noun = "failure" if count == 1 else "failures"
        lines = [f"\nMultiple Failures ({count} {noun})"]
        for index, error in enumerate(self.errors, start=1):
            lines.append(f"-- failure {index} --{error}")
        super().__init__("\n".join(lines))

"""Base subject wrapper shared by every fluent assertion class."""

from __future__ import annotations

import copy
from typing import Any, TypeVar

from affirm.conditions import objects
from affirm.evaluation import Fail, Result
from affirm.info import AssertionInfo
from affirm.reporter import FailureReporter
from affirm.representation import Representation

SelfAssert = TypeVar("SelfAssert", bound="AbstractAssert")


class AbstractAssert:
    """Holds the actual value and its assertion context.

    Checks return ``self`` on success so they can be chained; a failed check
    is handed to the reporter, which raises. Methods that change the context
    return a copy of the wrapper with a new ``AssertionInfo``.
    """

    def __init__(
        self,
        actual: Any,
        info: AssertionInfo | None = None,
        *,
        reporter: FailureReporter | None = None,
    ) -> None:
        self.actual = actual
        self.info = info or AssertionInfo()
        self.reporter = reporter or FailureReporter()

    def _check(self: SelfAssert, result: Result) -> SelfAssert:
        if isinstance(result, Fail):
            self.reporter.report(self.info, result)
        return self

    def _with_info(self: SelfAssert, info: AssertionInfo) -> SelfAssert:
        clone = copy.copy(self)
        clone.info = info
        return clone

    def described_as(self: SelfAssert, description: str) -> SelfAssert:
        return self._with_info(self.info.with_description(description))

    as_ = described_as

    def with_representation(self: SelfAssert, representation: Representation) -> SelfAssert:
        return self._with_info(self.info.with_representation(representation))

    def overriding_error_message(self: SelfAssert, message: str) -> SelfAssert:
        return self._with_info(self.info.with_overriding_error_message(message))

    def is_none(self: SelfAssert) -> SelfAssert:
        return self._check(objects.evaluate_is_none(self.actual))

    def is_not_none(self: SelfAssert) -> SelfAssert:
        return self._check(objects.evaluate_not_none(self.actual))

    def is_equal_to(self: SelfAssert, expected: Any) -> SelfAssert:
        return self._check(objects.evaluate_is_equal_to(self.actual, expected))

    def is_not_equal_to(self: SelfAssert, other: Any) -> SelfAssert:
        return self._check(objects.evaluate_is_not_equal_to(self.actual, other))

    def is_instance_of(
        self: SelfAssert, expected_type: type | tuple[type, ...]
    ) -> SelfAssert:
        if expected_type is None:
            raise ValueError("The given type should not be null")
        return self._check(objects.evaluate_is_instance_of(self.actual, expected_type))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.actual!r})"


class ObjectAssert(AbstractAssert):
    pass

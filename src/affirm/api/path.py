"""Path assertions: existence, kind, readability, path kind and content."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from affirm.api.abstract import AbstractAssert
from affirm.conditions.files import FileConditions
from affirm.config import get_settings
from affirm.digests import HashObject, to_hex
from affirm.info import AssertionInfo
from affirm.preconditions import (
    BINARY_CONTENT_NULL,
    DIGEST_NULL,
    EXPECTED_DIGEST_NULL,
    TEXT_CONTENT_NULL,
    check_not_none,
)
from affirm.reporter import FailureReporter

PathInput = Union[str, os.PathLike]


class PathAssert(AbstractAssert):
    def __init__(
        self,
        actual: PathInput | None,
        info: AssertionInfo | None = None,
        *,
        reporter: FailureReporter | None = None,
        files: FileConditions | None = None,
    ) -> None:
        if actual is not None and not isinstance(actual, Path):
            actual = Path(actual)
        super().__init__(actual, info, reporter=reporter)
        self.files = files or FileConditions(chunk_size=get_settings().digest_chunk_size)

    def exists(self) -> PathAssert:
        return self._check(self.files.evaluate_exists(self.actual))

    def does_not_exist(self) -> PathAssert:
        return self._check(self.files.evaluate_does_not_exist(self.actual))

    def is_file(self) -> PathAssert:
        return self._check(self.files.evaluate_is_file(self.actual))

    def is_directory(self) -> PathAssert:
        return self._check(self.files.evaluate_is_directory(self.actual))

    def is_readable(self) -> PathAssert:
        return self._check(self.files.evaluate_is_readable(self.actual))

    def is_relative(self) -> PathAssert:
        return self._check(self.files.evaluate_is_relative(self.actual))

    def is_absolute(self) -> PathAssert:
        return self._check(self.files.evaluate_is_absolute(self.actual))

    def has_digest(
        self, algorithm: str | HashObject, expected: str | bytes
    ) -> PathAssert:
        """Verify the file's digest.

        Args:
            algorithm: Algorithm name (``"MD5"``, ``"SHA-256"``...) or a
                hashlib hash object, which is copied and left untouched.
            expected: Uppercase hex string, compared case-sensitively, or the
                raw digest bytes.

        Raises:
            ValueError: If ``algorithm`` or ``expected`` is None.
            IllegalStateError: If the algorithm name is not supported.
            UncheckedIOError: If reading the file fails.
        """
        check_not_none(algorithm, DIGEST_NULL)
        check_not_none(expected, EXPECTED_DIGEST_NULL)
        if isinstance(algorithm, str):
            digest = self.files.resolve_digest(algorithm)
            name = algorithm
        else:
            digest = algorithm
            name = digest.name.upper()
        if isinstance(expected, (bytes, bytearray)):
            expected = to_hex(expected)
        return self._check(self.files.evaluate_has_digest(self.actual, digest, expected, name))

    def has_binary_content(self, expected: bytes) -> PathAssert:
        check_not_none(expected, BINARY_CONTENT_NULL)
        return self._check(self.files.evaluate_has_binary_content(self.actual, bytes(expected)))

    def has_content(self, expected: str, encoding: str = "utf-8") -> PathAssert:
        check_not_none(expected, TEXT_CONTENT_NULL)
        return self._check(self.files.evaluate_has_content(self.actual, expected, encoding))

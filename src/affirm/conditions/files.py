"""File and path checks.

Existence, kind and readability are checked in that order and evaluation
stops at the first one that fails.
"""

from __future__ import annotations

import logging
from pathlib import Path

from affirm.digests import DEFAULT_HASHING, DigestDiff, HashObject, Hashing, to_hex
from affirm.evaluation import PASS, Fail, Reason, Result
from affirm.exceptions import IllegalStateError, UncheckedIOError
from affirm.filesystem import LOCAL_FILESYSTEM, FileSystem


class FileConditions:
    """Evaluates path conditions against injected filesystem and hashing."""

    def __init__(
        self,
        filesystem: FileSystem | None = None,
        hashing: Hashing | None = None,
        chunk_size: int = 8192,
        logger: logging.Logger | None = None,
    ) -> None:
        self.filesystem = filesystem or LOCAL_FILESYSTEM
        self.hashing = hashing or DEFAULT_HASHING
        self.chunk_size = chunk_size
        self.logger = logger or logging.getLogger(__name__)

    def resolve_digest(self, algorithm: str) -> HashObject:
        """Return a hash object for *algorithm*.

        Raises IllegalStateError when the hashing collaborator does not know
        the algorithm.
        """
        try:
            return self.hashing.new(algorithm)
        except ValueError as e:
            raise IllegalStateError(
                f"Unable to find digest implementation for: <{algorithm}>"
            ) from e

    def evaluate_exists(self, actual: Path | None) -> Result:
        if actual is None:
            return Fail(Reason.ACTUAL_IS_NULL)
        if not self.filesystem.exists(actual):
            return Fail(Reason.SHOULD_EXIST, actual)
        return PASS

    def evaluate_does_not_exist(self, actual: Path | None) -> Result:
        if actual is None:
            return Fail(Reason.ACTUAL_IS_NULL)
        if self.filesystem.exists(actual):
            return Fail(Reason.SHOULD_NOT_EXIST, actual)
        return PASS

    def evaluate_is_file(self, actual: Path | None) -> Result:
        result = self.evaluate_exists(actual)
        if isinstance(result, Fail):
            return result
        if not self.filesystem.is_file(actual):
            return Fail(Reason.SHOULD_BE_FILE, actual)
        return PASS

    def evaluate_is_directory(self, actual: Path | None) -> Result:
        result = self.evaluate_exists(actual)
        if isinstance(result, Fail):
            return result
        if not self.filesystem.is_directory(actual):
            return Fail(Reason.SHOULD_BE_DIRECTORY, actual)
        return PASS

    def evaluate_is_readable(self, actual: Path | None) -> Result:
        result = self.evaluate_exists(actual)
        if isinstance(result, Fail):
            return result
        if not self.filesystem.is_readable(actual):
            return Fail(Reason.SHOULD_BE_READABLE, actual)
        return PASS

    def evaluate_is_readable_file(self, actual: Path | None) -> Result:
        result = self.evaluate_is_file(actual)
        if isinstance(result, Fail):
            return result
        if not self.filesystem.is_readable(actual):
            return Fail(Reason.SHOULD_BE_READABLE, actual)
        return PASS

    def evaluate_is_relative(self, actual: Path | None) -> Result:
        if actual is None:
            return Fail(Reason.ACTUAL_IS_NULL)
        if actual.is_absolute():
            return Fail(Reason.SHOULD_BE_RELATIVE_PATH, actual)
        return PASS

    def evaluate_is_absolute(self, actual: Path | None) -> Result:
        if actual is None:
            return Fail(Reason.ACTUAL_IS_NULL)
        if not actual.is_absolute():
            return Fail(Reason.SHOULD_BE_ABSOLUTE_PATH, actual)
        return PASS

    def evaluate_has_digest(
        self,
        actual: Path | None,
        digest: HashObject,
        expected: str,
        algorithm: str,
    ) -> Result:
        """Compare the uppercase hex digest of *actual* with *expected*.

        *digest* is copied before use so the caller's object keeps its state.
        """
        result = self.evaluate_is_readable_file(actual)
        if isinstance(result, Fail):
            return result
        digest = digest.copy()
        try:
            with self.filesystem.open_binary(actual) as stream:
                for chunk in iter(lambda: stream.read(self.chunk_size), b""):
                    digest.update(chunk)
        except OSError as e:
            raise UncheckedIOError(f"Unable to compute digest of {actual}") from e
        computed = to_hex(digest.digest())
        self.logger.debug(f"{algorithm} digest of {actual}: {computed}")
        diff = DigestDiff(computed, expected, algorithm)
        if diff.digests_differ:
            return Fail(Reason.SHOULD_HAVE_DIGEST, actual, expected, diff)
        return PASS

    def _read_bytes(self, actual: Path) -> bytes:
        try:
            with self.filesystem.open_binary(actual) as stream:
                return stream.read()
        except OSError as e:
            raise UncheckedIOError(f"Unable to read content of {actual}") from e

    def evaluate_has_binary_content(self, actual: Path | None, expected: bytes) -> Result:
        result = self.evaluate_is_readable_file(actual)
        if isinstance(result, Fail):
            return result
        content = self._read_bytes(actual)
        if content != expected:
            return Fail(Reason.SHOULD_HAVE_BINARY_CONTENT, actual, expected, content)
        return PASS

    def evaluate_has_content(
        self, actual: Path | None, expected: str, encoding: str = "utf-8"
    ) -> Result:
        result = self.evaluate_is_readable_file(actual)
        if isinstance(result, Fail):
            return result
        try:
            content = self._read_bytes(actual).decode(encoding)
        except UnicodeDecodeError as e:
            raise UncheckedIOError(f"Unable to decode content of {actual} as {encoding}") from e
        if content != expected:
            return Fail(Reason.SHOULD_HAVE_CONTENT, actual, expected, content)
        return PASS

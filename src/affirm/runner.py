from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Callable

from affirm.api import SoftAssertions
from affirm.conditions.files import FileConditions
from affirm.config import FileCheck, Manifest
from affirm.exceptions import IllegalStateError, UncheckedIOError
from affirm.info import AssertionInfo


@dataclass
class CheckResult:
    """Outcome of one manifest check.

    Attributes:
        name: The check's name, or its path when unnamed.
        passed: Whether every condition of the check held.
        message: Failure messages joined with blank lines; empty on success.
        error: True when the check could not be evaluated (unknown digest
            algorithm, unreadable content) rather than failing.
    """

    name: str
    passed: bool
    message: str = ""
    error: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class ManifestRunner:
    """Runs the checks of a manifest, collecting failures per check."""

    def __init__(
        self,
        manifest: Manifest,
        base_dir: Path | None = None,
        files: FileConditions | None = None,
        logger: logging.Logger | None = None,
    ):
        self.manifest = manifest
        self.base_dir = Path(base_dir or manifest.base_dir or Path.cwd())
        self.files = files
        self.logger = logger or logging.getLogger(__name__)

    def execute(self) -> list[CheckResult]:
        results = [self.run_check(check) for check in self.manifest.checks]
        passed = sum(r.passed for r in results)
        self.logger.info(f"{passed}/{len(results)} check(s) passed")
        return results

    def run_check(self, check: FileCheck) -> CheckResult:
        self.logger.info(f"Checking {check.label}")
        softly = SoftAssertions()
        try:
            for condition in self._conditions(softly, check):
                condition()
                # file conditions build on each other, stop at the first failure
                if not softly.was_success():
                    break
        except (IllegalStateError, UncheckedIOError) as e:
            self.logger.warning(f"{check.label} could not be evaluated: {e}")
            return CheckResult(name=check.label, passed=False, message=str(e), error=True)

        errors = softly.errors_collected()
        for error in errors:
            self.logger.info(f"{check.label} failed: {error}")
        return CheckResult(
            name=check.label,
            passed=not errors,
            message="\n\n".join(str(e).strip() for e in errors),
        )

    def _conditions(
        self, softly: SoftAssertions, check: FileCheck
    ) -> list[Callable[[], Any]]:
        info = AssertionInfo(description=check.label)
        # path kind is judged on the path as written, the rest on the resolved file
        written = softly.assert_that_path(check.path, info, files=self.files)
        resolved = softly.assert_that_path(
            self.base_dir / check.path, info, files=self.files
        )

        conditions: list[Callable[[], Any]] = []
        if check.relative:
            conditions.append(written.is_relative)
        if check.absolute:
            conditions.append(written.is_absolute)
        if check.exists is True:
            conditions.append(resolved.exists)
        elif check.exists is False:
            conditions.append(resolved.does_not_exist)
        if check.is_file:
            conditions.append(resolved.is_file)
        if check.is_directory:
            conditions.append(resolved.is_directory)
        if check.readable:
            conditions.append(resolved.is_readable)
        if check.digest is not None:
            digest = check.digest
            conditions.append(
                lambda: resolved.has_digest(digest.algorithm, digest.expected)
            )
        if check.content is not None:
            content = check.content
            conditions.append(lambda: resolved.has_content(content))
        return conditions

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from junitparser import Error, Failure, JUnitXml, TestCase, TestSuite

from affirm.runner import CheckResult


def write_junit(
    junit_path: Path,
    results: Iterable[CheckResult],
    suite_name: str = "affirm",
    properties: dict[str, str] | None = None,
) -> Path:
    """Write junit.xml with one test case per check result, return path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)

    for key, value in (properties or {}).items():
        suite.add_property(key, value)

    for result in results:
        case = TestCase(result.name)
        case.classname = suite_name
        if result.error:
            case.result = [Error(result.message)]
        elif not result.passed:
            case.result = [Failure(result.message)]
        suite.add_testcase(case)

    # Use append (not +=) to preserve properties
    xml.append(suite)

    junit_path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(junit_path), pretty=True)
    return junit_path


def read_junit_summary(junit_path: Path) -> dict[str, int]:
    """Return test, failure and error counts of a junit.xml file."""
    xml = JUnitXml.fromfile(str(junit_path))
    summary = {"tests": 0, "failures": 0, "errors": 0}
    for suite in xml:
        summary["tests"] += suite.tests
        summary["failures"] += suite.failures
        summary["errors"] += suite.errors
    return summary

"""Tests for running verification manifests."""

import logging
from pathlib import Path

from affirm.conditions.files import FileConditions
from affirm.config import DigestCheck, FileCheck, Manifest, load_manifest
from affirm.runner import CheckResult, ManifestRunner

EXAMPLES = Path(__file__).resolve().parents[1] / "examples"
CONTENT_MD5 = "F15C1CAE7882448B3FB0404682E17E61"


def _manifest(tmp_path: Path, *checks: FileCheck) -> Manifest:
    return Manifest(checks=list(checks), base_dir=str(tmp_path))


def test_example_manifest_passes():
    results = ManifestRunner(load_manifest(EXAMPLES / "release-manifest.yaml")).execute()
    assert [r.passed for r in results] == [True, True, True]
    assert all(r.message == "" for r in results)


def test_digest_mismatch_is_reported(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"Bad Content")
    check = FileCheck(path="a.txt", digest=DigestCheck(algorithm="MD5", expected=CONTENT_MD5))

    [result] = ManifestRunner(_manifest(tmp_path, check)).execute()

    assert result.passed is False
    assert result.error is False
    assert result.message.startswith("[a.txt]")
    assert "MD5 digest to be" in result.message
    assert CONTENT_MD5 in result.message
    assert "03B2351E916F4550A21FCACAF28F58B7" in result.message


def test_check_stops_at_first_failure(tmp_path):
    check = FileCheck(
        path="missing.txt",
        exists=True,
        is_file=True,
        readable=True,
        digest=DigestCheck(algorithm="MD5", expected=CONTENT_MD5),
    )
    [result] = ManifestRunner(_manifest(tmp_path, check)).execute()
    assert result.passed is False
    assert result.message.count("to exist.") == 1


def test_relative_flag_uses_path_as_written(tmp_path):
    (tmp_path / "a.txt").write_text("x")
    relative = FileCheck(path="a.txt", relative=True, exists=True)
    absolute = FileCheck(name="abs", path=str(tmp_path / "a.txt"), relative=True)

    results = ManifestRunner(_manifest(tmp_path, relative, absolute)).execute()

    assert results[0].passed is True
    assert results[1].passed is False
    assert "to be a relative path." in results[1].message


def test_does_not_exist_and_content(tmp_path):
    (tmp_path / "a.txt").write_text("hello")
    checks = [
        FileCheck(path="gone.txt", exists=False),
        FileCheck(path="a.txt", content="hello"),
        FileCheck(path="a.txt", content="bye"),
    ]
    results = ManifestRunner(_manifest(tmp_path, *checks)).execute()
    assert [r.passed for r in results] == [True, True, False]


def test_unknown_algorithm_is_an_error_not_a_failure(tmp_path):
    (tmp_path / "a.txt").write_text("x")
    check = FileCheck(path="a.txt", digest=DigestCheck(algorithm="Nope", expected="00"))
    [result] = ManifestRunner(_manifest(tmp_path, check)).execute()
    assert result.passed is False
    assert result.error is True
    assert "Unable to find digest implementation for: <Nope>" in result.message


def test_io_error_is_an_error(tmp_path, broken_stream_fs):
    (tmp_path / "a.txt").write_text("x")
    check = FileCheck(path="a.txt", digest=DigestCheck(algorithm="MD5", expected="00"))
    runner = ManifestRunner(
        _manifest(tmp_path, check), files=FileConditions(filesystem=broken_stream_fs(OSError()))
    )
    [result] = runner.execute()
    assert result.error is True


def test_runner_logs_progress(tmp_path, caplog):
    (tmp_path / "a.txt").write_text("x")
    logger = logging.getLogger("affirm_runner_test")
    with caplog.at_level(logging.INFO, logger="affirm_runner_test"):
        ManifestRunner(_manifest(tmp_path, FileCheck(path="a.txt", exists=True)), logger=logger).execute()
    assert "Checking a.txt" in caplog.text
    assert "1/1 check(s) passed" in caplog.text


def test_check_result_to_dict():
    assert CheckResult("x", False, "m").to_dict() == {
        "name": "x",
        "passed": False,
        "message": "m",
        "error": False,
    }


def test_undecodable_content_does_not_stop_other_checks(tmp_path):
    (tmp_path / "blob.bin").write_bytes(b"\xff\xfe\x00")
    checks = [
        FileCheck(name="text", path="blob.bin", content="hello"),
        FileCheck(name="present", path="blob.bin", exists=True),
    ]

    results = ManifestRunner(_manifest(tmp_path, *checks)).execute()

    assert [r.name for r in results] == ["text", "present"]
    assert results[0].passed is False
    assert results[0].error is True
    assert "Unable to decode content of" in results[0].message
    assert results[1].passed is True

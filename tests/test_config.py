"""Tests for settings and manifest loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from affirm.config import (
    DEFAULT_DATE_FORMATS,
    Settings,
    get_settings,
    load_manifest,
    load_settings,
)


def _example_manifests() -> list[Path]:
    repo_root = Path(__file__).resolve().parents[1]
    examples_dir = repo_root / "examples"
    return sorted(p for p in examples_dir.glob("*.yaml") if p.is_file())


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str, name: str = "manifest.yaml") -> Path:
        p = tmp_path / name
        p.write_text(textwrap.dedent(content))
        return p

    return _write


# --- settings ---


def test_default_settings():
    settings = Settings()
    assert settings.date_formats == DEFAULT_DATE_FORMATS
    assert settings.digest_chunk_size == 8192
    assert settings.default_digest_algorithm == "SHA-256"


def test_load_settings(tmp_yaml):
    path = tmp_yaml("""\
        digest_chunk_size: 16
        default_digest_algorithm: MD5
    """, name="affirm.yaml")
    settings = load_settings(path)
    assert settings.digest_chunk_size == 16
    assert settings.default_digest_algorithm == "MD5"
    assert settings.date_formats == DEFAULT_DATE_FORMATS


def test_empty_settings_file_gives_defaults(tmp_yaml):
    assert load_settings(tmp_yaml("", name="affirm.yaml")) == Settings()


@pytest.mark.parametrize(
    "content",
    ["digest_chunk_size: 0\n", "date_formats: []\n", "unknown_key: 1\n"],
)
def test_invalid_settings_rejected(tmp_yaml, content):
    with pytest.raises(ValidationError):
        load_settings(tmp_yaml(content, name="affirm.yaml"))


def test_get_settings_reads_env_var(tmp_yaml, monkeypatch):
    path = tmp_yaml("digest_chunk_size: 32\n", name="affirm.yaml")
    monkeypatch.setenv("AFFIRM_CONFIG", str(path))
    get_settings.cache_clear()
    assert get_settings().digest_chunk_size == 32


def test_get_settings_defaults_without_env_var():
    assert get_settings() == Settings()


# --- manifest ---


def test_load_minimal_manifest(tmp_yaml, tmp_path):
    path = tmp_yaml("""\
        checks:
          - path: hello.txt
            exists: true
    """)
    manifest = load_manifest(path)
    assert manifest.base_dir == str(tmp_path.resolve())
    check = manifest.checks[0]
    assert check.path == "hello.txt"
    assert check.label == "hello.txt"
    assert check.exists is True
    assert check.digest is None
    assert check.is_file is False


def test_relative_base_dir_resolved_against_manifest(tmp_yaml, tmp_path):
    path = tmp_yaml("""\
        base_dir: data
        checks:
          - path: a.bin
    """)
    assert load_manifest(path).base_dir == str((tmp_path / "data").resolve())


def test_digest_check_and_env_expansion(tmp_yaml, monkeypatch):
    monkeypatch.setenv("EXPECTED_MD5", "F15C1CAE7882448B3FB0404682E17E61")
    path = tmp_yaml("""\
        checks:
          - name: release
            path: ${RELEASE_FILE:-dist/app.tar.gz}
            digest:
              algorithm: MD5
              expected: ${EXPECTED_MD5}
    """)
    check = load_manifest(path).checks[0]
    assert check.path == "dist/app.tar.gz"
    assert check.label == "release"
    assert check.digest.algorithm == "MD5"
    assert check.digest.expected == "F15C1CAE7882448B3FB0404682E17E61"


def test_missing_env_variable_lists_every_key(tmp_yaml, monkeypatch):
    monkeypatch.delenv("AFFIRM_TEST_UNSET_A", raising=False)
    monkeypatch.delenv("AFFIRM_TEST_UNSET_B", raising=False)
    path = tmp_yaml("""\
        checks:
          - path: ${AFFIRM_TEST_UNSET_A}
            content: ${AFFIRM_TEST_UNSET_B}
    """)
    with pytest.raises(ValidationError) as exc_info:
        load_manifest(path)
    message = str(exc_info.value)
    assert "missing environment variables" in message
    assert "path=${AFFIRM_TEST_UNSET_A}" in message
    assert "content=${AFFIRM_TEST_UNSET_B}" in message


def test_empty_checks_rejected(tmp_yaml):
    with pytest.raises(ValidationError, match="checks must not be empty"):
        load_manifest(tmp_yaml("checks: []\n"))


def test_unknown_check_key_rejected(tmp_yaml):
    path = tmp_yaml("""\
        checks:
          - path: a
            sha: abc
    """)
    with pytest.raises(ValidationError):
        load_manifest(path)


@pytest.mark.parametrize(
    "flags",
    ["is_file: true\n    is_directory: true", "relative: true\n    absolute: true"],
)
def test_contradicting_flags_rejected(tmp_yaml, flags):
    path = tmp_yaml(f"checks:\n  - path: a\n    {flags}\n")
    with pytest.raises(ValidationError, match="cannot be both"):
        load_manifest(path)


def test_non_mapping_yaml_rejected(tmp_yaml):
    with pytest.raises(ValueError, match="must contain a YAML mapping"):
        load_manifest(tmp_yaml("- just\n- a list\n"))


@pytest.mark.parametrize("path", _example_manifests(), ids=lambda p: p.name)
def test_example_manifests_load(path):
    manifest = load_manifest(path)
    assert manifest.checks

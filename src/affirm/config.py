from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_DATE_FORMATS = [
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d",
]

CONFIG_ENV_VAR = "AFFIRM_CONFIG"


def _expand_all(values: dict[str, Any], owner: str) -> dict[str, Any]:
    """Expand ${VAR} references in every string value of *values*.

    Raises ValueError listing every missing variable so the user can fix them
    all at once rather than hitting them one-by-one.
    """
    missing: list[str] = []
    expanded: dict[str, Any] = {}
    for key, value in values.items():
        if not isinstance(value, str):
            expanded[key] = value
            continue
        try:
            expanded[key] = expandvars(value, nounset=True)
        except Exception:
            # Variable is missing and has no default
            missing.append(f"  {key}={value}")
            expanded[key] = value
    if missing:
        details = "\n".join(missing)
        raise ValueError(f"{owner} has missing environment variables:\n{details}")
    return expanded


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")
    date_formats: list[str] = Field(default_factory=lambda: list(DEFAULT_DATE_FORMATS))
    digest_chunk_size: int = 8192
    default_digest_algorithm: str = "SHA-256"

    @field_validator("date_formats")
    @classmethod
    def date_formats_must_not_be_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("date_formats must not be empty")
        return v

    @field_validator("digest_chunk_size")
    @classmethod
    def chunk_size_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("digest_chunk_size must be positive")
        return v


class DigestCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    algorithm: str
    expected: str


class FileCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str
    name: str | None = None
    exists: bool | None = None
    is_file: bool = False
    is_directory: bool = False
    readable: bool = False
    relative: bool = False
    absolute: bool = False
    digest: DigestCheck | None = None
    content: str | None = None

    @model_validator(mode="before")
    @classmethod
    def expand_env_variables(cls, data: Any) -> Any:
        if isinstance(data, dict):
            owner = f"Check '{data.get('name') or data.get('path')}'"
            data = _expand_all(data, owner)
            if isinstance(data.get("digest"), dict):
                data["digest"] = _expand_all(data["digest"], owner)
        return data

    @model_validator(mode="after")
    def validate_exclusive_flags(self) -> FileCheck:
        if self.is_file and self.is_directory:
            raise ValueError(f"Check '{self.label}' cannot be both is_file and is_directory")
        if self.relative and self.absolute:
            raise ValueError(f"Check '{self.label}' cannot be both relative and absolute")
        return self

    @property
    def label(self) -> str:
        return self.name or self.path


class Manifest(BaseModel):
    model_config = ConfigDict(extra="forbid")
    checks: list[FileCheck]
    base_dir: str | None = None

    @field_validator("checks")
    @classmethod
    def checks_must_not_be_empty(cls, v: list[FileCheck]) -> list[FileCheck]:
        if not v:
            raise ValueError("checks must not be empty")
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        raw = yaml.safe_load(f)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a YAML mapping")
    return raw


def load_settings(path: Path) -> Settings:
    """Load and validate settings from a YAML file."""
    return Settings(**_read_yaml(path))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read from $AFFIRM_CONFIG when it is set."""
    config_path = os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        return load_settings(Path(config_path))
    return Settings()


def load_manifest(path: Path) -> Manifest:
    """Load a verification manifest.

    Relative check paths are resolved against ``base_dir`` when the runner
    reads files; ``base_dir`` defaults to the manifest's directory.
    """
    manifest = Manifest(**_read_yaml(path))
    config_dir = path.parent.resolve()
    if manifest.base_dir is None:
        manifest.base_dir = str(config_dir)
    else:
        base = Path(manifest.base_dir)
        if not base.is_absolute():
            manifest.base_dir = str((config_dir / base).resolve())
    return manifest

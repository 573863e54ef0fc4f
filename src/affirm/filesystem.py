"""Filesystem collaborator used by file conditions."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Protocol


class FileSystem(Protocol):
    def exists(self, path: Path) -> bool: ...

    def is_file(self, path: Path) -> bool: ...

    def is_directory(self, path: Path) -> bool: ...

    def is_readable(self, path: Path) -> bool: ...

    def open_binary(self, path: Path) -> BinaryIO: ...


class LocalFileSystem:
    """The real, local filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_directory(self, path: Path) -> bool:
        return path.is_dir()

    def is_readable(self, path: Path) -> bool:
        return os.access(path, os.R_OK)

    def open_binary(self, path: Path) -> BinaryIO:
        return open(path, "rb")


LOCAL_FILESYSTEM = LocalFileSystem()

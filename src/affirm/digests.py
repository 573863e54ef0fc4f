"""Hex conversion, digest diffs and the hashing collaborator."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Protocol


def to_hex(digest: bytes) -> str:
    """Return the uppercase hexadecimal form of *digest*."""
    return bytes(digest).hex().upper()


def from_hex(digest: str) -> bytes:
    """Return the bytes of a hexadecimal string (either case)."""
    return bytes.fromhex(digest)


@dataclass(frozen=True)
class DigestDiff:
    """Computed and expected hex digests of one digest comparison."""

    actual: str
    expected: str
    algorithm: str

    @property
    def digests_differ(self) -> bool:
        return self.actual != self.expected


class HashObject(Protocol):
    name: str

    def update(self, data: bytes, /) -> None: ...

    def digest(self) -> bytes: ...

    def copy(self) -> HashObject: ...


class Hashing(Protocol):
    def new(self, algorithm: str) -> HashObject:
        """Return a fresh hash object, raising ValueError for unknown names."""
        ...


def _candidate_names(algorithm: str) -> list[str]:
    key = algorithm.strip().lower()
    names = [
        key,
        key.replace("-", ""),
        key.replace("-", "_"),
        key.replace("-", "").replace("/", "_"),
    ]
    return list(dict.fromkeys(names))


class HashlibHashing:
    """Hashing backed by :mod:`hashlib`, accepting names such as ``SHA-256``."""

    def new(self, algorithm: str) -> HashObject:
        available = hashlib.algorithms_available
        for name in _candidate_names(algorithm):
            # shake digests have no fixed length
            if name.startswith("shake"):
                continue
            if name in available:
                return hashlib.new(name)
        raise ValueError(f"unsupported hash type {algorithm}")


DEFAULT_HASHING = HashlibHashing()

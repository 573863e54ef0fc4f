"""Tests for hex helpers and the hashlib-backed hashing collaborator."""

import pytest

from affirm.conditions.files import FileConditions
from affirm.digests import DigestDiff, HashlibHashing, from_hex, to_hex
from affirm.exceptions import IllegalStateError


def test_to_hex_is_uppercase():
    assert to_hex(b"\x00\xab\xff") == "00ABFF"


def test_from_hex_accepts_both_cases():
    assert from_hex("00abFF") == b"\x00\xab\xff"


def test_digest_diff():
    assert DigestDiff("AA", "AA", "MD5").digests_differ is False
    assert DigestDiff("AA", "AB", "MD5").digests_differ is True


@pytest.mark.parametrize("name", ["MD5", "md5", "SHA-1", "SHA-256", "sha-512", "SHA3-256"])
def test_hashing_accepts_common_names(name):
    digest = HashlibHashing().new(name)
    digest.update(b"x")
    assert len(digest.digest()) > 0


@pytest.mark.parametrize("name", ["UnknownDigestAlgorithm", "SHAKE128", "shake_256", ""])
def test_hashing_rejects_unsupported_names(name):
    with pytest.raises(ValueError):
        HashlibHashing().new(name)


def test_unsupported_name_is_resignaled_as_illegal_state():
    with pytest.raises(IllegalStateError) as exc_info:
        FileConditions().resolve_digest("Nope")
    assert str(exc_info.value) == "Unable to find digest implementation for: <Nope>"
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_custom_hashing_collaborator_is_used():
    class RecordingHashing:
        def __init__(self):
            self.requested = []

        def new(self, algorithm):
            self.requested.append(algorithm)
            return HashlibHashing().new("MD5")

    hashing = RecordingHashing()
    FileConditions(hashing=hashing).resolve_digest("anything")
    assert hashing.requested == ["anything"]

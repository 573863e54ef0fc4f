"""Tests for failure message construction and the reporting sink."""

from pathlib import Path

import pytest

from affirm import AssertionFailedError, AssertionInfo, assert_that
from affirm.digests import DigestDiff
from affirm.errors import (
    ErrorMessage,
    actual_is_null,
    should_be_equal,
    should_exist,
    should_have_digest,
)
from affirm.evaluation import Fail, Reason
from affirm.reporter import _MESSAGES, FailureReporter, Failures, message_for
from affirm.representation import HEXADECIMAL_REPRESENTATION, STANDARD_REPRESENTATION


def test_every_reason_has_a_message():
    assert set(_MESSAGES) == set(Reason)


def test_actual_is_null_message():
    assert actual_is_null().create() == "Expecting actual not to be null"


def test_description_prefixes_message():
    info = AssertionInfo(description="config file")
    assert (
        should_exist(Path("a.txt")).create(info)
        == "[config file] \nExpecting file:\n  a.txt\nto exist."
    )


def test_overriding_error_message_replaces_message():
    info = AssertionInfo(description="ignored", overriding_error_message="boom")
    assert should_exist(Path("a.txt")).create(info) == "boom"


def test_digest_message_has_fixed_field_order():
    diff = DigestDiff("AAAA", "BBBB", "SHA-256")
    assert should_have_digest(Path("f"), diff).create() == (
        '\nExpecting file:\n  f\nSHA-256 digest to be:\n  "BBBB"\nbut was:\n  "AAAA"'
    )


def test_braces_in_algorithm_name_are_literal():
    diff = DigestDiff("AA", "BB", "{odd}")
    assert "{odd} digest to be" in should_have_digest(Path("f"), diff).create()


def test_messages_compare_by_template_and_args():
    assert should_exist(Path("a")) == should_exist(Path("a"))
    assert should_exist(Path("a")) != should_exist(Path("b"))
    assert ErrorMessage("{0}", 1) != ErrorMessage("{0}!", 1)


def test_standard_representation():
    rep = STANDARD_REPRESENTATION
    assert rep.to_string(None) == "null"
    assert rep.to_string("x") == '"x"'
    assert rep.to_string(3) == "3"
    assert rep.to_string(Path("a/b")) == "a/b"
    assert rep.to_string(b"\x0a\xff") == "0AFF"
    assert rep.to_string([1, "a"]) == "[1, 'a']"


def test_hexadecimal_representation():
    info = AssertionInfo(representation=HEXADECIMAL_REPRESENTATION)
    assert should_be_equal(10, 11).create(info) == "\nexpected: 0xb\n but was: 0xa"
    assert HEXADECIMAL_REPRESENTATION.to_string(True) == "True"


def test_with_representation_is_used_by_wrapper():
    with pytest.raises(AssertionError, match="expected: 0xff"):
        assert_that(1).with_representation(HEXADECIMAL_REPRESENTATION).is_equal_to(255)


def test_failures_builds_error_without_raising():
    error = Failures().failure(AssertionInfo(), should_be_equal(1, 2))
    assert isinstance(error, AssertionFailedError)
    assert error.actual == 1
    assert error.expected == 2
    assert str(error) == "\nexpected: 2\n but was: 1"


def test_failures_logs_at_debug(caplog):
    with caplog.at_level("DEBUG", logger="affirm.reporter"):
        Failures().failure(AssertionInfo(), actual_is_null())
    assert "Expecting actual not to be null" in caplog.text


def test_reporter_raises_sink_error(failures):
    info = AssertionInfo()
    fail = Fail(Reason.SHOULD_EXIST, Path("x"))
    with pytest.raises(AssertionError, match="to exist"):
        FailureReporter(failures).report(info, fail)
    failures.failure.assert_called_once_with(info, message_for(fail))


# --- wrapper context handling ---


def test_described_as_returns_new_handle_with_same_subject():
    subject = assert_that(5)
    described = subject.described_as("five")
    assert described is not subject
    assert described.actual is subject.actual
    assert subject.info.description is None
    assert described.info.description == "five"


def test_described_as_appears_in_failure():
    with pytest.raises(AssertionError, match=r"^\[answer\] "):
        assert_that(41).as_("answer").is_equal_to(42)


def test_overriding_error_message_on_wrapper():
    with pytest.raises(AssertionError, match="^custom$"):
        assert_that(1).overriding_error_message("custom").is_equal_to(2)


def test_object_checks():
    assert_that(None).is_none()
    assert_that(object()).is_not_none()
    assert_that([1]).is_equal_to([1]).is_not_equal_to([2]).is_instance_of(list)

    with pytest.raises(AssertionError, match="^Expecting actual not to be null$"):
        assert_that(None).is_not_none()
    with pytest.raises(AssertionError, match="to be null"):
        assert_that(1).is_none()
    with pytest.raises(AssertionError, match="to be an instance of"):
        assert_that([1]).is_instance_of(dict)
    with pytest.raises(AssertionError, match="not to be equal to"):
        assert_that([1]).is_not_equal_to([1])


def test_is_instance_of_accepts_tuple_of_types():
    assert_that([1]).is_instance_of((dict, list))

    with pytest.raises(AssertionError) as exc_info:
        assert_that([1]).is_instance_of((dict, set))
    assert "dict | set" in str(exc_info.value)
    assert "but was instance of:" in str(exc_info.value)

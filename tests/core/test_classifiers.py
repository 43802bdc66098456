from __future__ import annotations

import pytest

from ltsv_tokenizer.core.classifiers import is_field, is_field_byte, is_label, is_label_byte

_LABEL_BYTES = set(range(0x30, 0x3A)) | set(range(0x41, 0x5B)) | set(range(0x61, 0x7B)) | {
    ord("_"),
    ord("."),
    ord("-"),
}
_FIELD_BYTES = set(range(0x01, 0x09)) | {0x0B, 0x0C} | set(range(0x0E, 0x100))


def test_label_bytes_match_grammar() -> None:
    assert {b for b in range(256) if is_label_byte(b)} == _LABEL_BYTES


def test_field_bytes_match_grammar() -> None:
    assert {b for b in range(256) if is_field_byte(b)} == _FIELD_BYTES


@pytest.mark.parametrize("b", [0x00, 0x09, 0x0A, 0x0D])
def test_field_rejects_structural_and_nul(b: int) -> None:
    assert not is_field_byte(b)


@pytest.mark.parametrize("b", [-1, 256, 1000])
def test_out_of_range_is_never_allowed(b: int) -> None:
    assert not is_label_byte(b)
    assert not is_field_byte(b)


def test_is_label() -> None:
    assert is_label("host")
    assert is_label("x_forwarded.for-1")
    assert not is_label("bad label")
    assert not is_label("a:b")
    assert not is_label("héllo")


def test_is_field() -> None:
    assert is_field("GET /apache_pb.gif HTTP/1.0")
    assert is_field("[10/Oct/2000:13:55:36 -0700]")
    assert is_field("héllo 値")
    assert is_field("\x01\x0b\x0c\x7f")
    assert is_field("")
    assert not is_field("a\tb")
    assert not is_field("a\rb")
    assert not is_field("a\nb")
    assert not is_field("a\x00b")

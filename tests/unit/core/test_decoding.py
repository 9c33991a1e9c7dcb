from __future__ import annotations

"""
Unit tests for Lossy Line Decoding.
"""

import pytest

from dirlines.core.decoding import REPLACEMENT_CHARACTER, decode_line


def test_valid_utf8_round_trips() -> None:
    assert decode_line("héllo wörld\n".encode("utf-8")) == "héllo wörld\n"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (b"\xff\n", "\ufffd\n"),
        (b"a\x80b", "a\ufffdb"),
        (b"\xe2\x82", "\ufffd"),
        (b"\xc3\x28", "\ufffd("),
    ],
)
def test_invalid_sequences_are_replaced(raw: bytes, expected: str) -> None:
    assert decode_line(raw) == expected


def test_accepts_bytearray_and_empty() -> None:
    assert decode_line(bytearray(b"x\n")) == "x\n"
    assert decode_line(b"") == ""


def test_alternate_encoding() -> None:
    assert decode_line("ñ\n".encode("latin-1"), "latin-1") == "ñ\n"
    assert REPLACEMENT_CHARACTER in decode_line("ñ\n".encode("latin-1"))

from __future__ import annotations

import pytest

from wpspin.core.hexcodec import DEFAULT_BODY, parse_hex, parse_hex_or


def test_parse_hex_case_insensitive() -> None:
    assert parse_hex("ff") == 255
    assert parse_hex("FF") == 255
    assert parse_hex("334455") == 3359829


@pytest.mark.parametrize("text", ["", "zz", "-1", "+1", "0x10", "12 34"])
def test_parse_hex_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        parse_hex(text)


def test_parse_hex_overflow_depends_on_width() -> None:
    with pytest.raises(ValueError):
        parse_hex("80000000")
    assert parse_hex("80000000", bits=64) == 2**31
    with pytest.raises(ValueError):
        parse_hex("8000000000000000", bits=64)


def test_parse_hex_or_substitutes_default() -> None:
    assert parse_hex_or("zz", DEFAULT_BODY) == 1234567
    assert parse_hex_or("", 0) == 0
    assert parse_hex_or("80000000", 7) == 7
    assert parse_hex_or("10", 7) == 16

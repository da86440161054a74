from __future__ import annotations

import pytest

from wpspin.core.checksum import (
    body_check_digit,
    check_digit,
    format_pin,
    format_shifted,
    long_check_digit,
)


def test_known_body() -> None:
    assert body_check_digit(1234567) == 0
    assert format_pin(1234567) == "12345670"


def test_zero_padding_keeps_eight_digits() -> None:
    assert format_pin(0) == "00000000"
    assert format_pin(123) == "00001236"
    assert len(format_pin(42)) == 8


BODY_SWEEP = [*range(0, 10_000_000, 9973), 1, 9_999_998, 9_999_999]


def test_check_digit_in_range_across_bodies() -> None:
    for body in BODY_SWEEP:
        assert 0 <= body_check_digit(body) <= 9


def test_shifted_and_bare_entry_points_agree() -> None:
    for body in BODY_SWEEP:
        assert check_digit(body * 10) == body_check_digit(body)
        assert format_shifted(body * 10) == format_pin(body)


def test_long_variant_matches_int32_variant() -> None:
    for body in BODY_SWEEP:
        assert long_check_digit(body) == body_check_digit(body)


def test_pin_digits_satisfy_weighted_sum() -> None:
    pin = format_pin(3359829)
    weights = (3, 1, 3, 1, 3, 1, 3, 1)
    assert sum(int(d) * w for d, w in zip(pin, weights)) % 10 == 0


def test_out_of_range_rejected() -> None:
    with pytest.raises(ValueError):
        check_digit(-10)
    with pytest.raises(ValueError):
        check_digit(2**31)
    with pytest.raises(ValueError):
        body_check_digit(2**31)


def test_long_variant_accepts_wide_bodies() -> None:
    assert 0 <= long_check_digit(10**12) <= 9

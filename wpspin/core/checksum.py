"""WPS PIN check digit computation and 8-digit formatting.

The eighth PIN digit makes the weighted sum 3,1,3,1,3,1,3,1 over all eight
digits a multiple of ten. The functions below take either the bare 7-digit
body or the body already multiplied by ten; both yield the same digit.
"""

from __future__ import annotations

PIN_MODULO = 10_000_000

_INT32_MAX = 0x7FFF_FFFF
_INT64_MAX = 0x7FFF_FFFF_FFFF_FFFF
_WEIGHTS = ((10_000_000, 3), (1_000_000, 1), (100_000, 3), (10_000, 1), (1_000, 3), (100, 1), (10, 3))


def _weighted_check_digit(shifted: int) -> int:
    accum = 0
    for place, weight in _WEIGHTS:
        accum += weight * ((shifted // place) % 10)
    return (10 - accum % 10) % 10


def _require_range(value: int, limit: int, *, context: str) -> None:
    if value < 0 or value > limit:
        raise ValueError(f"{context} {value} is outside [0, {limit}]")


def check_digit(shifted: int) -> int:
    """Check digit for a PIN body that has already been multiplied by ten."""
    _require_range(shifted, _INT32_MAX, context="Shifted PIN")
    return _weighted_check_digit(shifted)


def body_check_digit(body: int) -> int:
    """Check digit for a bare 7-digit PIN body."""
    _require_range(body * 10, _INT32_MAX, context="Shifted PIN")
    return _weighted_check_digit(body * 10)


def long_check_digit(body: int) -> int:
    """Check digit for bodies produced by wide (64-bit) intermediate math."""
    _require_range(body * 10, _INT64_MAX, context="Shifted PIN")
    return _weighted_check_digit(body * 10)


def format_pin(body: int) -> str:
    return f"{body:07d}{body_check_digit(body)}"


def format_shifted(shifted: int) -> str:
    return f"{shifted + check_digit(shifted):08d}"

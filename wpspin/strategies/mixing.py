"""Formulas that mix MAC bytes or nibbles digit by digit."""

from __future__ import annotations

from wpspin.core.checksum import PIN_MODULO, format_pin
from wpspin.core.hexcodec import DEFAULT_BODY, parse_hex_or
from wpspin.core.mac import last_three_bytes, split_bytes


def _byte_values(bssid: str) -> list[int]:
    return [parse_hex_or(part, 0) for part in split_bytes(bssid)]


def _digits_to_body(digits: list[int]) -> int:
    return int("".join(str(digit) for digit in digits))


def airocon_realtek(bssid: str, ssid: str | None = None) -> str:
    """Each digit is the sum of two neighbouring bytes, wrapping around."""
    values = _byte_values(bssid)
    digits = [(values[i] + values[(i + 1) % 6]) % 10 for i in range(6)]
    digits.append(digits[0])
    return format_pin(_digits_to_body(digits))


def asus(bssid: str, ssid: str | None = None) -> str:
    values = _byte_values(bssid)
    bhex = sum(values[1:6])
    digits = [(values[i % 6] + values[5]) % (10 - ((i + bhex) % 7)) for i in range(7)]
    return format_pin(_digits_to_body(digits))


def arcadyan(bssid: str, ssid: str | None = None) -> str:
    """EasyBox PIN from the last two MAC bytes and their decimal "serial".

    The two trailing bytes read as a 5-digit decimal number stand in for the
    device serial; its last four digits and the four MAC nibbles feed two
    4-bit keys, which are XOR-wired into seven hex digits.
    """
    last_two = last_three_bytes(bssid)[2:6]
    serial_digits = [int(ch) for ch in f"{parse_hex_or(last_two, 0):05d}"[1:5]]
    nibbles = [parse_hex_or(last_two[i : i + 1], 0) for i in range(4)]

    k1 = (serial_digits[0] + serial_digits[1] + nibbles[2] + nibbles[3]) % 16
    k2 = (serial_digits[2] + serial_digits[3] + nibbles[0] + nibbles[1]) % 16

    hex_digits = (
        k1 ^ serial_digits[3],
        k1 ^ serial_digits[2],
        k2 ^ nibbles[1],
        k2 ^ nibbles[2],
        nibbles[2] ^ serial_digits[3],
        nibbles[3] ^ serial_digits[2],
        k1 ^ serial_digits[1],
    )
    hex_pin = "".join(f"{digit:X}" for digit in hex_digits)
    return format_pin(parse_hex_or(hex_pin, DEFAULT_BODY) % PIN_MODULO)

"""Formulas that combine the MAC with a manufacturing serial number.

Both read the serial from a `SerialNumberSource` before doing any arithmetic,
so a missing record surfaces as `MissingAuxiliaryDataError` and never as a
bogus PIN.
"""

from __future__ import annotations

from wpspin.core.checksum import PIN_MODULO, format_pin
from wpspin.core.errors import MalformedInputError, MissingAuxiliaryDataError
from wpspin.core.hexcodec import DEFAULT_BODY, parse_hex_or
from wpspin.core.mac import is_valid, normalize, wan_last_two_bytes
from wpspin.sources.base import SerialNumberSource

_SERIAL_MIN_LENGTH = 4


def _nibbles(text: str) -> list[int]:
    return [parse_hex_or(ch, 0) for ch in text]


def _read_serial(source: SerialNumberSource, bssid: str) -> str:
    serial = source.read(bssid)
    if len(serial) < _SERIAL_MIN_LENGTH:
        raise MissingAuxiliaryDataError(
            f"Serial must be at least {_SERIAL_MIN_LENGTH} characters"
        )
    return serial


def belkin(source: SerialNumberSource, bssid: str, ssid: str | None = None) -> str:
    serial = _read_serial(source, bssid)
    normalized = normalize(bssid)
    if len(normalized) < 4:
        raise MalformedInputError(f"BSSID '{bssid}' is too short")

    s = _nibbles(serial[-4:])
    n = _nibbles(normalized[-4:])

    k1 = (s[2] + s[3] + n[0] + n[1]) % 16
    k2 = (s[0] + s[1] + n[3] + n[2]) % 16

    pin = k1 ^ s[1]
    t1 = k1 ^ s[0]
    t2 = k2 ^ n[1]
    p1 = n[0] ^ s[1] ^ t1
    p2 = k2 ^ n[0] ^ t2
    p3 = k1 ^ s[2] ^ k2 ^ n[2]
    k1 ^= k2

    for term in (k1, t1, p1, t2, p2, k1):
        pin = (pin ^ term) * 16
    pin += p3

    # The subtracted term is always zero; kept to match vendor output exactly.
    pin = (pin % PIN_MODULO) - ((pin % PIN_MODULO) // PIN_MODULO) * k1
    return format_pin(pin)


def orange(source: SerialNumberSource, bssid: str, ssid: str | None = None) -> str:
    serial = _read_serial(source, bssid)[-4:]
    wan = wan_last_two_bytes(bssid)

    s = _nibbles(serial)
    w = _nibbles(wan[:4])

    # Keys are the low hex digit of each sum.
    k1 = (s[0] + s[1] + w[2] + w[3]) % 16
    k2 = (s[2] + s[3] + w[0] + w[1]) % 16

    hex_digits = (
        s[3] ^ k1,
        s[2] ^ k1,
        w[1] ^ k2,
        w[2] ^ k2,
        s[3] ^ w[2],
        s[2] ^ w[3],
        s[1] ^ k1,
    )
    hex_pin = "".join(format(digit, "x") for digit in hex_digits)
    return format_pin(parse_hex_or(hex_pin, DEFAULT_BODY) % PIN_MODULO)


def serial_precheck(source: SerialNumberSource, bssid: str, ssid: str | None = None) -> bool:
    return is_valid(bssid) and source.exists(bssid)

"""Formulas that read the PIN body more or less directly out of the MAC."""

from __future__ import annotations

from wpspin.core.checksum import PIN_MODULO, format_pin, format_shifted
from wpspin.core.errors import MalformedInputError
from wpspin.core.hexcodec import DEFAULT_BODY, parse_hex_or
from wpspin.core.mac import is_valid, last_three_bytes, normalize

# First hex digit used by each bit-width variant; all of them run to the end.
BIT_WIDTH_START = {28: 5, 36: 3, 40: 2, 44: 1, 48: 0}

_PIN32_NIBBLE_FACTOR = 8435456
_NIC_MODULO = 100_000_000
_DLINK_MASK = 0x55AA55


def pin24(bssid: str, ssid: str | None = None) -> str:
    value = parse_hex_or(last_three_bytes(bssid), DEFAULT_BODY) % PIN_MODULO
    return format_shifted(value * 10)


def bit_width(bits: int, bssid: str, ssid: str | None = None) -> str:
    if bits == 32:
        return pin32(bssid, ssid)
    try:
        start = BIT_WIDTH_START[bits]
    except KeyError:
        raise ValueError(f"Unsupported bit width {bits}") from None
    fragment = normalize(bssid)[start:12]
    return format_pin(parse_hex_or(fragment, DEFAULT_BODY, bits=64) % PIN_MODULO)


def pin32(bssid: str, ssid: str | None = None) -> str:
    normalized = normalize(bssid)
    tail = parse_hex_or(normalized[5:12], 0) % PIN_MODULO
    body = (parse_hex_or(normalized[4:5], 0) * _PIN32_NIBBLE_FACTOR + tail) % PIN_MODULO
    return format_pin(body)


def trendnet(bssid: str, ssid: str | None = None) -> str:
    nic = last_three_bytes(bssid)
    reversed_nic = nic[4:] + nic[2:4] + nic[0:2]
    value = parse_hex_or(reversed_nic, DEFAULT_BODY) % PIN_MODULO
    return format_shifted(value * 10)


def dlink(plus_one: bool, bssid: str, ssid: str | None = None) -> str:
    nic = parse_hex_or(last_three_bytes(bssid), DEFAULT_BODY)
    if plus_one:
        nic += 1
    nic %= _NIC_MODULO

    pin = nic ^ _DLINK_MASK
    low = pin & 0xF
    pin ^= (low << 4) | (low << 8) | (low << 12) | (low << 16) | (low << 20)

    pin %= PIN_MODULO
    if pin < 1_000_000:
        pin += (pin % 9) * 1_000_000 + 1_000_000
    return format_shifted(pin * 10)


def fte(bssid: str, ssid: str | None = None) -> str:
    if ssid is None or len(ssid) < 2:
        raise MalformedInputError("SSID is required and must be at least 2 characters")
    concatenation = last_three_bytes(bssid)[0:2] + ssid[-2:]
    body = parse_hex_or(concatenation, DEFAULT_BODY) % PIN_MODULO + 7
    return format_pin(body)


def fte_precheck(bssid: str, ssid: str | None = None) -> bool:
    return is_valid(bssid) and ssid is not None and len(ssid) >= 2

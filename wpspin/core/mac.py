"""MAC address canonicalisation and fixed sub-range extraction."""

from __future__ import annotations

import re

from wpspin.core.hexcodec import parse_hex

_MAC_RE = re.compile(r"[0-9A-F]{12}")


def normalize(mac: str | None) -> str:
    if mac is None:
        return ""
    return mac.replace(":", "").replace("-", "").upper()


def is_valid(mac: str | None) -> bool:
    return _MAC_RE.fullmatch(normalize(mac)) is not None


def last_three_bytes(mac: str | None) -> str:
    """Return the NIC part (hex chars 7-12), or the whole string when shorter."""
    normalized = normalize(mac)
    if len(normalized) < 12:
        return normalized
    return normalized[6:12]


def split_bytes(mac: str | None) -> list[str]:
    normalized = normalize(mac)
    return [
        normalized[i * 2 : i * 2 + 2] if i * 2 + 2 <= len(normalized) else "00"
        for i in range(6)
    ]


def wan_last_two_bytes(mac: str | None) -> str:
    """Derive the last two WAN-MAC bytes from the wireless MAC.

    The WAN interface sits two addresses below the wireless one. Only the
    last hex digit is decremented; when it is below 2 the negative result is
    emitted as a 32-bit two's complement, so ``"4451"`` yields
    ``"445ffffffff"``. Orange PINs depend on that behaviour.
    """
    normalized = normalize(mac)
    if len(normalized) < 12:
        return "0000"

    wimac = normalized[8:12]
    if wimac == "0000":
        return "fffe"
    if wimac == "0001":
        return "ffff"

    try:
        last_digit = parse_hex(wimac[3]) - 2
    except ValueError:
        return wimac
    return wimac[:3] + format(last_digit & 0xFFFF_FFFF, "x")

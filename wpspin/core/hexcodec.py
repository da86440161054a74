"""Hex-string to integer conversion.

`parse_hex` is strict. `parse_hex_or` never fails and substitutes a caller
chosen default instead; several strategies rely on that to turn malformed MAC
fragments into a known fallback body. Callers that need to tell garbage from a
real result should gate on `wpspin.core.mac.is_valid` first.
"""

from __future__ import annotations

import re

_HEX_RE = re.compile(r"[0-9A-Fa-f]+")
_SIGNED_MAX = {32: 0x7FFF_FFFF, 64: 0x7FFF_FFFF_FFFF_FFFF}

DEFAULT_BODY = 1234567


def parse_hex(text: str, *, bits: int = 32) -> int:
    """Parse unsigned, unprefixed hex that fits a signed `bits`-wide integer."""
    limit = _SIGNED_MAX.get(bits)
    if limit is None:
        raise ValueError(f"Unsupported integer width {bits}")
    if not _HEX_RE.fullmatch(text):
        raise ValueError(f"Not a hex string: {text!r}")
    value = int(text, 16)
    if value > limit:
        raise ValueError(f"Hex value {text!r} overflows {bits}-bit integer")
    return value


def parse_hex_or(text: str, default: int, *, bits: int = 32) -> int:
    try:
        return parse_hex(text, bits=bits)
    except ValueError:
        return default

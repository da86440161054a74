"""Arris cable-modem PINs built from Fibonacci numbers of the MAC bytes."""

from __future__ import annotations

import re

from wpspin.core.checksum import PIN_MODULO, long_check_digit
from wpspin.core.errors import MalformedInputError
from wpspin.core.hexcodec import parse_hex_or
from wpspin.core.mac import is_valid

_OCTET_RE = re.compile(r"[0-9A-Fa-f]{1,2}")
_FIB_TABLE_SIZE = 50


def _build_fibonacci_table(size: int) -> tuple[int, ...]:
    table = [1, 1, 1]
    while len(table) < size:
        table.append(table[-1] + table[-2])
    return tuple(table)


# Sequence starts F(0) = F(1) = F(2) = 1.
FIBONACCI = _build_fibonacci_table(_FIB_TABLE_SIZE)


def fibonacci(n: int) -> int:
    if n < 0:
        return 1
    if n < len(FIBONACCI):
        return FIBONACCI[n]
    prev, current = FIBONACCI[-2], FIBONACCI[-1]
    for _ in range(n - len(FIBONACCI) + 1):
        prev, current = current, prev + current
    return current


def _octets(bssid: str) -> list[int]:
    parts = bssid.split(":") if bssid else []
    if len(parts) != 6 or not all(_OCTET_RE.fullmatch(part) for part in parts):
        raise MalformedInputError(f"Invalid MAC address format: '{bssid}'")
    return [parse_hex_or(part, 0) for part in parts]


def arris(bssid: str, ssid: str | None = None) -> str:
    mac_bytes = _octets(bssid)
    adjusted = list(mac_bytes)
    fib_numbers: list[int] = []

    for i in range(6):
        counter = 0
        while adjusted[i] > 31:
            adjusted[i] -= 16
            counter += 1

        if counter:
            fib_numbers.append(fibonacci(adjusted[i]) + fibonacci(counter))
            continue

        if adjusted[i] < 3:
            others = (sum(adjusted) - adjusted[i]) & 0xFF
            adjusted[i] = others % 28 + 3
        fib_numbers.append(fibonacci(adjusted[i]))

    fib_sum = sum(fib_numbers[i] * fibonacci(i + 16) + mac_bytes[i] for i in range(6))
    fib_sum %= PIN_MODULO
    return f"{fib_sum * 10 + long_check_digit(fib_sum):08d}"


def arris_precheck(bssid: str, ssid: str | None = None) -> bool:
    if not is_valid(bssid):
        return False
    try:
        _octets(bssid)
    except MalformedInputError:
        return False
    return True

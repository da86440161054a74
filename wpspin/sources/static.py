"""In-memory serial number source for serials supplied by the caller."""

from __future__ import annotations

from collections.abc import Mapping

from wpspin.core.errors import SerialEmptyError, SerialNotFoundError
from wpspin.core.mac import normalize


class StaticSerialSource:
    def __init__(self, serials: Mapping[str, str]) -> None:
        self._serials = {normalize(bssid): serial for bssid, serial in serials.items()}

    def exists(self, bssid: str) -> bool:
        return normalize(bssid) in self._serials

    def read(self, bssid: str) -> str:
        serial = self._serials.get(normalize(bssid))
        if serial is None:
            raise SerialNotFoundError(f"No serial supplied for {bssid}")
        serial = serial.strip()
        if not serial:
            raise SerialEmptyError(f"Serial supplied for {bssid} is empty")
        return serial

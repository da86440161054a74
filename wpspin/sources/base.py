"""Serial number source interfaces."""

from __future__ import annotations

from typing import Protocol


class SerialNumberSource(Protocol):
    def exists(self, bssid: str) -> bool:
        """Return whether a serial record is available for the BSSID."""

    def read(self, bssid: str) -> str:
        """Return the trimmed serial for the BSSID or raise MissingAuxiliaryDataError."""

"""Serial number records stored as one plain-text file per BSSID."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from wpspin.core.errors import MissingAuxiliaryDataError, SerialEmptyError, SerialNotFoundError

SERIAL_SUFFIX = "serial"
LOGGER = logging.getLogger(__name__)


def default_serial_dir() -> Path:
    override = os.environ.get("WPSPIN_SERIAL_DIR")
    if override:
        return Path(override)
    xdg_data = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local/share"))
    return xdg_data / "wpspin/sessions"


class FileSerialSource:
    """Reads ``<base_dir>/<bssid>serial``, keyed by the BSSID exactly as given."""

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, bssid: str) -> Path:
        return self._base_dir / f"{bssid}{SERIAL_SUFFIX}"

    def exists(self, bssid: str) -> bool:
        try:
            return self.path_for(bssid).is_file()
        except OSError:
            return False

    def read(self, bssid: str) -> str:
        path = self.path_for(bssid)
        try:
            if not path.is_file():
                raise SerialNotFoundError(f"Serial file not found: {path}")
            with path.open(encoding="utf-8") as handle:
                first_line = handle.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise MissingAuxiliaryDataError(f"Failed to read serial file {path}: {exc}") from exc

        serial = first_line.strip()
        if not serial:
            raise SerialEmptyError(f"Serial file is empty: {path}")
        LOGGER.debug("Read serial for %s from %s", bssid, path)
        return serial

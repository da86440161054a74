"""Stable public API for auditing tools built on wpspin.

Names exported here are kept compatible across releases. Anything imported
from `wpspin.core`, `wpspin.strategies` or `wpspin.sources` directly may change.
"""

from __future__ import annotations

from pathlib import Path

from wpspin.core.checksum import body_check_digit, format_pin
from wpspin.core.errors import (
    DerivationError,
    MalformedInputError,
    MissingAuxiliaryDataError,
    ProfileLoadError,
    ProfileValidationError,
    SerialEmptyError,
    SerialNotFoundError,
    StrategyResolutionError,
    WpsPinError,
)
from wpspin.core.model import (
    DerivedPin,
    MatchRules,
    PinCandidate,
    PinFailure,
    PinResult,
    StrategyId,
    VendorProfile,
)
from wpspin.core.service import PinService
from wpspin.sources.base import SerialNumberSource
from wpspin.sources.serial_file import FileSerialSource
from wpspin.sources.static import StaticSerialSource
from wpspin.strategies.base import Strategy

__all__ = [
    "WpsPinError",
    "DerivationError",
    "MalformedInputError",
    "MissingAuxiliaryDataError",
    "SerialNotFoundError",
    "SerialEmptyError",
    "ProfileLoadError",
    "ProfileValidationError",
    "StrategyResolutionError",
    "DerivedPin",
    "MatchRules",
    "PinCandidate",
    "PinFailure",
    "PinResult",
    "StrategyId",
    "VendorProfile",
    "Strategy",
    "SerialNumberSource",
    "FileSerialSource",
    "StaticSerialSource",
    "body_check_digit",
    "format_pin",
    "Client",
]


class Client:
    """Public client for wpspin derivation capabilities.

    A `Client` wraps profile loading, the strategy registry and PIN suggestion
    behind a stable API intended for third-party tools (auditors, GUIs,
    scripts).
    """

    def __init__(
        self,
        *,
        serial_source: SerialNumberSource | None = None,
        serial_dir: str | Path | None = None,
    ) -> None:
        self._service = PinService(serial_source=serial_source, serial_dir=serial_dir)

    @property
    def load_warnings(self) -> tuple[str, ...]:
        return self._service.load_warnings

    def list_strategies(self) -> list[Strategy]:
        return self._service.list_strategies()

    def list_profiles(self) -> list[VendorProfile]:
        return self._service.list_profiles()

    def strategy(self, strategy: StrategyId | str | int) -> Strategy:
        strategy_id = self._resolve(strategy)
        resolved = self._service.registry.get(strategy_id)
        if resolved is None:
            raise StrategyResolutionError(f"Unknown strategy '{strategy}'")
        return resolved

    def derive(self, strategy: StrategyId | str | int, bssid: str, ssid: str | None = None) -> str:
        """Derive a PIN with one strategy, raising `DerivationError` on failure."""
        return self.strategy(strategy).derive(bssid, ssid)

    def generate_pin(self, strategy: StrategyId | str | int, bssid: str, ssid: str | None = None) -> PinResult:
        return self._service.generate_pin(self._resolve(strategy), bssid, ssid)

    def suggest(self, bssid: str, ssid: str | None = None, *, unique: bool = True) -> list[DerivedPin]:
        if unique:
            return self._service.unique_suggested_pins(bssid, ssid)
        return self._service.suggested_pins(bssid, ssid)

    def candidates(self, bssid: str, ssid: str | None = None) -> list[PinCandidate]:
        return self._service.candidate_pins(bssid, ssid)

    def _resolve(self, strategy: StrategyId | str | int) -> StrategyId:
        if isinstance(strategy, StrategyId):
            return strategy
        return self._service.resolve_strategy(str(strategy))

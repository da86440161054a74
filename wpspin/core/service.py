"""Service layer used by CLI and API frontends."""

from __future__ import annotations

import logging
from pathlib import Path

from wpspin.core.errors import DerivationError, StrategyResolutionError
from wpspin.core.model import (
    AUTO_SUGGESTED,
    DEFAULT_PIN,
    DerivedPin,
    PinCandidate,
    PinFailure,
    PinResult,
    StrategyId,
    VendorProfile,
)
from wpspin.core.profile_loader import load_profiles
from wpspin.core.profile_match import profiles_for_bssid
from wpspin.core.registry import StrategyRegistry
from wpspin.sources.base import SerialNumberSource
from wpspin.sources.serial_file import FileSerialSource, default_serial_dir
from wpspin.strategies.base import Strategy

LOGGER = logging.getLogger(__name__)


class PinService:
    def __init__(
        self,
        *,
        serial_source: SerialNumberSource | None = None,
        serial_dir: str | Path | None = None,
    ) -> None:
        loaded = load_profiles()
        self.profiles = loaded.profiles
        self.load_warnings = loaded.warnings
        if serial_source is None:
            serial_source = FileSerialSource(serial_dir or default_serial_dir())
        self.registry = StrategyRegistry(serial_source)

    def list_strategies(self) -> list[Strategy]:
        strategies = [self.registry.get(strategy_id) for strategy_id in StrategyId]
        return sorted((s for s in strategies if s is not None), key=lambda s: s.code)

    def list_profiles(self) -> list[VendorProfile]:
        return sorted(self.profiles.values(), key=lambda p: p.id)

    def matched_profiles(self, bssid: str) -> list[VendorProfile]:
        return profiles_for_bssid(bssid, self.profiles)

    def resolve_strategy(self, token: str) -> StrategyId:
        cleaned = token.strip()
        if cleaned.isdigit():
            strategy_id = StrategyId.from_code(int(cleaned))
            if strategy_id is not None:
                return strategy_id
        lowered = cleaned.lower()
        for strategy_id in StrategyId:
            if lowered in (strategy_id.name.lower(), strategy_id.display_name.lower()):
                return strategy_id
        available = ", ".join(f"{s.code} ({s.display_name})" for s in StrategyId)
        raise StrategyResolutionError(f"Unknown strategy '{token}'. Available: {available}")

    def generate_pin(self, strategy_id: StrategyId | None, bssid: str, ssid: str | None = None) -> PinResult:
        strategy = self.registry.get(strategy_id)
        if strategy is None:
            return PinFailure(strategy=None, reason="Unsupported strategy")

        if not strategy.validate(bssid, ssid):
            return PinFailure(strategy=strategy.id, reason=f"Invalid input for {strategy.name}")

        try:
            pin = strategy.derive(bssid, ssid)
        except DerivationError as exc:
            LOGGER.debug("Strategy %s failed for %s: %s", strategy.name, bssid, exc)
            return PinFailure(strategy=strategy.id, reason=str(exc))
        return DerivedPin(strategy=strategy.id, name=strategy.name, pin=pin)

    def suggested_pins(self, bssid: str, ssid: str | None = None) -> list[DerivedPin]:
        results = (self.generate_pin(strategy_id, bssid, ssid) for strategy_id in self._suggestion_order(bssid))
        return [result for result in results if isinstance(result, DerivedPin)]

    def unique_suggested_pins(self, bssid: str, ssid: str | None = None) -> list[DerivedPin]:
        seen: set[str] = set()
        unique: list[DerivedPin] = []
        for result in self.suggested_pins(bssid, ssid):
            if result.pin in seen:
                continue
            seen.add(result.pin)
            unique.append(result)
        return unique

    def candidate_pins(self, bssid: str, ssid: str | None = None) -> list[PinCandidate]:
        """Static profile PINs first, then derived PINs, then the generic default."""
        candidates: list[PinCandidate] = []
        seen: set[str] = set()

        for profile in self.matched_profiles(bssid):
            for pin in profile.static_pins:
                if pin in seen:
                    continue
                seen.add(pin)
                candidates.append(PinCandidate(pin=pin, source=f"Static PIN - {profile.name}", from_profile=True))

        for result in self.unique_suggested_pins(bssid, ssid):
            if result.pin in seen:
                continue
            seen.add(result.pin)
            candidates.append(PinCandidate(pin=result.pin, source=result.name))

        if DEFAULT_PIN not in seen:
            candidates.append(PinCandidate(pin=DEFAULT_PIN, source="Default"))
        return candidates

    def _suggestion_order(self, bssid: str) -> list[StrategyId]:
        order: list[StrategyId] = []
        for profile in self.matched_profiles(bssid):
            for strategy_id in profile.strategies:
                if strategy_id not in order:
                    order.append(strategy_id)
        order.extend(strategy_id for strategy_id in AUTO_SUGGESTED if strategy_id not in order)
        return order

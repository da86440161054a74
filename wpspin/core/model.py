"""Core data models used across registry, service, and CLI."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class StrategyId(enum.Enum):
    """Closed set of derivation strategies with stable numeric codes."""

    PIN24 = (101, "24-bit")
    AIROCON_REALTEK = (102, "Airocon")
    ARCADYAN = (103, "EasyBox")
    ARRIS = (104, "Arris")
    ASUS = (105, "Asus")
    BELKIN = (106, "Belkin")
    DLINK = (107, "DLink")
    DLINK_PLUS_ONE = (108, "DLink+1")
    PIN40 = (109, "40-bit")
    PIN48 = (110, "48-bit")
    ORANGE = (111, "Orange")
    PIN44 = (112, "44-bit")
    PIN36 = (113, "36-bit")
    PIN32 = (114, "32-bit")
    PIN28 = (115, "28-bit")
    TRENDNET = (116, "TrendNet")
    FTE = (117, "FTE")

    def __init__(self, code: int, display_name: str) -> None:
        self.code = code
        self.display_name = display_name

    @property
    def requires_serial(self) -> bool:
        return self in (StrategyId.BELKIN, StrategyId.ORANGE)

    @classmethod
    def from_code(cls, code: int) -> StrategyId | None:
        for member in cls:
            if member.code == code:
                return member
        return None


# Strategies tried automatically; serial-based ones need a provisioned record.
AUTO_SUGGESTED: tuple[StrategyId, ...] = (
    StrategyId.PIN24,
    StrategyId.PIN28,
    StrategyId.PIN32,
    StrategyId.PIN36,
    StrategyId.PIN40,
    StrategyId.PIN44,
    StrategyId.PIN48,
    StrategyId.DLINK,
    StrategyId.DLINK_PLUS_ONE,
    StrategyId.TRENDNET,
    StrategyId.ARRIS,
    StrategyId.ASUS,
    StrategyId.AIROCON_REALTEK,
    StrategyId.ARCADYAN,
    StrategyId.FTE,
)

DEFAULT_PIN = "12345670"


@dataclass(frozen=True)
class MatchRules:
    mac_prefix: tuple[str, ...]


@dataclass(frozen=True)
class VendorProfile:
    id: str
    name: str
    match: MatchRules
    strategies: tuple[StrategyId, ...]
    static_pins: tuple[str, ...]


@dataclass(frozen=True)
class DerivedPin:
    strategy: StrategyId
    name: str
    pin: str


@dataclass(frozen=True)
class PinFailure:
    strategy: StrategyId | None
    reason: str


PinResult = DerivedPin | PinFailure


@dataclass(frozen=True)
class PinCandidate:
    pin: str
    source: str
    from_profile: bool = False

"""Strategy contract shared by every derivation formula."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from wpspin.core import mac as macaddr
from wpspin.core.model import StrategyId

Transform = Callable[[str, str | None], str]
Precheck = Callable[[str, str | None], bool]


def mac_precheck(bssid: str, ssid: str | None = None) -> bool:
    return macaddr.is_valid(bssid)


@dataclass(frozen=True)
class Strategy:
    """One vendor formula bound to its id and any construction-time inputs.

    `derive` raises `DerivationError` subclasses when hard requirements are not
    met. Most formulas instead fall back to a default body on malformed MACs,
    so call `validate` first when the result has to be meaningful.
    """

    id: StrategyId
    transform: Transform
    precheck: Precheck = mac_precheck

    @property
    def name(self) -> str:
        return self.id.display_name

    @property
    def code(self) -> int:
        return self.id.code

    def derive(self, bssid: str, ssid: str | None = None) -> str:
        return self.transform(bssid, ssid)

    def validate(self, bssid: str, ssid: str | None = None) -> bool:
        return self.precheck(bssid, ssid)

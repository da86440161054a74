from __future__ import annotations

from pathlib import Path

import pytest

from wpspin.core.errors import StrategyResolutionError
from wpspin.core.model import DEFAULT_PIN, DerivedPin, PinFailure, StrategyId
from wpspin.core.service import PinService
from wpspin.sources.serial_file import FileSerialSource
from wpspin.sources.static import StaticSerialSource

MAC = "00:11:22:33:44:55"


def test_generate_pin_success() -> None:
    service = PinService(serial_source=StaticSerialSource({}))
    result = service.generate_pin(StrategyId.PIN24, MAC)
    assert result == DerivedPin(strategy=StrategyId.PIN24, name="24-bit", pin="33598291")


def test_generate_pin_failures_are_values() -> None:
    service = PinService(serial_source=StaticSerialSource({}))

    unsupported = service.generate_pin(None, MAC)
    assert isinstance(unsupported, PinFailure)
    assert unsupported.strategy is None

    invalid = service.generate_pin(StrategyId.PIN24, "not-a-mac")
    assert isinstance(invalid, PinFailure)
    assert invalid.reason == "Invalid input for 24-bit"

    no_serial = service.generate_pin(StrategyId.BELKIN, MAC)
    assert isinstance(no_serial, PinFailure)
    assert no_serial.strategy is StrategyId.BELKIN


def test_derivation_error_reported_as_failure() -> None:
    service = PinService(serial_source=StaticSerialSource({MAC: "12"}))
    result = service.generate_pin(StrategyId.ORANGE, MAC)
    assert isinstance(result, PinFailure)
    assert "at least 4" in result.reason


def test_unique_suggestions_drop_duplicate_pins() -> None:
    service = PinService(serial_source=StaticSerialSource({}))
    all_pins = service.suggested_pins(MAC)
    unique = service.unique_suggested_pins(MAC)

    assert [p.strategy for p in all_pins[:7]] == [
        StrategyId.PIN24,
        StrategyId.PIN28,
        StrategyId.PIN32,
        StrategyId.PIN36,
        StrategyId.PIN40,
        StrategyId.PIN44,
        StrategyId.PIN48,
    ]
    assert len({p.pin for p in unique}) == len(unique)
    assert StrategyId.PIN44 not in [p.strategy for p in unique]
    assert StrategyId.FTE not in [p.strategy for p in all_pins]


def test_candidates_without_profile_end_with_default() -> None:
    service = PinService(serial_source=StaticSerialSource({}))
    candidates = service.candidate_pins(MAC)

    assert candidates[0].pin == "33598291"
    assert candidates[-1].pin == DEFAULT_PIN
    assert candidates[-1].source == "Default"
    assert len({c.pin for c in candidates}) == len(candidates)


def test_static_profile_pins_come_first() -> None:
    service = PinService(serial_source=StaticSerialSource({}))
    candidates = service.candidate_pins("00:1A:2B:33:44:55")

    assert candidates[0].pin == "12345670"
    assert candidates[0].from_profile
    assert candidates[0].source == "Static PIN - Cisco"
    assert [c.pin for c in candidates].count(DEFAULT_PIN) == 1


def test_profile_strategies_lead_suggestions() -> None:
    service = PinService(serial_source=StaticSerialSource({}))
    suggested = service.unique_suggested_pins("A0:AB:1B:33:44:55")
    assert suggested[0].strategy is StrategyId.DLINK
    assert suggested[0].pin == "67456000"


def test_profile_serial_strategy_used_when_serial_present(tmp_path: Path) -> None:
    bssid = "08:86:3B:33:44:55"
    (tmp_path / f"{bssid}serial").write_text("1234\n", encoding="utf-8")

    service = PinService(serial_dir=tmp_path)
    assert isinstance(service.registry.serial_source, FileSerialSource)

    candidates = service.candidate_pins(bssid)
    assert candidates[0].pin == "68994921"
    assert candidates[0].source == "Belkin"


@pytest.mark.parametrize(
    ("token", "expected"),
    [("107", StrategyId.DLINK), ("dlink+1", StrategyId.DLINK_PLUS_ONE), ("ARRIS", StrategyId.ARRIS), ("easybox", StrategyId.ARCADYAN)],
)
def test_resolve_strategy(token: str, expected: StrategyId) -> None:
    service = PinService(serial_source=StaticSerialSource({}))
    assert service.resolve_strategy(token) is expected


def test_resolve_unknown_strategy() -> None:
    service = PinService(serial_source=StaticSerialSource({}))
    with pytest.raises(StrategyResolutionError, match="Available"):
        service.resolve_strategy("nope")


def test_list_strategies_sorted_by_code() -> None:
    service = PinService(serial_source=StaticSerialSource({}))
    codes = [s.code for s in service.list_strategies()]
    assert codes == list(range(101, 118))

"""Lazily built, thread-safe cache of strategy instances keyed by StrategyId."""

from __future__ import annotations

import threading
from collections.abc import Callable
from functools import partial

from wpspin.core.model import StrategyId
from wpspin.sources.base import SerialNumberSource
from wpspin.sources.serial_file import FileSerialSource, default_serial_dir
from wpspin.strategies import arris, direct, mixing, serial
from wpspin.strategies.base import Strategy

_Factory = Callable[[SerialNumberSource], Strategy]


def _mac_only(strategy_id: StrategyId, transform: Callable[..., str]) -> _Factory:
    return lambda _source: Strategy(id=strategy_id, transform=transform)


def _bit_width(strategy_id: StrategyId, bits: int) -> _Factory:
    return _mac_only(strategy_id, partial(direct.bit_width, bits))


def _serial_based(strategy_id: StrategyId, transform: Callable[..., str]) -> _Factory:
    return lambda source: Strategy(
        id=strategy_id,
        transform=partial(transform, source),
        precheck=partial(serial.serial_precheck, source),
    )


_FACTORIES: dict[StrategyId, _Factory] = {
    StrategyId.PIN24: _mac_only(StrategyId.PIN24, direct.pin24),
    StrategyId.AIROCON_REALTEK: _mac_only(StrategyId.AIROCON_REALTEK, mixing.airocon_realtek),
    StrategyId.ARCADYAN: _mac_only(StrategyId.ARCADYAN, mixing.arcadyan),
    StrategyId.ARRIS: lambda _source: Strategy(
        id=StrategyId.ARRIS, transform=arris.arris, precheck=arris.arris_precheck
    ),
    StrategyId.ASUS: _mac_only(StrategyId.ASUS, mixing.asus),
    StrategyId.BELKIN: _serial_based(StrategyId.BELKIN, serial.belkin),
    StrategyId.DLINK: _mac_only(StrategyId.DLINK, partial(direct.dlink, False)),
    StrategyId.DLINK_PLUS_ONE: _mac_only(StrategyId.DLINK_PLUS_ONE, partial(direct.dlink, True)),
    StrategyId.PIN40: _bit_width(StrategyId.PIN40, 40),
    StrategyId.PIN48: _bit_width(StrategyId.PIN48, 48),
    StrategyId.ORANGE: _serial_based(StrategyId.ORANGE, serial.orange),
    StrategyId.PIN44: _bit_width(StrategyId.PIN44, 44),
    StrategyId.PIN36: _bit_width(StrategyId.PIN36, 36),
    StrategyId.PIN32: _mac_only(StrategyId.PIN32, direct.pin32),
    StrategyId.PIN28: _bit_width(StrategyId.PIN28, 28),
    StrategyId.TRENDNET: _mac_only(StrategyId.TRENDNET, direct.trendnet),
    StrategyId.FTE: lambda _source: Strategy(
        id=StrategyId.FTE, transform=direct.fte, precheck=direct.fte_precheck
    ),
}


class StrategyRegistry:
    """Returns one cached `Strategy` per id, building it on first request."""

    def __init__(self, serial_source: SerialNumberSource | None = None) -> None:
        self._serial_source = serial_source or FileSerialSource(default_serial_dir())
        self._cache: dict[StrategyId, Strategy] = {}
        self._lock = threading.Lock()

    @property
    def serial_source(self) -> SerialNumberSource:
        return self._serial_source

    def get(self, strategy_id: StrategyId | None) -> Strategy | None:
        if strategy_id is None:
            return None
        factory = _FACTORIES.get(strategy_id)
        if factory is None:
            return None

        with self._lock:
            strategy = self._cache.get(strategy_id)
            if strategy is None:
                strategy = factory(self._serial_source)
                self._cache[strategy_id] = strategy
            return strategy

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

from __future__ import annotations

import threading

from wpspin.core.model import StrategyId
from wpspin.core.registry import StrategyRegistry
from wpspin.sources.serial_file import FileSerialSource
from wpspin.sources.static import StaticSerialSource


def test_every_strategy_id_is_registered() -> None:
    registry = StrategyRegistry(StaticSerialSource({}))
    for strategy_id in StrategyId:
        strategy = registry.get(strategy_id)
        assert strategy is not None
        assert strategy.id is strategy_id


def test_get_returns_cached_instance() -> None:
    registry = StrategyRegistry(StaticSerialSource({}))
    assert registry.get(StrategyId.DLINK) is registry.get(StrategyId.DLINK)


def test_clear_rebuilds_instances() -> None:
    registry = StrategyRegistry(StaticSerialSource({}))
    before = registry.get(StrategyId.BELKIN)
    registry.clear()
    after = registry.get(StrategyId.BELKIN)
    assert before is not after
    assert after is registry.get(StrategyId.BELKIN)


def test_unknown_id_is_absent() -> None:
    registry = StrategyRegistry(StaticSerialSource({}))
    assert registry.get(None) is None
    assert registry.get(StrategyId.from_code(42)) is None


def test_default_source_uses_serial_dir(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("WPSPIN_SERIAL_DIR", str(tmp_path))
    registry = StrategyRegistry()
    assert isinstance(registry.serial_source, FileSerialSource)
    assert registry.serial_source.base_dir == tmp_path


def test_concurrent_get_yields_single_instance() -> None:
    registry = StrategyRegistry(StaticSerialSource({}))
    barrier = threading.Barrier(8)
    seen: list[object] = []
    seen_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        strategy = registry.get(StrategyId.ARRIS)
        with seen_lock:
            seen.append(strategy)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(seen) == 8
    assert all(item is seen[0] for item in seen)

# FILE: tests/test_spin.py
import pytest

from draw_core.draw import DrawEngine
from draw_core.errors import DrawInProgressError, ExhaustedPoolError
from draw_core.spin import run_spin


def test_spin_ticks_precede_single_commit():
    engine = DrawEngine(["A", "B", "C"], seed=21)
    seen = []
    sleeps = []

    def on_tick(i, cand):
        # nothing committed while ticking
        assert engine.history == []
        assert engine.in_progress
        seen.append((i, cand))

    winner = run_spin(engine, ticks=20, interval_ms=100, on_tick=on_tick, sleep=sleeps.append)
    assert [i for i, _ in seen] == list(range(20))
    assert all(c in {"A", "B", "C"} for _, c in seen)
    assert sleeps == [0.1] * 20
    assert engine.history == [winner]
    assert not engine.in_progress


def test_spin_zero_interval_does_not_sleep():
    engine = DrawEngine(["A"], seed=0)
    sleeps = []
    assert run_spin(engine, ticks=3, interval_ms=0, sleep=sleeps.append) == "A"
    assert sleeps == []


def test_interrupted_spin_is_abandoned():
    engine = DrawEngine(["A", "B"], seed=22)

    def boom(i, cand):
        if i == 5:
            raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        run_spin(engine, ticks=10, interval_ms=0, on_tick=boom)
    assert engine.history == []
    assert not engine.in_progress
    assert engine.state.status == "idle"


def test_spin_on_exhausted_pool():
    engine = DrawEngine([], seed=0)
    with pytest.raises(ExhaustedPoolError):
        run_spin(engine, ticks=2, interval_ms=0)
    assert not engine.in_progress


def test_spin_rejects_nested_draw():
    engine = DrawEngine(["A", "B"], seed=23)
    engine.begin_draw()
    with pytest.raises(DrawInProgressError):
        run_spin(engine, ticks=2, interval_ms=0)
    # the outer draw is still pending and can finish
    assert engine.in_progress
    assert engine.commit() in {"A", "B"}

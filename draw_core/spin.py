"""
Cosmetic spin before a draw commits.

The UI shows ``ticks`` transient candidates at a fixed interval, then the
engine commits its real pick. Ticks have no influence on the committed winner.
"""
from __future__ import annotations
import logging
import time
from typing import Callable, Optional

from .constants import SPIN_INTERVAL_MS, SPIN_TICKS
from .draw import DrawEngine

logger = logging.getLogger(__name__)


def run_spin(
    engine: DrawEngine,
    ticks: int = SPIN_TICKS,
    interval_ms: int = SPIN_INTERVAL_MS,
    on_tick: Optional[Callable[[int, str], None]] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> str:
    """
    Run a full animated draw and return the committed winner.

    ``on_tick(i, candidate)`` is called once per tick, strictly before the
    commit. If anything fails before the commit the pending draw is abandoned.
    """
    engine.begin_draw()
    try:
        for i in range(ticks):
            candidate = engine.spin_candidate()
            logger.debug("Spin tick %d/%d: %r", i + 1, ticks, candidate)
            if on_tick is not None:
                on_tick(i, candidate)
            if interval_ms:
                sleep(interval_ms / 1000.0)
    except BaseException:
        engine.abandon()
        raise
    return engine.commit()

"""
Lucky draw engine.

Owns the draw history (most recent first) and the repeat toggle. Each draw
computes the eligible pool fresh from the current name list, picks one name
with an unbiased index draw and prepends it to the history. That prepend is
the only mutation a draw performs.
"""
from __future__ import annotations
import logging
import random
from collections import Counter
from typing import Iterable, List, Optional

from .errors import DrawInProgressError, ExhaustedPoolError
from .models import WinnerState
from .rng import build_rng, pick_index

logger = logging.getLogger(__name__)


def eligible_pool(names: List[str], history: List[str], allow_repeat: bool) -> List[str]:
    """
    Names a draw may select, in name-list order.

    Without repeats this is the multiset difference ``names - history``: each
    drawn occurrence cancels one occurrence of the same text, so a name listed
    twice stays eligible after being drawn once.
    """
    if allow_repeat:
        return list(names)
    drawn = Counter(history)
    out = []
    for n in names:
        if drawn[n] > 0:
            drawn[n] -= 1
            continue
        out.append(n)
    return out


class DrawEngine:
    def __init__(
        self,
        names: Optional[Iterable[str]] = None,
        *,
        allow_repeat: bool = False,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self._names: List[str] = list(names or [])
        self._history: List[str] = []
        self._allow_repeat = bool(allow_repeat)
        self._rng = rng or build_rng(seed)
        self._pending = False
        self._state = WinnerState.idle()
        self._state_before_draw = self._state

    # -----------------------
    # Read accessors
    # -----------------------
    @property
    def names(self) -> List[str]:
        return list(self._names)

    @property
    def history(self) -> List[str]:
        return list(self._history)

    @property
    def allow_repeat(self) -> bool:
        return self._allow_repeat

    @property
    def state(self) -> WinnerState:
        return self._state.model_copy()

    @property
    def in_progress(self) -> bool:
        return self._pending

    @property
    def last_winner(self) -> Optional[str]:
        return self._state.winner

    def eligible_pool(self) -> List[str]:
        return eligible_pool(self._names, self._history, self._allow_repeat)

    @property
    def pool_size(self) -> int:
        return len(self.eligible_pool())

    # -----------------------
    # Mutators
    # -----------------------
    def set_names(self, names: Iterable[str]):
        """Replace the name list snapshot. History is kept as-is."""
        self._names = list(names)

    def set_allow_repeat(self, flag: bool):
        self._allow_repeat = bool(flag)

    def reset(self):
        self._history.clear()
        if not self._pending:
            self._state = WinnerState.idle()
        self._state_before_draw = WinnerState.idle()
        logger.info("Draw history cleared")

    # -----------------------
    # Drawing
    # -----------------------
    def _require_pool(self) -> List[str]:
        pool = self.eligible_pool()
        if not pool:
            logger.warning(
                "Draw requested with empty pool (names=%d, drawn=%d, allow_repeat=%s)",
                len(self._names), len(self._history), self._allow_repeat,
            )
            raise ExhaustedPoolError()
        return pool

    def begin_draw(self):
        """Start a two-phase draw; spin candidates may be shown until commit()."""
        if self._pending:
            logger.warning("Rejected nested draw while one is pending")
            raise DrawInProgressError()
        self._require_pool()
        self._state_before_draw = self._state
        self._pending = True
        self._state = WinnerState.drawing()

    def spin_candidate(self) -> str:
        """Transient pick for display only. Never touches the history."""
        if not self._pending:
            raise RuntimeError("spin_candidate() called without begin_draw()")
        pool = self.eligible_pool()
        if not pool:
            return ""
        candidate = pool[pick_index(self._rng, len(pool))]
        self._state = WinnerState.drawing(candidate)
        return candidate

    def commit(self) -> str:
        if not self._pending:
            raise RuntimeError("commit() called without begin_draw()")
        try:
            pool = self._require_pool()
        except ExhaustedPoolError:
            self.abandon()
            raise
        winner = pool[pick_index(self._rng, len(pool))]
        self._history.insert(0, winner)
        self._pending = False
        self._state = WinnerState.won(winner)
        logger.info("Drew %r (%d eligible, %d drawn so far)", winner, len(pool), len(self._history))
        return winner

    def abandon(self):
        """Drop a pending draw. Nothing was committed, so only the display state rolls back."""
        if not self._pending:
            return
        self._pending = False
        self._state = self._state_before_draw

    def draw(self) -> str:
        self.begin_draw()
        return self.commit()

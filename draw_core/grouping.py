# draw_core/grouping.py
from __future__ import annotations
import functools
import logging
import random
import re
from typing import List, Optional

from .constants import MIN_GROUP_SIZE, SHUFFLE_COMPARATOR, SHUFFLE_FISHER_YATES
from .errors import InvalidGroupSizeError
from .models import GroupPartition
from .rng import build_rng

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _validate_group_size(group_size) -> int:
    # bool is an int subclass; True/False are not sizes
    if isinstance(group_size, bool) or not isinstance(group_size, int):
        raise InvalidGroupSizeError(group_size)
    if group_size < MIN_GROUP_SIZE:
        raise InvalidGroupSizeError(group_size)
    return group_size


def coerce_group_size(value, default: int = MIN_GROUP_SIZE) -> int:
    """
    UI-facing clamp: anything unparsable becomes ``default``, anything below 1
    becomes 1. Never raises.
    """
    if isinstance(value, str):
        # leading integer, like parseInt: "2.5" -> 2, "3 people" -> 3
        m = _LEADING_INT.match(value)
        n = int(m.group(1)) if m else default
    else:
        try:
            n = int(value)
        except (TypeError, ValueError, OverflowError):
            n = default
    return max(MIN_GROUP_SIZE, n)


def shuffle_names(names: List[str], rng: random.Random, strategy: str = SHUFFLE_FISHER_YATES) -> List[str]:
    """Return a shuffled copy; the input list is left untouched."""
    out = list(names)
    if strategy == SHUFFLE_FISHER_YATES:
        rng.shuffle(out)
        return out
    if strategy == SHUFFLE_COMPARATOR:
        # random comparator sort: approximately uniform, kept for parity with the legacy app
        return sorted(out, key=functools.cmp_to_key(lambda a, b: rng.random() - 0.5))
    raise ValueError(f"Unknown shuffle strategy: {strategy}")


def chunk(seq: List[str], size: int) -> List[List[str]]:
    return [seq[i:i + size] for i in range(0, len(seq), size)]


def partition(
    names: List[str],
    group_size: int,
    rng: Optional[random.Random] = None,
    strategy: str = SHUFFLE_FISHER_YATES,
) -> GroupPartition:
    """
    Shuffle ``names`` and slice them into consecutive groups of ``group_size``.
    The last group holds the remainder and may be smaller.
    """
    size = _validate_group_size(group_size)
    if not names:
        return GroupPartition(group_size=size, groups=[])
    shuffled = shuffle_names(names, rng or build_rng(), strategy)
    groups = chunk(shuffled, size)
    logger.info("Partitioned %d names into %d groups of up to %d", len(names), len(groups), size)
    return GroupPartition(group_size=size, groups=groups)


class GroupEngine:
    """Keeps only the most recent partition; every call replaces it."""

    def __init__(self, rng: Optional[random.Random] = None, *, seed: Optional[int] = None,
                 strategy: str = SHUFFLE_FISHER_YATES) -> None:
        if strategy not in (SHUFFLE_FISHER_YATES, SHUFFLE_COMPARATOR):
            raise ValueError(f"Unknown shuffle strategy: {strategy}")
        self._rng = rng or build_rng(seed)
        self.strategy = strategy
        self._last: Optional[GroupPartition] = None

    @property
    def last(self) -> Optional[GroupPartition]:
        return self._last

    def partition(self, names: List[str], group_size: int) -> GroupPartition:
        result = partition(names, group_size, rng=self._rng, strategy=self.strategy)
        self._last = result
        return result

    def clear(self):
        self._last = None

# draw_core/validation.py
from __future__ import annotations
from collections import Counter

from .draw import DrawEngine
from .errors import ExhaustedPoolError, InvalidGroupSizeError
from .grouping import coerce_group_size, partition
from .rng import build_rng


def check_partition(names, group_size, result) -> bool:
    """True when ``result`` is a valid partition of ``names`` into ``group_size`` chunks."""
    n = len(names)
    expected_groups = -(-n // group_size)
    sizes = result.sizes()
    if len(sizes) != expected_groups:
        return False
    if any(s < 1 or s > group_size for s in sizes):
        return False
    if any(s != group_size for s in sizes[:-1]):
        return False
    return Counter(result.members()) == Counter(names)


def run_self_test(seed: int = 7):
    """
    Run a basic suite of engine self-tests.
    """
    results = {"tests": []}
    names = ["A", "B", "C"]

    engine = DrawEngine(names, seed=seed)
    drawn = [engine.draw() for _ in names]
    results["tests"].append(("No repeats until exhausted", sorted(drawn) == sorted(names)))
    try:
        engine.draw()
        exhausted = False
    except ExhaustedPoolError:
        exhausted = True
    results["tests"].append(("Exhausted pool raises", exhausted))
    engine.reset()
    results["tests"].append(("Reset restores full pool", engine.pool_size == len(names)))

    dup = DrawEngine(["A", "A", "B"], seed=seed)
    dup_drawn = [dup.draw() for _ in range(3)]
    results["tests"].append(("Duplicates drawn once per entry", Counter(dup_drawn) == Counter(["A", "A", "B"])))

    five = ["A", "B", "C", "D", "E"]
    p = partition(five, 2, rng=build_rng(seed))
    results["tests"].append(("Groups of 2 from 5 -> [2,2,1]", p.sizes() == [2, 2, 1] and check_partition(five, 2, p)))
    results["tests"].append(("Empty list -> zero groups", partition([], 3).count == 0))
    try:
        partition(five, 0)
        rejected = False
    except InvalidGroupSizeError:
        rejected = True
    results["tests"].append(("Group size 0 rejected", rejected))
    results["tests"].append(("UI clamps bad size to 1", coerce_group_size("abc") == 1 and coerce_group_size(-4) == 1))
    return results

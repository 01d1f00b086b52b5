# FILE: tests/test_grouping.py
import math
import random
from collections import Counter

import pytest

from draw_core.errors import InvalidGroupSizeError
from draw_core.grouping import GroupEngine, chunk, coerce_group_size, partition, shuffle_names


def test_five_names_in_pairs():
    names = ["A", "B", "C", "D", "E"]
    result = partition(names, 2, rng=random.Random(1))
    assert result.sizes() == [2, 2, 1]
    assert Counter(result.members()) == Counter(names)


@pytest.mark.parametrize("n", [1, 2, 5, 9, 10, 17])
@pytest.mark.parametrize("g", [1, 2, 3, 4, 10, 25])
@pytest.mark.parametrize("strategy", ["fisher_yates", "comparator"])
def test_partition_shape(n, g, strategy):
    names = [f"P{i}" for i in range(n)]
    result = partition(names, g, rng=random.Random(n * 31 + g), strategy=strategy)
    sizes = result.sizes()
    assert len(sizes) == math.ceil(n / g)
    assert all(1 <= s <= g for s in sizes)
    assert all(s == g for s in sizes[:-1])
    assert sizes[-1] == (n % g or g)
    assert Counter(result.members()) == Counter(names)


def test_duplicates_each_placed_once():
    names = ["A", "A", "B", "B", "B"]
    result = partition(names, 2, rng=random.Random(3))
    assert Counter(result.members()) == Counter(names)


def test_empty_list_gives_zero_groups():
    result = partition([], 3)
    assert result.count == 0
    assert result.groups == []


@pytest.mark.parametrize("bad", [0, -1, True, 2.5, "3", None])
def test_invalid_group_size_rejected(bad):
    with pytest.raises(InvalidGroupSizeError):
        partition(["A", "B"], bad)


def test_invalid_group_size_is_a_value_error():
    with pytest.raises(ValueError):
        partition([], 0)


def test_partition_does_not_mutate_input():
    names = ["A", "B", "C", "D"]
    partition(names, 2, rng=random.Random(0))
    assert names == ["A", "B", "C", "D"]


def test_repeated_partitions_vary():
    names = [f"P{i}" for i in range(8)]
    engine = GroupEngine(seed=42)
    seen = set()
    for _ in range(50):
        result = engine.partition(names, 3)
        seen.add(tuple(tuple(sorted(g)) for g in result.groups))
    assert len(seen) > 10


def test_fisher_yates_first_position_roughly_uniform():
    rng = random.Random(99)
    names = ["A", "B", "C"]
    firsts = Counter(shuffle_names(names, rng)[0] for _ in range(3000))
    for n in names:
        assert 850 < firsts[n] < 1150


def test_engine_keeps_only_last_partition():
    engine = GroupEngine(seed=1)
    assert engine.last is None
    first = engine.partition(["A", "B", "C"], 2)
    second = engine.partition(["A", "B", "C"], 1)
    assert engine.last is second
    assert first.group_size == 2
    assert second.sizes() == [1, 1, 1]
    engine.clear()
    assert engine.last is None


def test_failed_partition_keeps_previous():
    engine = GroupEngine(seed=1)
    prev = engine.partition(["A", "B"], 1)
    with pytest.raises(InvalidGroupSizeError):
        engine.partition(["A", "B"], 0)
    assert engine.last is prev


def test_unknown_strategy():
    with pytest.raises(ValueError):
        GroupEngine(strategy="bogus")
    with pytest.raises(ValueError):
        shuffle_names(["A"], random.Random(0), "bogus")


@pytest.mark.parametrize("raw,expected", [
    (3, 3), ("4", 4), (0, 1), (-7, 1), ("abc", 1), (None, 1), ("", 1), (2.9, 2),
    ("2.5", 2), (" 3 people", 3), ("-2", 1), (float("inf"), 1), (float("-inf"), 1), (float("nan"), 1),
])
def test_coerce_group_size(raw, expected):
    assert coerce_group_size(raw) == expected


def test_coerce_group_size_uses_default_for_garbage():
    assert coerce_group_size("x", default=3) == 3


def test_chunk_keeps_remainder():
    assert chunk(["a", "b", "c"], 2) == [["a", "b"], ["c"]]
    assert chunk([], 2) == []

# FILE: tests/test_validation.py
from draw_core.models import GroupPartition
from draw_core.validation import check_partition, run_self_test


def test_self_test_passes():
    results = run_self_test()
    failed = [label for label, ok in results["tests"] if not ok]
    assert results["tests"]
    assert failed == []


def test_check_partition_detects_bad_shapes():
    names = ["A", "B", "C"]
    assert check_partition(names, 2, GroupPartition(group_size=2, groups=[["B", "A"], ["C"]]))
    assert not check_partition(names, 2, GroupPartition(group_size=2, groups=[["A"], ["B", "C"]]))
    assert not check_partition(names, 2, GroupPartition(group_size=2, groups=[["A", "B"]]))
    assert not check_partition(names, 2, GroupPartition(group_size=2, groups=[["A", "A"], ["C"]]))

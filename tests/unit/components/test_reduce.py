from reeks.components.keys import sum_reduce_func
from reeks.components.reduce import reduce_


def test_reduce_sums_values_regardless_of_keys():
    assert reduce_({"x": 1, "y": 2, "z": 3}, sum_reduce_func(), 0) == 6


def test_reduce_of_empty_returns_start_unchanged():
    start = object()
    assert reduce_([], sum_reduce_func(), start) is start


def test_reduce_is_a_strict_left_fold():
    result = reduce_(
        ["a", "b", "c"],
        lambda acc, key, value: f"({acc}{key}{value})",
        "",
    )
    assert result == "(((0a)1b)2c)"

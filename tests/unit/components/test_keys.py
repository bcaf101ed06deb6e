import pytest
from typeguard import TypeCheckError

from reeks.components.keys import (
    pass_through_func,
    pass_through_key_func,
    sequential_key_func,
    simple_predicate_func,
    sum_reduce_func,
)


def test_sequential_key_func_counts_from_start():
    next_key = sequential_key_func(5)
    assert [next_key("k", "v") for _ in range(3)] == [5, 6, 7]


def test_sequential_key_func_defaults_to_zero():
    next_key = sequential_key_func()
    assert next_key() == 0
    assert next_key() == 1


def test_sequential_key_func_instances_are_independent():
    first = sequential_key_func()
    second = sequential_key_func()
    first()
    first()
    assert second() == 0
    assert first() == 2


def test_sequential_key_func_rejects_non_int_start():
    with pytest.raises(TypeCheckError):
        sequential_key_func("0")


def test_pass_through_funcs():
    assert pass_through_func()("key", "value") == "value"
    assert pass_through_key_func()("key", "value") == "key"


def test_simple_predicate_func_is_constant():
    always = simple_predicate_func(True)
    never = simple_predicate_func(False)
    assert always(1, None) is True
    assert never(1, "anything") is False


def test_sum_reduce_func_adds_values_not_keys():
    add = sum_reduce_func()
    assert add(10, 100, 5) == 15
    assert add("ab", 0, "c") == "abc"


def test_simple_predicate_func_ignores_arguments():
    predicate = simple_predicate_func(True)
    assert predicate("key", "value") is True

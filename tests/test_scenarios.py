import funcmode
from funcmode import (
    Not,
    Slot,
    all_by_move,
    any_by_move,
    bind_variable,
    filter_by_move,
    find_by_move,
    position_by_move,
    reverse_position_by_move,
)


def is_negative(x):
    return x < 0


def is_positive(x):
    return x > 0


def is_odd(x):
    return x % 2 != 0


MIXED = [-1, -2, 3, -4, 5, -6]


def test_public_exports():
    for name in funcmode.__all__:
        assert hasattr(funcmode, name), name


def test_filter_negatives():
    assert list(filter_by_move(MIXED, is_negative)) == [-1, -2, -4, -6]


def test_find_first_positive():
    assert find_by_move(MIXED, is_positive) == 3


def test_any_and_all():
    assert any_by_move(MIXED, is_negative) is True
    assert all_by_move([1, 2, 3, 4, 5, 6], is_positive) is True


def test_positions():
    assert position_by_move(MIXED, is_positive) == 2
    assert reverse_position_by_move(MIXED, is_positive) == 4


def test_filter_with_inverted_predicate():
    assert list(filter_by_move([1, 2, 3, 4, 5, 6], Not(is_odd))) == [2, 4, 6]


def test_bind_variable_append():
    v = Slot([])
    for x in (1, 2, 3):
        bind_variable(v, "append")(x)
    assert v.get() == [1, 2, 3]


def test_filter_by_move_matches_builtin_filter_for_pure_predicates():
    data = list(range(-20, 20))
    assert list(filter_by_move(data, is_odd)) == list(filter(is_odd, data))
    assert list(filter_by_move(data, Not(is_odd))) == [x for x in data if not is_odd(x)]

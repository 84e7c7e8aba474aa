import copy

import pytest
from funcmode.functional.inverter import Not, NotMut, NotOnce, PredicateConsumedError
from funcmode.functional.iter_move import filter_by_move


def is_odd(val):
    return val % 2 != 0


@pytest.mark.parametrize("value", [-3, 0, 1, 2, 7, 10])
def test_not_inverts_result(value):
    assert Not(is_odd)(value) is (not is_odd(value))


def test_not_filters_evens():
    evens = list(filter(Not(is_odd), [1, 2, 3, 4, 5, 6]))
    assert evens == [2, 4, 6]


def test_not_with_filter_by_move():
    non_empty = list(filter_by_move(["hello", "", "world", "", ""], Not(lambda s: s == "")))
    assert non_empty == ["hello", "world"]


def test_not_is_duplicable():
    even = Not(is_odd)
    duplicate = copy.copy(even)
    deep = copy.deepcopy(even)

    assert duplicate is not even
    assert duplicate.inner is is_odd
    assert [deep(x) for x in range(4)] == [True, False, True, False]


def test_not_rejects_non_callable():
    with pytest.raises(TypeError):
        Not(42)


def test_not_propagates_predicate_errors():
    def broken(_):
        raise KeyError("boom")

    with pytest.raises(KeyError):
        Not(broken)(1)


def test_not_repr():
    assert repr(Not(is_odd)).startswith("Not(<function is_odd")


def test_not_mut_finds_first_repeat():
    seen = set()

    def unique(val):
        fresh = val not in seen
        seen.add(val)
        return fresh

    first_repeat = next(filter(NotMut(unique), [1, 2, 3, 4, 2, 6]), None)

    assert first_repeat == 2
    # Side effect happened once per call, up to and including the match
    assert seen == {1, 2, 3, 4}


def test_not_mut_refuses_duplication():
    with pytest.raises(TypeError):
        copy.copy(NotMut(is_odd))
    with pytest.raises(TypeError):
        copy.deepcopy(NotMut(is_odd))


def test_not_once_consumes_predicate():
    class OddTester:
        def test(self, val):
            return val % 2 != 0

    odd = NotOnce(OddTester().test)
    assert not odd.consumed
    assert odd(5) is False
    assert odd.consumed
    assert odd.inner is None

    assert NotOnce(OddTester().test)(4) is True


def test_not_once_second_call_raises():
    once = NotOnce(is_odd)
    once(1)

    with pytest.raises(PredicateConsumedError):
        once(2)


def test_not_once_refuses_duplication():
    with pytest.raises(TypeError):
        copy.copy(NotOnce(is_odd))

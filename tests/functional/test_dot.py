import pytest
from funcmode.core.enums import PassMode
from funcmode.core.indirection import Slot
from funcmode.functional.dot import (
    Dottable,
    call_with,
    dot,
    dot_deref,
    dot_derefmut,
    dot_ref,
    dot_refmut,
)


def first_half(v):
    return v[: len(v) // 2]


def second_half(v):
    return v[len(v) // 2 :]


def test_dot():
    assert dot("hello", len) == 5


def test_dot_ref_leaves_receiver_unchanged():
    vec = [1, 2, 3, 4, 5]
    assert dot_ref(vec, first_half) == [1, 2]
    assert dot_ref(vec, second_half) == [3, 4, 5]
    assert vec == [1, 2, 3, 4, 5]


def test_dot_refmut():
    vec = [4, 5, 6]

    def first(v):
        return v.pop(0)

    assert dot_refmut(vec, first) == 4
    assert dot_refmut(vec, first) == 5
    assert vec == [6]


def test_dot_deref():
    hello = Slot("hello")
    assert dot_deref(hello, lambda s: s.split("l")[0]) == "he"
    assert dot_deref(hello, lambda s: s.rsplit("l")[-1]) == "o"


def test_dot_derefmut():
    box = Slot([3, 1, 2])
    dot_derefmut(box, list.sort)
    assert box.get() == [1, 2, 3]


def test_dot_deref_requires_indirection():
    with pytest.raises(TypeError):
        dot_deref("hello", len)


@pytest.mark.parametrize(
    "mode, expected",
    [
        (PassMode.VALUE, 1),
        (PassMode.REF, 1),
        ("mut_ref", 1),
        (PassMode.INDIRECT_REF, 3),
        ("indirect_mut_ref", 3),
    ],
)
def test_call_with(mode, expected):
    assert call_with(Slot("abc"), lambda x: len(x) if isinstance(x, str) else 1, mode) == expected


def test_call_with_unknown_mode():
    with pytest.raises(ValueError):
        call_with(1, str, "sideways")


def test_errors_propagate():
    with pytest.raises(ZeroDivisionError):
        dot(1, lambda x: x / 0)


def test_dottable_mixin():
    class Counter(Dottable):
        def __init__(self):
            self.count = 0

    class Holder(Dottable):
        def __init__(self, value):
            self.value = value

        def deref(self):
            return self.value

    counter = Counter()

    def bump(c):
        c.count += 1
        return c.count

    assert counter.dot_refmut(bump) == 1
    assert counter.dot_ref(lambda c: c.count) == 1
    assert counter.dot(type) is Counter
    assert Holder("abc").dot_deref(len) == 3
    assert Holder([1]).dot_derefmut(lambda v: v.append(2) or v) == [1, 2]

import pytest
from hypothesis import given, strategies as st

from pushswap.stacks import OPERATIONS, Stacks


def test_sa_swaps_top_two():
    s = Stacks([1, 2, 3])
    s.sa()
    assert s.a == [2, 1, 3]
    assert s.moves == ["sa"]


def test_sa_on_single_value_is_silent():
    s = Stacks([5])
    s.sa()
    assert s.a == [5]
    assert s.moves == []


def test_sb_swaps_b():
    s = Stacks([], [4, 5])
    s.sb()
    assert s.b == [5, 4]
    assert s.moves == ["sb"]


def test_ss_always_recorded():
    s = Stacks([1], [])
    s.ss()
    assert s.a == [1]
    assert s.moves == ["ss"]


def test_pb_and_pa_move_top():
    s = Stacks([1, 2, 3])
    s.pb()
    s.pb()
    assert s.a == [3]
    assert s.b == [2, 1]
    s.pa()
    assert s.a == [2, 3]
    assert s.b == [1]
    assert s.moves == ["pb", "pb", "pa"]


def test_push_from_empty_does_nothing():
    s = Stacks([], [])
    s.pa()
    s.pb()
    assert s.a == [] and s.b == []
    assert s.moves == []


def test_ra_and_rra():
    s = Stacks([1, 2, 3])
    s.ra()
    assert s.a == [2, 3, 1]
    s.rra()
    s.rra()
    assert s.a == [3, 1, 2]
    assert s.moves == ["ra", "rra", "rra"]


def test_rb_and_rrb():
    s = Stacks([], [7, 8, 9])
    s.rb()
    assert s.b == [8, 9, 7]
    s.rrb()
    assert s.b == [7, 8, 9]
    assert s.moves == ["rb", "rrb"]


def test_rr_requires_both_stacks():
    s = Stacks([1, 2, 3], [4])
    s.rr()
    assert s.a == [1, 2, 3]
    assert s.b == [4]
    assert s.moves == []


def test_rr_rotates_both():
    s = Stacks([1, 2], [3, 4])
    s.rr()
    assert s.a == [2, 1]
    assert s.b == [4, 3]
    assert s.moves == ["rr"]


def test_rrr_always_recorded():
    s = Stacks([1, 2, 3], [])
    s.rrr()
    assert s.a == [3, 1, 2]
    assert s.moves == ["rrr"]


def test_record_off_keeps_moves_empty():
    s = Stacks([2, 1], record=False)
    s.sa()
    assert s.a == [1, 2]
    assert s.moves == []


def test_constructor_copies_input():
    values = [1, 2, 3]
    s = Stacks(values)
    s.ra()
    assert values == [1, 2, 3]


def test_apply_dispatches():
    s = Stacks([1, 2, 3])
    s.apply("pb")
    s.apply("rra")
    assert s.a == [3, 2]
    assert s.b == [1]
    assert s.moves == ["pb", "rra"]


@pytest.mark.parametrize("name", ["", "sa\n", "SA", "rrrr", "push"])
def test_apply_unknown_raises(name):
    with pytest.raises(ValueError):
        Stacks([1, 2]).apply(name)


@given(st.lists(st.integers(), max_size=8))
def test_ra_then_rra_is_identity(values):
    s = Stacks(values)
    s.ra()
    s.rra()
    assert s.a == values


@given(st.lists(st.integers(), max_size=8), st.lists(st.integers(), max_size=8))
def test_pb_then_pa_is_identity(a, b):
    s = Stacks(a, b)
    s.pb()
    s.pa()
    if a:
        assert s.a == a and s.b == b
    else:
        # pb did nothing, pa moved the top of b
        assert s.a == b[:1] and s.b == b[1:]


@given(
    st.lists(st.integers(), max_size=8),
    st.lists(st.integers(), max_size=8),
    st.lists(st.sampled_from(OPERATIONS), max_size=30),
)
def test_values_are_preserved(a, b, ops):
    s = Stacks(a, b)
    for op in ops:
        s.apply(op)
    assert sorted(s.a + s.b) == sorted(a + b)
    assert len(s.moves) <= len(ops)
    assert all(m in ops for m in s.moves)


@given(
    st.lists(st.integers(), max_size=8),
    st.lists(st.sampled_from(OPERATIONS), max_size=30),
)
def test_replaying_moves_gives_same_state(a, ops):
    s = Stacks(a)
    for op in ops:
        s.apply(op)
    replay = Stacks(a)
    for op in s.moves:
        replay.apply(op)
    assert replay.a == s.a
    assert replay.b == s.b
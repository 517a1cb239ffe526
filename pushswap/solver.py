"""The sorting strategy: push values to ``b`` by cheapest cost, then back to ``a``."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Literal

from pushswap.costs import (
    cost_rarb,
    cost_rarb_a,
    cost_rarrb,
    cost_rarrb_a,
    cost_rrarb,
    cost_rrarb_a,
    cost_rrarrb,
    cost_rrarrb_a,
    index_in_a,
    index_in_b,
    min_cost_a_to_b,
    min_cost_b_to_a,
    stack_max,
    stack_min,
    value_index,
)
from pushswap.parsing import has_duplicates, is_sorted
from pushswap.stacks import Stacks

Source = Literal["a", "b"]


def _check_move(stacks: Stacks, value: int, source: str) -> None:
    if source not in ("a", "b"):
        raise ValueError(f"source must be 'a' or 'b', not {source!r}")
    stack = stacks.a if source == "a" else stacks.b
    if value not in stack:
        raise ValueError(f"{value} is not in stack {source}")


def apply_rarb(stacks: Stacks, value: int, source: Source) -> None:
    """Move ``value`` off ``source`` rotating both stacks up (rr, ra, rb)."""
    _check_move(stacks, value, source)
    if source == "a":
        while stacks.a[0] != value and index_in_b(stacks.b, value) > 0:
            stacks.rr()
        while stacks.a[0] != value:
            stacks.ra()
        while index_in_b(stacks.b, value) > 0:
            stacks.rb()
        stacks.pb()
    else:
        while stacks.b[0] != value and index_in_a(stacks.a, value) > 0:
            stacks.rr()
        while stacks.b[0] != value:
            stacks.rb()
        while index_in_a(stacks.a, value) > 0:
            stacks.ra()
        stacks.pa()


def apply_rrarrb(stacks: Stacks, value: int, source: Source) -> None:
    """Move ``value`` off ``source`` rotating both stacks down (rrr, rra, rrb)."""
    _check_move(stacks, value, source)
    if source == "a":
        while stacks.a[0] != value and index_in_b(stacks.b, value) > 0:
            stacks.rrr()
        while stacks.a[0] != value:
            stacks.rra()
        while index_in_b(stacks.b, value) > 0:
            stacks.rrb()
        stacks.pb()
    else:
        while stacks.b[0] != value and index_in_a(stacks.a, value) > 0:
            stacks.rrr()
        while stacks.b[0] != value:
            stacks.rrb()
        while index_in_a(stacks.a, value) > 0:
            stacks.rra()
        stacks.pa()


def apply_rrarb(stacks: Stacks, value: int, source: Source) -> None:
    """Move ``value`` off ``source`` rotating ``a`` down and ``b`` up."""
    _check_move(stacks, value, source)
    if source == "a":
        while stacks.a[0] != value:
            stacks.rra()
        while index_in_b(stacks.b, value) > 0:
            stacks.rb()
        stacks.pb()
    else:
        while index_in_a(stacks.a, value) > 0:
            stacks.rra()
        while stacks.b[0] != value:
            stacks.rb()
        stacks.pa()


def apply_rarrb(stacks: Stacks, value: int, source: Source) -> None:
    """Move ``value`` off ``source`` rotating ``a`` up and ``b`` down."""
    _check_move(stacks, value, source)
    if source == "a":
        while stacks.a[0] != value:
            stacks.ra()
        while index_in_b(stacks.b, value) > 0:
            stacks.rrb()
        stacks.pb()
    else:
        while index_in_a(stacks.a, value) > 0:
            stacks.ra()
        while stacks.b[0] != value:
            stacks.rrb()
        stacks.pa()


_Cost = Callable[[Sequence[int], Sequence[int], int], int]
_Apply = Callable[[Stacks, int, Source], None]

_A_TO_B: tuple[tuple[_Cost, _Apply], ...] = (
    (cost_rarb, apply_rarb),
    (cost_rrarrb, apply_rrarrb),
    (cost_rarrb, apply_rarrb),
    (cost_rrarb, apply_rrarb),
)

_B_TO_A: tuple[tuple[_Cost, _Apply], ...] = (
    (cost_rarb_a, apply_rarb),
    (cost_rarrb_a, apply_rarrb),
    (cost_rrarrb_a, apply_rrarrb),
    (cost_rrarb_a, apply_rrarb),
)


def apply_strategy(stacks: Stacks, cost: int, value: int) -> bool:
    """Push ``value`` from ``a`` to ``b`` with the first strategy costing ``cost``.

    Return True if a strategy matched and was applied, False otherwise.
    """
    for cost_of, apply in _A_TO_B:
        if cost == cost_of(stacks.a, stacks.b, value):
            apply(stacks, value, "a")
            return True
    return False


def sort_three(stacks: Stacks) -> None:
    """Sort an unsorted stack ``a`` of three values in place."""
    a = stacks.a
    if stack_min(a) == a[0]:
        stacks.rra()
        stacks.sa()
    elif stack_max(a) == a[0]:
        stacks.ra()
        if not is_sorted(stacks.a):
            stacks.sa()
    elif value_index(a, stack_max(a)) == 1:
        stacks.rra()
    else:
        stacks.sa()


def push_to_b(stacks: Stacks) -> None:
    """Push the cheapest values onto ``b`` until ``a`` holds three or is sorted."""
    while len(stacks.a) > 3 and not is_sorted(stacks.a):
        best = min_cost_a_to_b(stacks.a, stacks.b)
        if not any(apply_strategy(stacks, best, value) for value in list(stacks.a)):
            raise RuntimeError("no strategy matches the cheapest cost")


def create_stack_b(stacks: Stacks) -> None:
    """Fill ``b`` from ``a`` and leave the remaining values of ``a`` sorted."""
    for _ in range(2):
        if len(stacks.a) > 3 and not is_sorted(stacks.a):
            stacks.pb()
    if len(stacks.a) > 3 and not is_sorted(stacks.a):
        push_to_b(stacks)
    if not is_sorted(stacks.a):
        sort_three(stacks)


def _move_cheapest_to_a(stacks: Stacks) -> None:
    best = min_cost_b_to_a(stacks.a, stacks.b)
    for value in list(stacks.b):
        for cost_of, apply in _B_TO_A:
            if best == cost_of(stacks.a, stacks.b, value):
                apply(stacks, value, "b")
                return
    raise RuntimeError("no strategy matches the cheapest cost")


def sort_back_to_a(stacks: Stacks) -> None:
    """Insert every value of ``b`` into its place in ``a``, cheapest first."""
    while stacks.b:
        _move_cheapest_to_a(stacks)


def push_swap(stacks: Stacks) -> None:
    """Sort stack ``a`` in place, using ``b`` as scratch space."""
    if not stacks.a:
        raise ValueError("stack a is empty")
    stacks.b = []
    if len(stacks.a) == 2:
        stacks.sa()
        return
    create_stack_b(stacks)
    sort_back_to_a(stacks)
    smallest = stack_min(stacks.a)
    position = value_index(stacks.a, smallest)
    rotate = stacks.ra if position < len(stacks.a) - position else stacks.rra
    while stacks.a[0] != smallest:
        rotate()


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values`` (top first) into ascending order."""
    start = list(values)
    if has_duplicates(start):
        raise ValueError("duplicate values")
    stacks = Stacks(a=start)
    if not is_sorted(start):
        push_swap(stacks)
    return stacks.moves
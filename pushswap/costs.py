"""Insertion positions and rotation costs that steer the solver.

Stacks are sequences listed from top to bottom.  Costs count the
rotations needed before a push, under one of four strategies: rotating
both stacks up (``rarb``), both down (``rrarrb``), or one up and one
down (``rarrb`` and ``rrarb``).  The plain ``cost_*`` functions price a
push from ``a`` to ``b``; the ``cost_*_a`` functions price a push from
``b`` back to ``a``.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

INT_MIN = -(2**31)


def value_index(stack: Sequence[int], value: int) -> int:
    """Return the position of ``value`` from the top, or -1 if absent."""
    for position, item in enumerate(stack):
        if item == value:
            return position
    return -1


def stack_min(stack: Sequence[int]) -> int:
    """Return the smallest value, or 0 for an empty stack."""
    return min(stack, default=0)


def stack_max(stack: Sequence[int]) -> int:
    """Return the largest value, or INT_MIN for an empty stack."""
    return max(stack, default=INT_MIN)


def index_in_b(b: Sequence[int], value: int) -> int:
    """Return how far ``b`` must rotate up before ``value`` is pushed onto it.

    Stack ``b`` is kept in descending order, possibly rotated.
    """
    if len(b) < 2:
        return 0
    if value > stack_max(b) or value < stack_min(b):
        return value_index(b, stack_max(b))
    for position, (upper, lower) in enumerate(pairwise(b)):
        if upper > value > lower:
            return position + 1
    return 0


def index_in_a(a: Sequence[int], value: int) -> int:
    """Return how far ``a`` must rotate up before ``value`` is pushed onto it.

    Stack ``a`` is kept in ascending order, possibly rotated.
    """
    if not a:
        raise ValueError("stack a is empty")
    if a[0] > value > a[-1]:
        return 0
    if value < stack_min(a) or value > stack_max(a):
        return value_index(a, stack_min(a))
    for position, (upper, lower) in enumerate(pairwise(a)):
        if upper < value < lower:
            return position + 1
    return 0


def cost_rarb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Cost of moving ``value`` from ``a`` to ``b`` with ra and rb."""
    return max(index_in_b(b, value), value_index(a, value))


def cost_rrarrb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Cost of moving ``value`` from ``a`` to ``b`` with rra and rrb."""
    if not a or not b:
        return 0
    target_b = index_in_b(b, value)
    position_a = value_index(a, value)
    rotations_b = len(b) - target_b if target_b > 0 else 0
    rotations_a = len(a) - position_a if position_a > 0 else 0
    return max(rotations_a, rotations_b)


def cost_rarrb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Cost of moving ``value`` from ``a`` to ``b`` with ra and rrb."""
    target_b = index_in_b(b, value)
    rotations_b = len(b) - target_b if target_b else 0
    return value_index(a, value) + rotations_b


def cost_rrarb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Cost of moving ``value`` from ``a`` to ``b`` with rra and rb."""
    position_a = value_index(a, value)
    rotations_a = len(a) - position_a if position_a else 0
    return index_in_b(b, value) + rotations_a


def cost_rarb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Cost of moving ``value`` from ``b`` to ``a`` with ra and rb."""
    return max(index_in_a(a, value), value_index(b, value))


def cost_rrarrb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Cost of moving ``value`` from ``b`` to ``a`` with rra and rrb."""
    rotations_a = len(a) - index_in_a(a, value)
    rotations_b = len(b) - value_index(b, value)
    return max(rotations_a, rotations_b)


def cost_rarrb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Cost of moving ``value`` from ``b`` to ``a`` with ra and rrb."""
    position_b = value_index(b, value)
    rotations_b = 0 if position_b == 0 else len(b) - position_b
    return index_in_a(a, value) + rotations_b


def cost_rrarb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Cost of moving ``value`` from ``b`` to ``a`` with rra and rb."""
    return len(a) - index_in_a(a, value) + value_index(b, value)


def min_cost_a_to_b(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the cheapest cost of pushing any value of ``a`` onto ``b``."""
    if not a:
        raise ValueError("stack a is empty")
    return min(
        cost(a, b, value)
        for value in a
        for cost in (cost_rarb, cost_rrarrb, cost_rarrb, cost_rrarb)
    )


def min_cost_b_to_a(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the cheapest cost of pushing any value of ``b`` onto ``a``."""
    if not b:
        raise ValueError("stack b is empty")
    return min(
        cost(a, b, value)
        for value in b
        for cost in (cost_rarb_a, cost_rrarrb_a, cost_rarrb_a, cost_rrarb_a)
    )
"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from dataclasses import dataclass, field

OPERATIONS: tuple[str, ...] = (
    "sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr",
)


def _swap(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.append(stack.pop(0))
    return True


def _reverse_rotate(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.insert(0, stack.pop())
    return True


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, each listed from top to bottom.

    Every operation that takes effect is appended to ``moves`` when
    ``record`` is true.  ``ss`` and ``rrr`` are always recorded, while
    ``rr`` does nothing at all unless both stacks hold at least two values.
    """

    a: list[int] = field(default_factory=list)
    b: list[int] = field(default_factory=list)
    record: bool = True
    moves: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.a = list(self.a)
        self.b = list(self.b)
        self.moves = list(self.moves)

    def _emit(self, name: str) -> None:
        if self.record:
            self.moves.append(name)

    def sa(self) -> None:
        """Swap the top two values of ``a``."""
        if _swap(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the top two values of ``b``."""
        if _swap(self.b):
            self._emit("sb")

    def ss(self) -> None:
        """Swap the top two values of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self._emit("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: the top value goes to the bottom."""
        if _rotate(self.a):
            self._emit("ra")

    def rb(self) -> None:
        """Rotate ``b`` up: the top value goes to the bottom."""
        if _rotate(self.b):
            self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks up, only when both hold two or more values."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        _rotate(self.a)
        _rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Rotate ``a`` down: the bottom value comes to the top."""
        if _reverse_rotate(self.a):
            self._emit("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: the bottom value comes to the top."""
        if _reverse_rotate(self.b):
            self._emit("rrb")

    def rrr(self) -> None:
        """Rotate both stacks down."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._emit("rrr")

    def apply(self, name: str) -> None:
        """Perform the operation called ``name``; raise ValueError if unknown."""
        if name not in OPERATIONS:
            raise ValueError(f"unknown operation: {name!r}")
        getattr(self, name)()
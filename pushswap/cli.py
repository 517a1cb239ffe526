"""Command-line entry points: the sorter and the checker."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import ParseError, has_duplicates, is_sorted, parse_args
from pushswap.solver import solve
from pushswap.stacks import OPERATIONS, Stacks

_LABEL_A = '\nprinting "STACK A" should give values sorted:\n'
_LABEL_B = '\nprinting "STACK B" should be empty with no values:'


def _error() -> int:
    sys.stderr.write("Error\n")
    return 1


def format_stack(values: Iterable[int], label: str) -> str:
    """Render ``label`` followed by each value and a space, then a newline."""
    return label + "".join(f"{value} " for value in values) + "\n"


def run_checker(stacks: Stacks, lines: Iterable[str]) -> str:
    """Apply newline-terminated instructions and return ``"OK"`` or ``"KO"``.

    Blank lines are skipped. Any other line must be an operation name
    followed by a newline, otherwise ValueError is raised.
    """
    for line in lines:
        if line.startswith("\n"):
            continue
        name = line[:-1] if line.endswith("\n") else None
        if name not in OPERATIONS:
            raise ValueError(f"invalid instruction: {line!r}")
        stacks.apply(name)
    if stacks.b or not is_sorted(stacks.a):
        return "KO"
    return "OK"


def _read_stack(args: Sequence[str]) -> list[int] | None:
    if not args:
        return None
    try:
        values = parse_args(args)
    except ParseError:
        return None
    if has_duplicates(values):
        return None
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    values = _read_stack(args)
    if values is None:
        return _error()
    sys.stdout.write("".join(f"{move}\n" for move in solve(values)))
    return 0


def checker_main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and report whether they sort the arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    values = _read_stack(args)
    if values is None:
        return _error()
    stacks = Stacks(a=values, record=False)
    try:
        verdict = run_checker(stacks, sys.stdin)
    except ValueError:
        return _error()
    sys.stdout.write(f"{verdict}\n")
    sys.stdout.write(format_stack(stacks.a, _LABEL_A))
    sys.stdout.write(format_stack(stacks.b, _LABEL_B))
    return 0


if __name__ == "__main__":
    sys.exit(main())
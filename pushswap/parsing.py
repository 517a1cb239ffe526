"""Reading the starting stack from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def parse_int(text: str) -> int:
    """Read a whole 32-bit signed integer from ``text``.

    Leading whitespace and one sign are allowed. Everything after them
    must be decimal digits, and the value must fit in a C ``int``.
    """
    if not text:
        raise ParseError("empty number")
    body = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not body or not set(body) <= _DIGITS:
        raise ParseError(f"not an integer: {text!r}")
    value = sign * int(body)
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"integer out of range: {text!r}")
    return value


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    return [word for word in text.split(sep) if word]


def parse_args(args: Sequence[str]) -> list[int]:
    """Build stack ``a``, top first, from the program's arguments.

    A single argument holds space-separated numbers; several arguments
    hold one number each.
    """
    if not args:
        raise ParseError("no arguments")
    if len(args) == 1:
        (only,) = args
        if not only:
            raise ParseError("empty argument")
        words = split_words(only, " ")
        if not words:
            raise ParseError("no numbers in argument")
        return [parse_int(word) for word in words]
    return [parse_int(arg) for arg in args]


def has_duplicates(values: Iterable[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether the values never decrease from top to bottom."""
    return all(first <= second for first, second in zip(values, values[1:]))
import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    ParseError,
    has_duplicates,
    is_sorted,
    parse_args,
    parse_int,
    split_words,
)

ints32 = st.integers(min_value=INT_MIN, max_value=INT_MAX)


@given(ints32)
def test_parse_int_round_trip(n):
    assert parse_int(str(n)) == n


@given(st.integers(min_value=0, max_value=INT_MAX))
def test_parse_int_accepts_plus_sign(n):
    assert parse_int("+" + str(n)) == n


def test_parse_int_limits():
    assert parse_int("2147483647") == INT_MAX
    assert parse_int("-2147483648") == INT_MIN


def test_parse_int_leading_whitespace():
    assert parse_int(" \t\n42") == 42


def test_parse_int_negative_zero():
    assert parse_int("-0") == 0


@pytest.mark.parametrize(
    "text",
    ["", "+", "-", "abc", "12a", "1 ", "--1", "+-1", "1.5", " ", "2147483648",
     "-2147483649", "99999999999999999999", "\u0663"],
)
def test_parse_int_rejects(text):
    with pytest.raises(ParseError):
        parse_int(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


@given(st.lists(st.text(alphabet="abc12", min_size=1), max_size=8))
def test_split_words_round_trip(words):
    assert split_words("  ".join(words), " ") == words


def test_split_words_drops_empty_pieces():
    assert split_words("  1  2 3  ", " ") == ["1", "2", "3"]
    assert split_words("   ", " ") == []


def test_parse_args_single_string():
    assert parse_args(["3 2   1"]) == [3, 2, 1]


def test_parse_args_many_arguments():
    assert parse_args(["3", "-2", "+1"]) == [3, -2, 1]


def test_parse_args_many_arguments_not_split():
    with pytest.raises(ParseError):
        parse_args(["1 2", "3"])


@given(st.lists(ints32, min_size=2, max_size=10))
def test_parse_args_forms_agree(values):
    as_args = parse_args([str(v) for v in values])
    as_one = parse_args([" ".join(str(v) for v in values)])
    assert as_args == as_one == values


@pytest.mark.parametrize("args", [[], [""], ["   "], ["1 x"], ["1", ""]])
def test_parse_args_rejects(args):
    with pytest.raises(ParseError):
        parse_args(args)


def test_has_duplicates():
    assert has_duplicates([1, 2, 1]) is True
    assert has_duplicates([1, 2, 3]) is False
    assert has_duplicates([]) is False


@given(st.lists(ints32))
def test_has_duplicates_matches_set(values):
    assert has_duplicates(values) == (len(set(values)) != len(values))


def test_is_sorted():
    assert is_sorted([]) is True
    assert is_sorted([5]) is True
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([1, 1, 2]) is True
    assert is_sorted([2, 1, 3]) is False


@given(st.lists(ints32))
def test_is_sorted_invariant(values):
    assert is_sorted(sorted(values)) is True
    assert is_sorted(values) == (values == sorted(values))
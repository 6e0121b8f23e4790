"""Tests for range specification parsing and traversal."""

import itertools

import pytest

from rangecut.errors import (
    EmptyRangeListError,
    InvalidDigitError,
    MalformedRangeError,
    RangeError,
    ZeroIndexError,
)
from rangecut.ranges import RangeIterator, RangeSpec, iter_positions, parse_ranges, parse_token


class TestParseToken:
    """Test single token parsing."""

    def test_single_number(self):
        """Test "N" becomes (N-1, N-1)."""
        for n in (1, 2, 5, 10, 999):
            assert parse_token(str(n)) == RangeSpec(n - 1, n - 1)

    def test_range(self):
        """Test "A-B" becomes (A-1, B-1) for every ordering of A and B."""
        assert parse_token("1-3") == RangeSpec(0, 2)
        assert parse_token("4-4") == RangeSpec(3, 3)
        assert parse_token("10-2") == RangeSpec(9, 1)

    def test_descending_range_is_valid(self):
        spec = parse_token("2-1")
        assert spec == (1, 0)
        assert spec.is_descending

    def test_leading_plus(self):
        assert parse_token("+1") == RangeSpec(0, 0)
        assert parse_token("+1-2") == RangeSpec(0, 1)
        assert parse_token("1-+2") == RangeSpec(0, 1)

    def test_leading_zeros(self):
        assert parse_token("01") == RangeSpec(0, 0)
        assert parse_token("0001-03") == RangeSpec(0, 2)

    @pytest.mark.parametrize("token", ["0", "0-1", "10-0", "+0", "000"])
    def test_zero_rejected(self, token):
        with pytest.raises(ZeroIndexError, match="number would be zero for non-zero type"):
            parse_token(token)

    @pytest.mark.parametrize("token", ["a", "1-a", "a-1", "1.5", "+", "++1", "1 ", "1_0", "٣"])
    def test_invalid_digit(self, token):
        with pytest.raises(InvalidDigitError, match="invalid digit found in string"):
            parse_token(token)

    @pytest.mark.parametrize("token", ["", "-", "1-", "-1"])
    def test_empty_part(self, token):
        with pytest.raises(InvalidDigitError, match="cannot parse integer from empty string"):
            parse_token(token)

    def test_too_many_parts(self):
        with pytest.raises(MalformedRangeError) as exc_info:
            parse_token("1-1-1")
        assert str(exc_info.value) == "Invalid range '1-1-1' - wrong number of range parts 3"
        assert exc_info.value.part_count == 3

    def test_bad_digit_reported_before_part_count(self):
        with pytest.raises(InvalidDigitError):
            parse_token("1-1-a")

    def test_error_carries_token(self):
        with pytest.raises(InvalidDigitError) as exc_info:
            parse_token("1-a")
        assert exc_info.value.token == "1-a"
        assert exc_info.value.part == "a"
        assert str(exc_info.value) == "Invalid range '1-a' - invalid digit found in string"


class TestParseRanges:
    """Test comma separated specification parsing."""

    def test_empty_spec(self):
        with pytest.raises(EmptyRangeListError):
            parse_ranges("")
        with pytest.raises(EmptyRangeListError):
            parse_ranges("   ")

    def test_single(self):
        assert parse_ranges("1") == (RangeSpec(0, 0),)

    def test_list(self):
        assert parse_ranges("1,3") == ((0, 0), (2, 2))
        assert parse_ranges("001,0003") == ((0, 0), (2, 2))
        assert parse_ranges("15,19-20") == ((14, 14), (18, 19))
        assert parse_ranges("1,7,3-5") == ((0, 0), (6, 6), (2, 4))

    def test_order_and_repeats_kept(self):
        """Test no sorting and no de-duplication."""
        assert parse_ranges("3,1,3") == ((2, 2), (0, 0), (2, 2))
        assert parse_ranges("2-1,1-2") == ((1, 0), (0, 1))

    def test_whitespace_around_tokens(self):
        assert parse_ranges(" 1 , 3-4 ") == ((0, 0), (2, 3))

    def test_whitespace_inside_token(self):
        with pytest.raises(InvalidDigitError):
            parse_ranges("1 - 4")

    def test_first_error_wins(self):
        with pytest.raises(ZeroIndexError) as exc_info:
            parse_ranges("1,0,a")
        assert exc_info.value.token == "0"

        with pytest.raises(InvalidDigitError) as exc_info:
            parse_ranges("1,a")
        assert str(exc_info.value) == "Invalid range 'a' - invalid digit found in string"

    @pytest.mark.parametrize("spec", [",", "1,", ",1", "1,,2"])
    def test_empty_token(self, spec):
        with pytest.raises(InvalidDigitError) as exc_info:
            parse_ranges(spec)
        assert str(exc_info.value) == "Invalid range '' - cannot parse integer from empty string"

    def test_all_errors_are_value_errors(self):
        for spec in ["", "0", "a", "1-2-3"]:
            with pytest.raises(RangeError):
                parse_ranges(spec)
            with pytest.raises(ValueError):
                parse_ranges(spec)

    def test_result_is_immutable(self):
        ranges = parse_ranges("1,2")
        assert isinstance(ranges, tuple)
        with pytest.raises(AttributeError):
            ranges[0].start = 5


class TestRangeSpec:
    """Test RangeSpec helpers."""

    def test_size(self):
        assert RangeSpec(0, 0).size == 1
        assert RangeSpec(2, 5).size == 4
        assert RangeSpec(5, 2).size == 4

    def test_is_descending(self):
        assert not RangeSpec(0, 0).is_descending
        assert not RangeSpec(0, 3).is_descending
        assert RangeSpec(3, 0).is_descending


class TestRangeIterator:
    """Test lazy position traversal."""

    def test_single_position(self):
        assert list(iter_positions([(4, 4)])) == [4]

    def test_ascending(self):
        assert list(iter_positions([(0, 3)])) == [0, 1, 2, 3]

    def test_descending(self):
        assert list(iter_positions([(3, 0)])) == [3, 2, 1, 0]

    def test_descending_to_zero_stops(self):
        assert list(iter_positions([(1, 0)])) == [1, 0]

    def test_range_list_order(self):
        ranges = [(5, 5), (1, 3), (3, 1)]
        assert list(iter_positions(ranges)) == [5, 1, 2, 3, 3, 2, 1]

    def test_empty_list(self):
        assert list(iter_positions([])) == []

    def test_descending_property(self):
        """Test (a, b) with a > b yields a, a-1, ..., b exactly once each."""
        for a, b in itertools.combinations(range(12), 2):
            start, end = b, a
            assert list(iter_positions([(start, end)])) == list(range(start, end - 1, -1))

    def test_count_property(self):
        """Test (a, b) yields |a - b| + 1 positions."""
        for a, b in itertools.product(range(8), repeat=2):
            positions = list(iter_positions([RangeSpec(a, b)]))
            assert len(positions) == RangeSpec(a, b).size
            assert positions[0] == a
            assert positions[-1] == b

    def test_lazy_on_huge_range(self):
        it = iter_positions(parse_ranges("1-1000000000000"))
        assert list(itertools.islice(it, 3)) == [0, 1, 2]

        it = iter_positions(parse_ranges("1000000000000-1"))
        assert next(it) == 999999999999
        assert next(it) == 999999999998

    def test_stays_exhausted(self):
        it = RangeIterator([(0, 0)])
        assert next(it) == 0
        with pytest.raises(StopIteration):
            next(it)
        with pytest.raises(StopIteration):
            next(it)

    def test_fresh_iterator_per_call(self):
        ranges = parse_ranges("1-3")
        first = iter_positions(ranges)
        next(first)
        assert list(iter_positions(ranges)) == [0, 1, 2]
        assert list(first) == [1, 2]

    def test_is_its_own_iterator(self):
        it = iter_positions([(0, 1)])
        assert iter(it) is it

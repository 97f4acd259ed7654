import pytest

from rollcount.planning.errors import LengthMismatchError, RangeMappingError
from rollcount.planning.gaps import compute_gaps
from rollcount.planning.spans import Span


def test_gaps_over_whole_sequence():
    assert compute_gaps([32, 152, 68, 8], [3, 12, 32, 15]) == [-29, -140, -36, 7]


def test_gaps_over_sub_range():
    assert compute_gaps([1, 2, 3, 4], [5, 5, 5, 5], Span(1, 3)) == [3, 2]


def test_empty_sub_range_at_the_end_is_valid():
    assert compute_gaps([1, 2], [3, 4], Span(2, 2)) == []


def test_length_mismatch_fails():
    with pytest.raises(LengthMismatchError) as excinfo:
        compute_gaps([1], [2, 3])
    assert excinfo.value.current_len == 1
    assert excinfo.value.target_len == 2


def test_sub_range_beyond_bounds_fails():
    with pytest.raises(RangeMappingError):
        compute_gaps([1, 2], [3, 4], Span(1, 3))
    with pytest.raises(RangeMappingError):
        compute_gaps([1, 2], [3, 4], Span(3, 3))


def test_inputs_are_left_untouched():
    current = [1, 2]
    target = [4, 4]
    compute_gaps(current, target)
    assert current == [1, 2] and target == [4, 4]

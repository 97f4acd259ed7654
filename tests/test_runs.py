import random

import pytest

from rollcount.planning.errors import LengthMismatchError
from rollcount.planning.gaps import compute_gaps
from rollcount.planning.runs import RunOption, find_runs
from rollcount.planning.spans import Span

CURRENT = [1, 23, 53, 123, 412, 8, 231, 23, 1234, 43, 1, 3]
TARGET = [42, 321, 53, 532, 12, 8, 2123, 2, 12341, 653, 1, 4]


def _as_pairs(runs):
    return [((run.start, run.stop), run.delta) for run in runs]


def test_negative_run_uses_gap_closest_to_zero():
    runs = find_runs([32, 152, 68, 8], [3, 12, 32, 15])
    assert runs == [RunOption(Span(0, 3), -29), RunOption(Span(3, 4), 7)]


def test_reference_sequence_runs():
    assert _as_pairs(find_runs(CURRENT, TARGET)) == [
        ((0, 2), 41),
        ((3, 4), 409),
        ((4, 5), -400),
        ((6, 7), 1892),
        ((7, 8), -21),
        ((8, 10), 610),
        ((11, 12), 1),
    ]


def test_converged_sequences_have_no_runs():
    assert find_runs([5, 6, 7], [5, 6, 7]) == []
    assert find_runs([], []) == []


def test_single_position_run_moves_by_its_own_gap():
    assert find_runs([0, 0, 0], [0, -4, 0]) == [RunOption(Span(1, 2), -4)]


def test_sign_flip_starts_next_run_even_with_equal_magnitude():
    runs = find_runs([0, 0, 0], [3, -3, -3])
    assert runs == [RunOption(Span(0, 1), 3), RunOption(Span(1, 3), -3)]


def test_flip_on_last_index_keeps_end_exclusive():
    runs = find_runs([0, 0, 0], [2, 5, -1])
    assert runs == [RunOption(Span(0, 2), 2), RunOption(Span(2, 3), -1)]


def test_float_gaps_within_epsilon_are_converged():
    assert find_runs([1.0, 2.0, 3.0], [1.00001, 1.99995, 3.00009]) == []


def test_tiny_opposite_float_gaps_do_not_merge():
    runs = find_runs([0.0, 0.0], [0.0002, -0.0002])
    assert [(run.start, run.stop) for run in runs] == [(0, 1), (1, 2)]


def test_length_mismatch_propagates():
    with pytest.raises(LengthMismatchError):
        find_runs([1, 2], [1])


def test_runs_are_maximal_ordered_and_never_overshoot():
    rng = random.Random(1234)
    for _ in range(200):
        size = rng.randint(0, 12)
        current = [rng.randint(-20, 20) for _ in range(size)]
        target = [rng.randint(-20, 20) for _ in range(size)]
        gaps = compute_gaps(current, target)
        runs = find_runs(current, target)

        covered = [i for run in runs for i in run.span.indices()]
        assert covered == [i for i, g in enumerate(gaps) if g != 0]
        for run in runs:
            members = gaps[run.start:run.stop]
            assert all(g * run.delta > 0 for g in members)
            assert all(abs(run.delta) <= abs(g) for g in members)
            assert run.delta in members
        for left, right in zip(runs, runs[1:]):
            if left.stop == right.start:
                # Adjacent runs only exist across a sign flip.
                assert left.delta * right.delta < 0

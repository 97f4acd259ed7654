from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence

from rollcount.planning.gaps import compute_gaps
from rollcount.planning.numeric import Arithmetic, arithmetic_for
from rollcount.planning.spans import Span


@dataclass(frozen=True, slots=True)
class RunOption:
    """A maximal same-signed run of gaps and the amount it can safely move by."""

    span: Span
    delta: Any

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def stop(self) -> int:
        return self.span.stop

    def __len__(self) -> int:
        return len(self.span)


def find_runs(
    current: Sequence[Any],
    target: Sequence[Any],
    arithmetic: Arithmetic | None = None,
) -> List[RunOption]:
    """Partition the gaps between ``current`` and ``target`` into runs.

    Zero gaps separate runs, and so does a sign flip: the flipping position
    opens the next run instead of joining the previous one. Each run's delta
    is its gap closest to zero, so applying it never overshoots any member.
    """
    gaps = compute_gaps(current, target)
    arith = arithmetic or arithmetic_for(current, target)
    indices = range(len(current))
    if len(gaps) != len(indices):
        raise RuntimeError(
            f"find_runs computed {len(gaps)} gaps for {len(indices)} positions"
        )

    runs: List[RunOption] = []
    start: int | None = None
    acc: Any = None
    for i, gap in zip(indices, gaps):
        if arith.is_zero(gap):
            if start is not None:
                runs.append(RunOption(Span(start, i), acc))
            start, acc = None, None
        elif start is None:
            start, acc = i, gap
        elif not arith.same_sign(acc, gap):
            runs.append(RunOption(Span(start, i), acc))
            start, acc = i, gap
        else:
            acc = arith.closest_to_zero(acc, gap)
    if start is not None:
        runs.append(RunOption(Span(start, len(gaps)), acc))
    return runs

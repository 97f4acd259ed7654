from __future__ import annotations

from typing import Any, List, Sequence

from rollcount.planning.errors import LengthMismatchError
from rollcount.planning.spans import Span, map_span


def compute_gaps(current: Sequence[Any], target: Sequence[Any], span: Span | None = None) -> List[Any]:
    """Return ``target[i] - current[i]`` for every index of ``span`` in order.

    ``span`` defaults to the whole sequence and is expressed over ``current``;
    it must also resolve against ``target``'s bounds.
    """
    if len(current) != len(target):
        raise LengthMismatchError(len(current), len(target))
    bounds = Span.of(current)
    own = span if span is not None else bounds
    # Raises RangeMappingError when either side cannot address the span.
    other = map_span(own, bounds, Span.of(target))
    return [target[j] - current[i] for i, j in zip(own.indices(), other.indices())]

from __future__ import annotations

from typing import Any, Sequence, Tuple

from rollcount.planning.errors import RangeOutOfBoundsError
from rollcount.planning.spans import Span


def apply_delta(values: Sequence[Any], delta: Any, span: Span) -> Tuple[Any, ...]:
    """Return a copy of ``values`` with ``delta`` added inside ``span``."""
    if not span.within(Span.of(values)):
        raise RangeOutOfBoundsError(f"{span!r} is outside a sequence of length {len(values)}")
    return tuple(
        value + delta if span.contains(i) else value
        for i, value in enumerate(values)
    )

from __future__ import annotations

from dataclasses import dataclass
from typing import Sized

from rollcount.planning.errors import RangeMappingError


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open index range ``[start, stop)``."""

    start: int
    stop: int

    def __post_init__(self) -> None:
        if self.stop < self.start:
            raise ValueError(f"Span stop {self.stop} precedes start {self.start}")

    @classmethod
    def of(cls, sized: Sized) -> "Span":
        return cls(0, len(sized))

    def __len__(self) -> int:
        return self.stop - self.start

    def indices(self) -> range:
        return range(self.start, self.stop)

    def contains(self, index: int) -> bool:
        return self.start <= index < self.stop

    def within(self, bounds: "Span") -> bool:
        return bounds.start <= self.start and self.stop <= bounds.stop

    def __repr__(self) -> str:
        return f"Span({self.start}, {self.stop})"


def map_span(span: Span, source: Span, other: Span) -> Span:
    """Return the positions in ``other`` matching ``span`` taken over ``source``.

    Both start and stop keep their offset from the start of their bounds. An
    empty span still has to land on positions both bounds can address, so
    ``Span(0, 0)`` cannot be mapped out of ``Span(50, 1000)``.
    """
    if not span.within(source):
        raise RangeMappingError(f"{span!r} lies outside source bounds {source!r}")
    offset = span.start - source.start
    mapped = Span(other.start + offset, other.start + offset + len(span))
    if mapped.stop > other.stop:
        raise RangeMappingError(f"{span!r} maps to {mapped!r}, beyond {other!r}")
    return mapped

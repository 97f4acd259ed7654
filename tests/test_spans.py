import pytest

from rollcount.planning.errors import RangeMappingError
from rollcount.planning.spans import Span, map_span

RANGE_A = Span(0, 100)
RANGE_B = Span(50, 1000)
RANGE_C = Span(-99, -60)
RANGE_D = Span(0, 0)


@pytest.mark.parametrize(
    "source, other, span",
    [
        (RANGE_A, RANGE_B, Span(1000, 1001)),  # outside both bounds
        (RANGE_A, RANGE_C, Span(-9, 20)),      # starts before source
        (RANGE_A, RANGE_C, Span(87, 90)),      # maps past the other bounds
        (RANGE_B, RANGE_B, Span(0, 0)),        # empty, yet outside both bounds
    ],
)
def test_unmappable_spans_fail(source, other, span):
    with pytest.raises(RangeMappingError):
        map_span(span, source, other)


def test_span_inside_both_bounds_keeps_offsets():
    assert map_span(Span(23, 30), RANGE_A, RANGE_C) == Span(-76, -69)


def test_empty_spans_resolve_when_addressable():
    assert map_span(Span(0, 0), RANGE_D, RANGE_D) == Span(0, 0)
    assert map_span(Span(150, 150), RANGE_B, RANGE_B) == Span(150, 150)


def test_span_basics():
    span = Span(2, 5)
    assert len(span) == 3
    assert list(span.indices()) == [2, 3, 4]
    assert span.contains(2) and not span.contains(5)
    assert span.within(Span(0, 5))
    assert not span.within(Span(3, 10))
    assert Span.of([7, 8, 9]) == Span(0, 3)


def test_reversed_span_is_rejected():
    with pytest.raises(ValueError):
        Span(4, 2)

"""Comparison strategies for the element types a plan can be built over.

Values always use their own ``+``, ``-`` and ``*``; only zero tests and
ordering go through an :class:`Arithmetic` so that floating point drift is
never mistaken for a genuine remaining gap.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from rollcount.constants import FLOAT_EPSILON
from rollcount.planning.errors import NonFiniteValueError


class Arithmetic:
    """Order and zero semantics shared by every planning step."""

    def is_zero(self, value: Any) -> bool:
        raise NotImplementedError

    def sign(self, value: Any) -> int:
        raise NotImplementedError

    def zero(self, sample: Any) -> Any:
        return sample - sample

    def less(self, a: Any, b: Any) -> bool:
        return self.sign(a - b) < 0

    def greater(self, a: Any, b: Any) -> bool:
        return self.sign(a - b) > 0

    def equal(self, a: Any, b: Any) -> bool:
        return self.is_zero(a - b)

    def same_sign(self, a: Any, b: Any) -> bool:
        return self.sign(a) * self.sign(b) > 0

    def closest_to_zero(self, a: Any, b: Any) -> Any:
        """Return whichever of two same-signed values lies nearer zero."""
        # Raw min/max: a tolerant tie must not pick the larger magnitude.
        if self.sign(b) > 0:
            return min(a, b)
        return max(a, b)

    def sequences_equal(self, a: Sequence[Any], b: Sequence[Any]) -> bool:
        if len(a) != len(b):
            return False
        return all(self.equal(x, y) for x, y in zip(a, b))


@dataclass(frozen=True, slots=True)
class ExactArithmetic(Arithmetic):
    """Direct comparison, for integers and other exact numeric types."""

    def is_zero(self, value: Any) -> bool:
        return value == 0

    def sign(self, value: Any) -> int:
        if value > 0:
            return 1
        if value < 0:
            return -1
        return 0


@dataclass(frozen=True, slots=True)
class TolerantArithmetic(Arithmetic):
    """Epsilon deadband comparison for floating point values."""

    epsilon: float = FLOAT_EPSILON

    def __post_init__(self) -> None:
        if not self.epsilon > 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon!r}")

    def is_zero(self, value: Any) -> bool:
        return abs(value) <= self.epsilon

    def sign(self, value: Any) -> int:
        if value > self.epsilon:
            return 1
        if value < -self.epsilon:
            return -1
        return 0


EXACT = ExactArithmetic()


def _is_inexact(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        raise TypeError(f"Unsupported element type {type(value).__name__!s} for planning")
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        raise TypeError("Complex values have no ordering")
    if isinstance(value, numbers.Rational):
        return False
    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            raise NonFiniteValueError(value)
        return True
    # Decimal registers as a Number but not a Real; it is exact.
    is_finite = getattr(value, "is_finite", None)
    if is_finite is not None and not is_finite():
        raise NonFiniteValueError(value)
    return False


def arithmetic_for(*sequences: Iterable[Any], epsilon: float | None = None) -> Arithmetic:
    """Pick the comparison strategy from the kind of elements involved.

    Any floating element (Python or numpy) switches the whole comparison to
    :class:`TolerantArithmetic`; otherwise comparisons are exact. NaN and
    infinities raise :class:`NonFiniteValueError`.
    """
    inexact = False
    for seq in sequences:
        for value in seq:
            if _is_inexact(value):
                inexact = True
    if inexact:
        return TolerantArithmetic(FLOAT_EPSILON if epsilon is None else epsilon)
    return EXACT

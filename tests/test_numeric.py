from decimal import Decimal
from fractions import Fraction
import math

import pytest

from rollcount.constants import FLOAT_EPSILON
from rollcount.planning.errors import NonFiniteValueError
from rollcount.planning.numeric import ExactArithmetic, TolerantArithmetic, arithmetic_for


def test_integers_select_exact_comparison():
    arith = arithmetic_for([1, 2, 3], [4, 5, 6])
    assert isinstance(arith, ExactArithmetic)
    assert arith.sign(-3) == -1
    assert arith.sign(0) == 0
    assert arith.is_zero(0)
    assert not arith.is_zero(1)


def test_exact_types_stay_exact():
    assert isinstance(arithmetic_for([Fraction(1, 3)], [Fraction(2, 3)]), ExactArithmetic)
    assert isinstance(arithmetic_for([Decimal("1.5")], [Decimal("2.5")]), ExactArithmetic)


def test_any_float_selects_tolerant_comparison_with_default_epsilon():
    arith = arithmetic_for([1, 2], [1, 2.5])
    assert isinstance(arith, TolerantArithmetic)
    assert arith.epsilon == FLOAT_EPSILON


def test_epsilon_override():
    arith = arithmetic_for([1.0], [2.0], epsilon=0.5)
    assert arith.is_zero(0.4)
    assert not arith.is_zero(0.6)


def test_tolerant_deadband_never_orders_near_equal_values():
    arith = TolerantArithmetic(1e-4)
    assert arith.sign(5e-5) == 0
    assert arith.sign(-5e-5) == 0
    assert not arith.less(1.0, 1.00005)
    assert not arith.greater(1.00005, 1.0)
    assert arith.equal(0.1 + 0.2, 0.3)
    assert arith.less(1.0, 1.001)


def test_tolerant_rejects_non_positive_epsilon():
    with pytest.raises(ValueError):
        TolerantArithmetic(0.0)


def test_closest_to_zero_for_both_signs():
    arith = ExactArithmetic()
    assert arith.closest_to_zero(41, 298) == 41
    assert arith.closest_to_zero(-29, -140) == -29
    assert arith.closest_to_zero(-36, -29) == -29


def test_zero_is_derived_from_sample():
    assert ExactArithmetic().zero(7) == 0
    assert TolerantArithmetic().zero(2.5) == 0.0
    assert isinstance(ExactArithmetic().zero(Fraction(1, 2)), Fraction)


def test_sequences_equal_uses_tolerance():
    arith = TolerantArithmetic(1e-4)
    assert arith.sequences_equal([1.0, 2.0], [1.00001, 1.99999])
    assert not arith.sequences_equal([1.0, 2.0], [1.0])
    assert not arith.sequences_equal([1.0], [1.1])


def test_non_numeric_elements_are_rejected():
    with pytest.raises(TypeError):
        arithmetic_for(["a"], ["b"])
    with pytest.raises(TypeError):
        arithmetic_for([True], [False])
    with pytest.raises(TypeError):
        arithmetic_for([1j], [2j])


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, Decimal("NaN"), Decimal("-Infinity")])
def test_non_finite_elements_are_rejected(bad):
    with pytest.raises(NonFiniteValueError) as excinfo:
        arithmetic_for([0.5, 1.0], [bad, 2.0])
    assert excinfo.value.value is bad


def test_huge_integers_stay_exact():
    assert isinstance(arithmetic_for([10 ** 400], [1]), ExactArithmetic)

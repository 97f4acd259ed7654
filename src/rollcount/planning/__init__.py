from __future__ import annotations

from rollcount.planning.apply import apply_delta
from rollcount.planning.errors import (
    LengthMismatchError,
    NonFiniteValueError,
    PlanError,
    PolicyAbstainedError,
    RangeMappingError,
    RangeOutOfBoundsError,
)
from rollcount.planning.gaps import compute_gaps
from rollcount.planning.numeric import Arithmetic, ExactArithmetic, TolerantArithmetic, arithmetic_for
from rollcount.planning.plan import Plan, PlanStep, SelectionPolicy, build_plan
from rollcount.planning.policies import POLICIES, first_option, policy_by_name
from rollcount.planning.runs import RunOption, find_runs
from rollcount.planning.spans import Span, map_span

__all__ = [
    "Arithmetic",
    "ExactArithmetic",
    "LengthMismatchError",
    "NonFiniteValueError",
    "POLICIES",
    "Plan",
    "PlanError",
    "PlanStep",
    "PolicyAbstainedError",
    "RangeMappingError",
    "RangeOutOfBoundsError",
    "RunOption",
    "SelectionPolicy",
    "Span",
    "TolerantArithmetic",
    "apply_delta",
    "arithmetic_for",
    "build_plan",
    "compute_gaps",
    "find_runs",
    "first_option",
    "map_span",
    "policy_by_name",
]

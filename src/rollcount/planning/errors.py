from __future__ import annotations

from typing import Any, Sequence


class PlanError(ValueError):
    """Base class for recoverable planning failures surfaced to the caller."""


class LengthMismatchError(PlanError):
    def __init__(self, current_len: int, target_len: int):
        super().__init__(f"Sequences differ in length: current={current_len}, target={target_len}")
        self.current_len = current_len
        self.target_len = target_len


class RangeMappingError(PlanError):
    """A span could not be resolved against the bounds of a compared sequence."""


class RangeOutOfBoundsError(PlanError):
    """An apply was asked to modify positions outside the sequence."""


class PolicyAbstainedError(PlanError):
    def __init__(self, options: Sequence[Any]):
        super().__init__(f"Selection policy declined to choose among {len(options)} option(s)")
        self.options = tuple(options)


class NonFiniteValueError(PlanError):
    """NaN or an infinity was given where a plan needs a finite value."""

    def __init__(self, value: Any):
        super().__init__(f"Cannot plan over non-finite value {value!r}")
        self.value = value

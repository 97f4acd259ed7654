"""Plan construction: repeatedly move one policy-selected run until converged.

The loop is a small state machine. A state is a snapshot of the values, the
initial state is ``current``, a state with no runs left is terminal, and the
only transition applies one run's delta to produce the next snapshot.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, Tuple

from rollcount.planning.apply import apply_delta
from rollcount.planning.errors import LengthMismatchError, PolicyAbstainedError
from rollcount.planning.numeric import Arithmetic, arithmetic_for
from rollcount.planning.runs import RunOption, find_runs
from rollcount.planning.spans import Span

logger = logging.getLogger(__name__)

SelectionPolicy = Callable[[Sequence[RunOption]], Optional[RunOption]]


@dataclass(frozen=True, slots=True)
class PlanStep:
    span: Span
    delta: Any
    snapshot: Tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class Plan:
    """Ordered record of applied moves and the snapshot each one produced."""

    initial: Tuple[Any, ...]
    target: Tuple[Any, ...]
    steps: Tuple[PlanStep, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def spans(self) -> list[Span]:
        return [step.span for step in self.steps]

    @property
    def deltas(self) -> list[Any]:
        return [step.delta for step in self.steps]

    @property
    def snapshots(self) -> list[Tuple[Any, ...]]:
        return [step.snapshot for step in self.steps]

    @property
    def final(self) -> Tuple[Any, ...]:
        if not self.steps:
            return self.initial
        return self.steps[-1].snapshot

    def before(self, step_index: int) -> Tuple[Any, ...]:
        """Snapshot in effect before ``step_index`` is applied."""
        if step_index <= 0:
            return self.initial
        return self.steps[step_index - 1].snapshot

    def frame(self, step_index: int, progress: float) -> Tuple[Any, ...]:
        """Values partway through ``step_index``; ``progress`` is clamped to 0..1.

        Moving cells travel linearly from the previous snapshot toward the
        step's snapshot and never pass it.
        """
        if not 0 <= step_index < len(self.steps):
            raise IndexError(f"step {step_index} outside plan of {len(self.steps)} steps")
        step = self.steps[step_index]
        progress = max(0.0, min(1.0, float(progress)))
        if progress >= 1.0:
            return step.snapshot
        previous = self.before(step_index)
        if progress <= 0.0:
            return previous
        return tuple(
            value + step.delta * progress if step.span.contains(i) else value
            for i, value in enumerate(previous)
        )


def build_plan(
    current: Sequence[Any],
    target: Sequence[Any],
    policy: SelectionPolicy,
    arithmetic: Arithmetic | None = None,
) -> Plan:
    """Build the full plan moving ``current`` onto ``target``.

    Raises ``LengthMismatchError`` when the sequences differ in length and
    ``PolicyAbstainedError`` when ``policy`` returns ``None``. NaN or infinite
    elements raise ``NonFiniteValueError`` up front. No partial plan
    is ever returned.
    """
    if len(current) != len(target):
        raise LengthMismatchError(len(current), len(target))
    detected = arithmetic_for(current, target)
    arith = arithmetic or detected
    initial = tuple(current)
    goal = tuple(target)

    state = initial
    steps: list[PlanStep] = []
    while True:
        options = find_runs(state, goal, arith)
        if not options:
            break
        choice = policy(options)
        if choice is None:
            logger.debug("Policy abstained after %d step(s) with %d option(s)", len(steps), len(options))
            raise PolicyAbstainedError(options)
        if choice not in options:
            raise ValueError(f"Policy returned {choice!r}, which was not offered")
        state = apply_delta(state, choice.delta, choice.span)
        steps.append(PlanStep(choice.span, choice.delta, state))
        logger.debug("Step %d: %r by %r -> %r", len(steps), choice.span, choice.delta, state)

    logger.info("Plan complete: %d value(s) converged in %d step(s)", len(initial), len(steps))
    return Plan(initial=initial, target=goal, steps=tuple(steps))

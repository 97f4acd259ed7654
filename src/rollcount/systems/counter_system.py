import logging
from typing import Any, Sequence

from esper import World

from rollcount.animation_factory import AnimationFactory
from rollcount.components.animation_roll import RollAnimation
from rollcount.components.counter_row import CounterRow
from rollcount.events.bus import (
    EventBus,
    EVENT_ANIMATION_START,
    EVENT_COUNTER_CHANGED,
    EVENT_COUNTER_PLAN_FAILED,
    EVENT_COUNTER_PLAN_READY,
    EVENT_COUNTER_RETARGET,
    EVENT_COUNTER_STEP_APPLIED,
)
from rollcount.planning.errors import (
    LengthMismatchError,
    NonFiniteValueError,
    PlanError,
    PolicyAbstainedError,
)
from rollcount.planning.numeric import arithmetic_for
from rollcount.planning.plan import Plan, build_plan
from rollcount.planning.policies import POLICIES, policy_by_name

logger = logging.getLogger(__name__)


class CounterSystem:
    """Turns retarget requests into roll plans for counter rows.

    Logic:
      - On EVENT_COUNTER_RETARGET: a roll still playing for the row lands the
        step it is partway through, then is dropped. Planning starts from the
        row's committed values, then the plan is announced.
      - Failures never touch the row; they are reported via EVENT_COUNTER_PLAN_FAILED.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.factory = AnimationFactory(world)
        self.event_bus.subscribe(EVENT_COUNTER_RETARGET, self.on_retarget)

    def on_retarget(self, sender, **kwargs):
        entity = kwargs.get('entity')
        target = kwargs.get('target')
        if entity is None or target is None:
            return
        try:
            row = self.world.component_for_entity(entity, CounterRow)
        except KeyError:
            return

        running = self.factory.find_roll(entity)
        if running is not None:
            self._settle_roll(running, row)
            self.factory.discard_roll(running)

        policy_name = kwargs.get('policy') or row.policy
        try:
            plan = self.plan_for(row, target, policy_name)
        except (ValueError, TypeError) as exc:
            reason = self._failure_reason(exc, policy_name)
            logger.warning("Counter %s could not be retargeted (%s): %s", entity, reason, exc)
            self.event_bus.emit(EVENT_COUNTER_PLAN_FAILED, entity=entity, reason=reason, error=exc)
            return

        self.event_bus.emit(
            EVENT_COUNTER_PLAN_READY,
            entity=entity,
            steps=len(plan.steps),
            spans=plan.spans,
            deltas=plan.deltas,
        )
        if plan.steps:
            self.event_bus.emit(
                EVENT_ANIMATION_START,
                kind='roll',
                items=[entity],
                meta={'plan': plan, 'policy': policy_name},
            )

    def _settle_roll(self, ent: int, row: CounterRow) -> None:
        roll = self.world.component_for_entity(ent, RollAnimation)
        if roll.done or roll.linear <= 0.0:
            return
        step = roll.plan.steps[roll.step_index]
        row.values = step.snapshot
        logger.debug("Counter %s landed step %d early for a retarget", roll.row_entity, roll.step_index)
        self.event_bus.emit(
            EVENT_COUNTER_STEP_APPLIED,
            entity=roll.row_entity,
            index=roll.step_index,
            span=step.span,
            delta=step.delta,
            values=step.snapshot,
        )
        self.event_bus.emit(EVENT_COUNTER_CHANGED, entity=roll.row_entity, values=step.snapshot, reason='roll_interrupted')

    def plan_for(self, row: CounterRow, target: Sequence[Any], policy_name: str) -> Plan:
        policy = policy_by_name(policy_name)
        if len(row.values) != len(target):
            raise LengthMismatchError(len(row.values), len(target))
        arithmetic = arithmetic_for(row.values, target, epsilon=row.epsilon)
        return build_plan(row.values, target, policy, arithmetic)

    @staticmethod
    def _failure_reason(exc: Exception, policy_name: str) -> str:
        if policy_name not in POLICIES:
            return 'unknown_policy'
        if isinstance(exc, LengthMismatchError):
            return 'length_mismatch'
        if isinstance(exc, PolicyAbstainedError):
            return 'policy_abstained'
        if isinstance(exc, NonFiniteValueError):
            return 'invalid_values'
        if isinstance(exc, PlanError):
            return 'invalid_range'
        if isinstance(exc, TypeError):
            return 'invalid_values'
        return 'invalid_request'

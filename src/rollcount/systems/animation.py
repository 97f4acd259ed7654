import logging

from esper import World

from rollcount.animation_factory import AnimationFactory
from rollcount.components.animation_roll import RollAnimation
from rollcount.components.counter_row import CounterRow
from rollcount.components.duration import Duration
from rollcount.constants import ROLL_STEP_DURATION
from rollcount.events.bus import (
    EventBus,
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_COUNTER_CHANGED,
    EVENT_COUNTER_STEP_APPLIED,
    EVENT_TICK,
)

logger = logging.getLogger(__name__)


class AnimationSystem:
    """Plays roll plans back over time; each roll is its own entity.

    A step's snapshot is committed to the row only once the step has fully
    played, so the row never holds a value a plan step has not reached.
    """
    def __init__(self, world: World, event_bus: EventBus, step_duration: float = ROLL_STEP_DURATION):
        self.world = world
        self.event_bus = event_bus
        self.step_duration = step_duration
        self.factory = AnimationFactory(world)
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_ANIMATION_START, self.on_animation_start)

    def on_animation_start(self, sender, **kwargs):
        if kwargs.get('kind') != 'roll':
            return
        plan = (kwargs.get('meta') or {}).get('plan')
        if plan is None:
            return
        for row_entity in kwargs.get('items', []):
            existing = self.factory.find_roll(row_entity)
            if existing is not None:
                self.factory.discard_roll(existing)
            self.factory.create_roll(row_entity, plan, self.step_duration)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        for ent, roll in list(self.world.get_component(RollAnimation)):
            try:
                row = self.world.component_for_entity(roll.row_entity, CounterRow)
            except KeyError:
                # Row vanished mid-roll; nothing left to animate.
                self.factory.discard_roll(ent)
                continue
            duration = self.world.component_for_entity(ent, Duration).value
            if duration > 0:
                roll.linear += dt / duration
            else:
                roll.linear = float(len(roll.plan.steps))
            while roll.linear >= 1.0 and not roll.done:
                self._commit_step(roll, row)
                roll.linear -= 1.0
                roll.step_index += 1
            if roll.done:
                roll.linear = 0.0
                self.factory.discard_roll(ent)
                logger.debug("Roll for counter %s finished after %d step(s)", roll.row_entity, len(roll.plan.steps))
                self.event_bus.emit(
                    EVENT_ANIMATION_COMPLETE,
                    kind='roll',
                    items=[roll.row_entity],
                    meta={'plan': roll.plan},
                )

    def _commit_step(self, roll: RollAnimation, row: CounterRow) -> None:
        step = roll.plan.steps[roll.step_index]
        row.values = step.snapshot
        self.event_bus.emit(
            EVENT_COUNTER_STEP_APPLIED,
            entity=roll.row_entity,
            index=roll.step_index,
            span=step.span,
            delta=step.delta,
            values=step.snapshot,
        )
        self.event_bus.emit(EVENT_COUNTER_CHANGED, entity=roll.row_entity, values=step.snapshot, reason='roll_step')

from esper import World

from rollcount.components.counter_row import CounterRow
from rollcount.constants import KEY_P, KEY_SPACE
from rollcount.events.bus import (
    EventBus,
    EVENT_COUNTER_RETARGET,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
)
from rollcount.world import counter_entities, random_target

# Policies the P key cycles through, in order.
POLICY_CYCLE = ("first", "last", "widest", "largest_delta")


class InputSystem:
    """Demo controls: SPACE retargets every row, P cycles the selection policy,
    a left click on a cell retargets only that cell's row."""
    def __init__(self, world: World, event_bus: EventBus, window=None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_key_press(self, sender, **kwargs):
        key = kwargs.get('key')
        if key == KEY_SPACE:
            for ent in counter_entities(self.world):
                self.retarget(ent)
        elif key == KEY_P:
            self.cycle_policy()

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x'); y = kwargs.get('y')
        if x is None or y is None or kwargs.get('button', 1) != 1:
            return
        render_system = getattr(self.window, 'render_system', None)
        if render_system is None:
            return
        cell = render_system.counter_renderer.cell_at(x, y)
        if cell is not None:
            self.retarget(cell[0])

    def retarget(self, entity: int) -> None:
        try:
            row = self.world.component_for_entity(entity, CounterRow)
        except KeyError:
            return
        self.event_bus.emit(EVENT_COUNTER_RETARGET, entity=entity, target=random_target(self.world, row))

    def cycle_policy(self) -> str:
        entities = counter_entities(self.world)
        if not entities:
            return POLICY_CYCLE[0]
        current = self.world.component_for_entity(entities[0], CounterRow).policy
        try:
            nxt = POLICY_CYCLE[(POLICY_CYCLE.index(current) + 1) % len(POLICY_CYCLE)]
        except ValueError:
            nxt = POLICY_CYCLE[0]
        for ent in entities:
            self.world.component_for_entity(ent, CounterRow).policy = nxt
        return nxt

import random
from typing import Any, Iterable, Sequence, Tuple

from esper import World
from rollcount.events.bus import EventBus
from rollcount.components.counter_row import CounterRow
from rollcount.constants import DEFAULT_POLICY, DEMO_VALUE_MAX, DEMO_VALUE_MIN

DEMO_ROWS: Tuple[Tuple[str, Tuple[Any, ...]], ...] = (
    ("scores", (1, 23, 53, 123, 412, 8, 231, 23, 1234, 43, 1, 3)),
    ("levels", (32, 152, 68, 8)),
    ("ratios", (0.25, 0.5, 0.75, 1.0, 1.25)),
)


def create_world(
    event_bus: EventBus,
    rows: Iterable[Tuple[str, Sequence[Any]]] | None = None,
    *,
    policy: str = DEFAULT_POLICY,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding one CounterRow entity per ``(label, values)`` pair."""
    world = World()
    setattr(world, "random", rng or random.Random())
    for label, values in (DEMO_ROWS if rows is None else rows):
        world.create_entity(CounterRow(values=tuple(values), label=label, policy=policy))
    return world


def counter_entities(world: World) -> list[int]:
    """Counter row entities in creation order."""
    return sorted(ent for ent, _ in world.get_component(CounterRow))


def random_target(world: World, row: CounterRow) -> tuple:
    """Fresh target for ``row`` of the same length and element kind."""
    rng: random.Random = getattr(world, "random", None) or random.Random()
    if any(isinstance(v, float) for v in row.values):
        return tuple(round(rng.uniform(0.0, 2.0), 2) for _ in row.values)
    return tuple(rng.randint(DEMO_VALUE_MIN, DEMO_VALUE_MAX) for _ in row.values)

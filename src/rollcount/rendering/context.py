from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from esper import World

from rollcount.components.animation_roll import RollAnimation


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    world: World
    window_width: int
    window_height: int
    roll_by_row: Dict[int, RollAnimation] = field(default_factory=dict)
    failures: Dict[int, str] = field(default_factory=dict)


def collect_rolls(world: World) -> Dict[int, RollAnimation]:
    """Map each counter row entity to the roll currently playing on it."""
    return {roll.row_entity: roll for _, roll in world.get_component(RollAnimation)}


def build_render_context(
    world: World,
    window_width: int,
    window_height: int,
    *,
    failures: Dict[int, str] | None = None,
) -> RenderContext:
    """Populate a RenderContext for the current frame."""
    return RenderContext(
        world=world,
        window_width=window_width,
        window_height=window_height,
        roll_by_row=collect_rolls(world),
        failures=dict(failures or {}),
    )

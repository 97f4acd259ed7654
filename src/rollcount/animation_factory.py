from esper import World
from rollcount.components.animation_roll import RollAnimation
from rollcount.components.duration import Duration
from rollcount.constants import ROLL_STEP_DURATION
from rollcount.planning.plan import Plan


class AnimationFactory:
    def __init__(self, world: World):
        self.world = world

    def create_roll(self, row_entity: int, plan: Plan, duration: float = ROLL_STEP_DURATION) -> int:
        """Spawn a roll entity; ``duration`` applies to each plan step."""
        ent = self.world.create_entity()
        self.world.add_component(ent, RollAnimation(row_entity=row_entity, plan=plan))
        self.world.add_component(ent, Duration(duration))
        return ent

    def find_roll(self, row_entity: int) -> int | None:
        for ent, roll in self.world.get_component(RollAnimation):
            if roll.row_entity == row_entity:
                return ent
        return None

    def discard_roll(self, ent: int) -> None:
        try:
            self.world.delete_entity(ent, immediate=True)
        except KeyError:
            pass

from dataclasses import dataclass

from rollcount.planning.plan import Plan


@dataclass(slots=True)
class RollAnimation:
    row_entity: int
    plan: Plan
    step_index: int = 0
    linear: float = 0.0  # 0..1 within the current step

    @property
    def done(self) -> bool:
        return self.step_index >= len(self.plan.steps)

    def current_values(self):
        if self.done:
            return self.plan.final
        return self.plan.frame(self.step_index, self.linear)

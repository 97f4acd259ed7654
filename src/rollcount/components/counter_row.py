from dataclasses import dataclass
from typing import Any, Tuple

from rollcount.constants import DEFAULT_POLICY


@dataclass(slots=True)
class CounterRow:
    """A row of numbers drawn as adjacent cells that roll toward new targets.

    values: the committed values; only replaced, never mutated, as plan steps land.
    policy: name of the selection policy used when retargeting this row.
    epsilon: float tolerance override; ``None`` uses the global default.
    """
    values: Tuple[Any, ...]
    label: str = ""
    policy: str = DEFAULT_POLICY
    epsilon: float | None = None

    def __post_init__(self) -> None:
        self.values = tuple(self.values)

from dataclasses import dataclass


@dataclass(slots=True)
class Duration:
    """Seconds an animation (or each of its steps) takes to play."""
    value: float

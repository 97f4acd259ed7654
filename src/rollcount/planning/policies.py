from __future__ import annotations

from typing import Dict, Optional, Sequence

from rollcount.planning.plan import SelectionPolicy
from rollcount.planning.runs import RunOption


def first_option(options: Sequence[RunOption]) -> Optional[RunOption]:
    """Leftmost run; yields a deterministic left-to-right roll."""
    return options[0] if options else None


def last_option(options: Sequence[RunOption]) -> Optional[RunOption]:
    return options[-1] if options else None


def widest_option(options: Sequence[RunOption]) -> Optional[RunOption]:
    """Longest run, ties resolved leftmost."""
    if not options:
        return None
    return max(options, key=len)


def largest_delta_option(options: Sequence[RunOption]) -> Optional[RunOption]:
    if not options:
        return None
    return max(options, key=lambda option: abs(option.delta))


def abstain(options: Sequence[RunOption]) -> Optional[RunOption]:
    return None


POLICIES: Dict[str, SelectionPolicy] = {
    "first": first_option,
    "last": last_option,
    "widest": widest_option,
    "largest_delta": largest_delta_option,
    "abstain": abstain,
}


def policy_by_name(name: str) -> SelectionPolicy:
    try:
        return POLICIES[name]
    except KeyError as exc:
        raise ValueError(f"Unknown selection policy '{name}'") from exc

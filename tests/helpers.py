from __future__ import annotations

from typing import Any, Dict, List

from rollcount.events.bus import EVENT_TICK, EventBus


def drive(bus: EventBus, ticks: int, dt: float = 0.02) -> None:
    """Emit ``ticks`` frame ticks of ``dt`` seconds each."""
    for _ in range(ticks):
        bus.emit(EVENT_TICK, dt=dt)


def record_events(bus: EventBus, *names: str) -> List[Dict[str, Any]]:
    """Subscribe a recorder to ``names``; each payload gains an ``event`` key."""

    received: List[Dict[str, Any]] = []
    for name in names:
        def handler(sender, _name=name, **kwargs):
            received.append({"event": _name, **kwargs})
        bus.subscribe(name, handler)
    return received

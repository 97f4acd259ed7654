from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody holds a reference to alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"                      # payload: key=int, modifiers=int
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button


# ============================================================================
# COUNTERS & PLANS
# ============================================================================
EVENT_COUNTER_RETARGET = "counter_retarget"        # payload: entity=int, target=Sequence, policy=str|None
EVENT_COUNTER_PLAN_READY = "counter_plan_ready"    # payload: entity=int, steps=int, spans=list[Span], deltas=list
EVENT_COUNTER_PLAN_FAILED = "counter_plan_failed"  # payload: entity=int, reason=str, error=Exception
EVENT_COUNTER_STEP_APPLIED = "counter_step_applied"  # payload: entity=int, index=int, span=Span, delta, values=tuple
EVENT_COUNTER_CHANGED = "counter_changed"          # payload: entity=int, values=tuple, reason=str


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"          # payload: kind=str, items=list[int], meta=dict
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, items=list[int], meta=dict
